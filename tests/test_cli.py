"""Tests for the csspseudo command line."""

import pytest

from csspseudo.__main__ import main


class TestList:
    """Tests for --list."""

    def test_functions_for_css21(self, capsys):
        main(["--list", "functions", "--css-version", "css21"])
        assert capsys.readouterr().out == "lang\n"

    def test_profile_classes(self, capsys):
        main(["--profile", "mobile", "--list", "classes"])
        assert capsys.readouterr().out == "active\nfocus\nlink\nvisited\n"

    def test_no_table(self, capsys):
        main(["--list", "exceptions", "--css-version", "css1"])
        assert capsys.readouterr().out == ""


class TestCheck:
    """Tests for checking selectors."""

    def test_valid(self, capsys):
        assert main(["a:hover", "li:nth-child(odd)"]) is None
        assert capsys.readouterr().err == ""

    def test_invalid(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["a:hover", "a:bogus", "li:nth-child(x)"])
        assert excinfo.value.code == 1
        err = capsys.readouterr().err.splitlines()
        assert len(err) == 2
        assert "unknown-pseudo-class" in err[0]
        assert "invalid-nth-argument" in err[1]

    def test_strict_stops_at_first(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--strict", "a:bogus", "b:bogus"])
        assert excinfo.value.code == 1
        assert len(capsys.readouterr().err.splitlines()) == 1

    def test_version_applies(self, capsys):
        with pytest.raises(SystemExit):
            main(["--css-version", "css1", "a:hover"])
        assert "unknown-pseudo-class" in capsys.readouterr().err

    def test_no_arguments(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2
