"""Tests for SelectorValidator and SelectorDiagnostic."""

import logging

import pytest

from csspseudo.context import ValidationContext
from csspseudo.diagnostics import SelectorDiagnostic
from csspseudo.parser import SelectorValidator, StrictModeError
from csspseudo.selector import ComplexSelector


class TestSelectorValidator:
    """Tests for the validation pass."""

    def test_continues_past_bad_selectors(self):
        validator = SelectorValidator()
        results = validator.check_all(["a:hover", "a:bogus", "li:nth-child(foo)", "p::first-line"])
        assert isinstance(results[0], ComplexSelector)
        assert results[1] is None
        assert results[2] is None
        assert isinstance(results[3], ComplexSelector)
        assert [d.code for d in validator.errors] == ["unknown-pseudo-class", "invalid-nth-argument"]
        assert [d.column for d in validator.errors] == [3, 14]
        assert [d.error_class for d in validator.errors] == ["UnknownNameError", "ArgumentSyntaxError"]

    def test_uses_context(self):
        validator = SelectorValidator(ValidationContext("css2"))
        assert validator.check("a:focus") is not None
        assert validator.check("a:target") is None
        assert validator.errors[0].selector == "a:target"

    def test_strict_raises_first_error(self):
        validator = SelectorValidator(strict=True)
        with pytest.raises(StrictModeError) as excinfo:
            validator.check_all(["a:bogus", "b:bogus"])
        error = excinfo.value
        assert error.diagnostic.code == "unknown-pseudo-class"
        assert error.offset == 3
        assert error.text == "a:bogus"
        assert isinstance(error, SyntaxError)

    def test_without_collection(self):
        validator = SelectorValidator(collect_errors=False)
        assert validator.check("a:bogus") is None
        assert validator.errors == []

    def test_logs_rejections(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="csspseudo.parser"):
            SelectorValidator().check("a:bogus")
        assert "Rejected selector 'a:bogus'" in caplog.text


class TestSelectorDiagnostic:
    """Tests for SelectorDiagnostic."""

    def test_str(self):
        diagnostic = SelectorDiagnostic("unknown-pseudo-class", "a:bogus", 3, "Unknown pseudo-class :bogus")
        assert str(diagnostic) == "a:bogus:3: unknown-pseudo-class - Unknown pseudo-class :bogus"

    def test_str_without_message(self):
        assert str(SelectorDiagnostic("empty-selector", "")) == ": empty-selector"

    def test_equality(self):
        assert SelectorDiagnostic("x", "a", 1) == SelectorDiagnostic("x", "a", 1, "other text")
        assert SelectorDiagnostic("x", "a", 1) != SelectorDiagnostic("x", "a", 2)

    def test_as_exception(self):
        exc = SelectorDiagnostic("unknown-pseudo-class", "a:bogus", 3, "Unknown pseudo-class :bogus").as_exception()
        assert exc.msg == "Unknown pseudo-class :bogus"
        assert exc.offset == 3
        assert exc.text == "a:bogus"
        assert exc.filename == "<selector>"

    def test_as_exception_without_location(self):
        exc = SelectorDiagnostic("empty-selector").as_exception()
        assert exc.lineno is None


class TestValidationPassContinues:
    """One unparseable argument must not stop the remaining selectors."""

    @pytest.mark.parametrize("argument,column", [("²", 14), ("2n+²", 17), ("1" * 5000, 14)])
    def test_bad_number_is_recorded(self, argument, column):
        validator = SelectorValidator()
        results = validator.check_all([f"li:nth-child({argument})", "a:hover"])
        assert results[0] is None
        assert isinstance(results[1], ComplexSelector)
        assert [d.code for d in validator.errors] == ["invalid-nth-argument"]
        assert validator.errors[0].column == column
