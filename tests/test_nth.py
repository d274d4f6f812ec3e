"""Tests for the an+b argument grammar."""

import pytest

from csspseudo.errors import ArgumentSyntaxError, MissingInputError
from csspseudo.nth import NthExpression, parse_nth_expression


class TestParseNthExpression:
    """Tests for parse_nth_expression()."""

    @pytest.mark.parametrize(
        "text,a,b",
        [
            ("2n+1", 2, 1),
            ("odd", 2, 1),
            ("EVEN", 2, 0),
            (" even ", 2, 0),
            ("n", 1, 0),
            ("+n", 1, 0),
            ("-n+3", -1, 3),
            ("n+3", 1, 3),
            ("3", 0, 3),
            ("-2", 0, -2),
            ("+5", 0, 5),
            (" 2n - 1 ", 2, -1),
            ("10N+0", 10, 0),
            ("-2n-3", -2, -3),
        ],
    )
    def test_valid(self, text, a, b):
        assert parse_nth_expression("nth-child", text) == NthExpression(a, b)

    @pytest.mark.parametrize(
        "text,position,token",
        [
            ("foo", 0, "foo"),
            ("2n+", 3, "end of argument"),
            ("2n1", 2, "1"),
            ("n+-1", 2, "-1"),
            ("2 n", 2, "n"),
            ("2n+1x", 4, "x"),
            ("odd1", 0, "odd1"),
        ],
    )
    def test_invalid_reports_token(self, text, position, token):
        with pytest.raises(ArgumentSyntaxError) as excinfo:
            parse_nth_expression("nth-of-type", text)
        error = excinfo.value
        assert error.code == "invalid-nth-argument"
        assert error.position == position
        assert error.token == token
        assert error.name == "nth-of-type"
        assert repr(token) in error.message

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_missing(self, text):
        with pytest.raises(MissingInputError) as excinfo:
            parse_nth_expression("nth-child", text)
        assert excinfo.value.code == "missing-pseudo-argument"


class TestNthExpression:
    """Tests for NthExpression."""

    def test_matches_positive_step(self):
        odd = NthExpression(2, 1)
        assert [i for i in range(1, 8) if odd.matches(i)] == [1, 3, 5, 7]

    def test_matches_negative_step(self):
        first_three = NthExpression(-1, 3)
        assert [i for i in range(1, 8) if first_three.matches(i)] == [1, 2, 3]

    def test_matches_constant(self):
        assert [i for i in range(1, 8) if NthExpression(0, 4).matches(i)] == [4]

    @pytest.mark.parametrize(
        "a,b,text",
        [(2, 1, "2n+1"), (-1, 3, "-n+3"), (0, 5, "5"), (1, 0, "n"), (2, -1, "2n-1")],
    )
    def test_str(self, a, b, text):
        assert str(NthExpression(a, b)) == text

    def test_equality_and_hash(self):
        assert NthExpression(2, 1) == NthExpression(2, 1)
        assert NthExpression(2, 1) != NthExpression(2, 0)
        assert len({NthExpression(2, 1), NthExpression(2, 1)}) == 1


class TestNonAsciiAndOversizedNumbers:
    """Digits outside ASCII and huge integers are argument errors, not crashes."""

    @pytest.mark.parametrize(
        "text,position",
        [
            ("²n+1", 0),
            ("2n+²", 3),
            ("٣", 0),
            ("1" * 5000, 0),
            ("1" * 5000 + "n", 0),
            ("2n+" + "1" * 5000, 3),
        ],
    )
    def test_rejected(self, text, position):
        with pytest.raises(ArgumentSyntaxError) as excinfo:
            parse_nth_expression("nth-child", text)
        assert excinfo.value.code == "invalid-nth-argument"
        assert excinfo.value.position == position
