"""The ``an+b`` argument shared by the nth-child family of pseudo-functions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import ASCII_DIGITS, WHITESPACE
from .errors import ArgumentSyntaxError, MissingInputError

if TYPE_CHECKING:
    from .context import ValidationContext


class NthExpression:
    """A resolved ``an+b`` expression; ``odd`` is 2n+1 and ``even`` is 2n."""

    __slots__ = ("a", "b")

    a: int
    b: int

    def __init__(self, a: int, b: int) -> None:
        self.a = a
        self.b = b

    def __repr__(self) -> str:
        return f"NthExpression(a={self.a}, b={self.b})"

    def __str__(self) -> str:
        if self.a == 0:
            return str(self.b)
        if self.a == 1:
            head = "n"
        elif self.a == -1:
            head = "-n"
        else:
            head = f"{self.a}n"
        if self.b == 0:
            return head
        return f"{head}{self.b:+d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NthExpression):
            return NotImplemented
        return self.a == other.a and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.a, self.b))

    def matches(self, index: int) -> bool:
        """Check if 1-based index matches the An+B formula."""
        a, b = self.a, self.b
        if a == 0:
            return index == b
        # Solve: index = a*n + b for non-negative integer n
        diff = index - b
        if a > 0:
            return diff >= 0 and diff % a == 0
        return diff <= 0 and diff % a == 0


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def _read_digits(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in ASCII_DIGITS:
        pos += 1
    return pos


def _token_at(text: str, pos: int) -> str:
    if pos >= len(text):
        return "end of argument"
    end = pos + 1
    while end < len(text) and text[end] not in WHITESPACE and text[end] not in "+-":
        end += 1
    return text[pos:end]


def parse_nth_expression(name: str, value: str | None, context: ValidationContext | None = None) -> NthExpression:
    """Parse an nth-child argument like '2n+1', 'odd', 'even', '-n + 3' or '3'.

    Positions in raised errors are offsets into ``value`` as given.
    """
    if value is None or not value.strip(WHITESPACE):
        raise MissingInputError("missing-pseudo-argument", name=name, value=value, context=context)

    keyword = value.strip(WHITESPACE).lower()
    if keyword == "odd":
        return NthExpression(2, 1)
    if keyword == "even":
        return NthExpression(2, 0)

    def fail(pos: int) -> ArgumentSyntaxError:
        return ArgumentSyntaxError(
            "invalid-nth-argument",
            name=name,
            value=value,
            token=_token_at(value, pos),
            position=pos,
            context=context,
        )

    def to_int(start: int, end: int) -> int:
        # int() refuses very long digit runs
        try:
            return int(value[start:end])
        except ValueError:
            raise fail(start) from None

    pos = _skip_whitespace(value, 0)
    sign = 1
    if value[pos] in "+-":
        sign = -1 if value[pos] == "-" else 1
        pos += 1

    digits_start = pos
    pos = _read_digits(value, pos)
    digits = value[digits_start:pos]

    if pos < len(value) and value[pos] in "nN":
        a = sign * (to_int(digits_start, digits_start + len(digits)) if digits else 1)
        pos = _skip_whitespace(value, pos + 1)
        b = 0
        if pos < len(value):
            if value[pos] not in "+-":
                raise fail(pos)
            b_sign = -1 if value[pos] == "-" else 1
            pos = _skip_whitespace(value, pos + 1)
            b_start = pos
            pos = _read_digits(value, pos)
            if pos == b_start:
                raise fail(pos)
            b = b_sign * to_int(b_start, pos)
    elif digits:
        a = 0
        b = sign * to_int(digits_start, pos)
    else:
        raise fail(pos)

    pos = _skip_whitespace(value, pos)
    if pos != len(value):
        raise fail(pos)
    return NthExpression(a, b)
