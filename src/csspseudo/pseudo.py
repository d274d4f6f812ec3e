"""Typed pseudo-functions and the dispatcher that builds them from name and argument text.

``new_pseudo_function`` validates the name against a closed set of kinds and
hands the raw argument text to the matching class, which parses it and
raises its own error when the text does not fit its grammar.
"""

from __future__ import annotations

import enum
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from .constants import WHITESPACE
from .errors import ArgumentSyntaxError, MissingInputError, SelectorError, UnknownNameError
from .nth import NthExpression, parse_nth_expression

if TYPE_CHECKING:
    from .context import ValidationContext
    from .selector import SimpleSelector

logger = logging.getLogger(__name__)


class PseudoFunctionKind(enum.Enum):
    LANG = "lang"
    NOT = "not"
    NTH_CHILD = "nth-child"
    NTH_LAST_CHILD = "nth-last-child"
    NTH_OF_TYPE = "nth-of-type"
    NTH_LAST_OF_TYPE = "nth-last-of-type"


class PseudoFunctionSelector:
    """A pseudo-function such as ``:lang(fr)`` with its argument resolved.

    ``value`` is the raw argument text, ``argument`` the parsed form the
    subclass produces from it.
    """

    __slots__ = ("argument", "name", "value")

    kind: ClassVar[PseudoFunctionKind]

    name: str
    value: str | None
    argument: Any

    def __init__(self, name: str, value: str | None, context: ValidationContext | None = None) -> None:
        self.name = name
        self.value = value
        self.argument = self.parse_argument(value, context)

    def parse_argument(self, value: str | None, context: ValidationContext | None) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.argument!r})"

    def __str__(self) -> str:
        return f":{self.name}({self.value or ''})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PseudoFunctionSelector):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name and self.argument == other.argument

    __hash__ = None  # type: ignore[assignment]

    def _missing_argument(self, value: str | None, context: ValidationContext | None) -> MissingInputError:
        return MissingInputError("missing-pseudo-argument", name=self.name, value=value, context=context)


def _is_name_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_" or ord(ch) > 127


def _starts_identifier(text: str, pos: int, end: int) -> bool:
    # A hyphen must be followed by a name-start character or another hyphen
    if text[pos] == "-":
        return pos + 1 < end and (text[pos + 1] == "-" or _is_name_start(text[pos + 1]))
    return _is_name_start(text[pos])


def _is_lang_char(ch: str) -> bool:
    return ch.isalnum() or ch in "-_" or ord(ch) > 127


class PseudoFunctionLang(PseudoFunctionSelector):
    """``:lang(tag)``; the tag is an identifier or a quoted string."""

    __slots__ = ()

    kind = PseudoFunctionKind.LANG

    def parse_argument(self, value: str | None, context: ValidationContext | None) -> str:
        if value is None or not value.strip(WHITESPACE):
            raise self._missing_argument(value, context)

        def fail(pos: int, token: str) -> ArgumentSyntaxError:
            return ArgumentSyntaxError(
                "invalid-lang-argument",
                name=self.name,
                value=value,
                token=token,
                position=pos,
                context=context,
            )

        pos = len(value) - len(value.lstrip(WHITESPACE))
        end = len(value.rstrip(WHITESPACE))
        quote = value[pos]

        if quote in "\"'":
            start = pos
            pos += 1
            parts: list[str] = []
            while pos < end and value[pos] != quote:
                if value[pos] == "\\" and pos + 1 < end:
                    pos += 1
                parts.append(value[pos])
                pos += 1
            if pos >= end:
                raise fail(start, value[start:end])
            pos += 1
            if pos != end:
                raise fail(pos, value[pos:end])
            return "".join(parts)

        start = pos
        while pos < end and _is_lang_char(value[pos]):
            pos += 1
        if pos == start or not _starts_identifier(value, start, end):
            raise fail(start, value[start:end])
        if pos != end:
            raise fail(pos, value[pos:end])
        return value[start:end]


class PseudoFunctionNot(PseudoFunctionSelector):
    """``:not(simple)``; the argument goes through the ordinary selector parser."""

    __slots__ = ()

    kind = PseudoFunctionKind.NOT

    def _reject(
        self,
        code: str,
        value: str,
        position: int,
        context: ValidationContext | None,
        token: str | None = None,
    ) -> ArgumentSyntaxError:
        return ArgumentSyntaxError(code, name=self.name, value=value, token=token, position=position, context=context)

    def parse_argument(self, value: str | None, context: ValidationContext | None) -> SimpleSelector:
        if value is None or not value.strip(WHITESPACE):
            raise self._missing_argument(value, context)

        # Deferred: the selector parser builds pseudo-functions through this module
        from .selector import SelectorList, SimpleSelector, parse_selector

        try:
            parsed = parse_selector(value, context)
        except SelectorError as e:
            raise self._reject("invalid-not-argument", value, e.position or 0, context, token=e.message) from e

        if isinstance(parsed, SelectorList):
            second = parsed.selectors[1].parts[0][1].selectors[0]
            raise self._reject("not-a-simple-selector", value, second.pos, context)

        if len(parsed.parts) > 1:
            raise self._reject("not-a-simple-selector", value, parsed.parts[1][1].selectors[0].pos, context)

        compound = parsed.parts[0][1]
        if len(compound.selectors) > 1:
            raise self._reject("not-a-simple-selector", value, compound.selectors[1].pos, context)

        simple = compound.selectors[0]
        if simple.type == SimpleSelector.TYPE_PSEUDO_FUNCTION and simple.name == PseudoFunctionKind.NOT.value:
            raise self._reject("nested-negation", value, simple.pos, context)
        if simple.type == SimpleSelector.TYPE_PSEUDO_ELEMENT:
            raise self._reject("pseudo-element-in-negation", value, simple.pos, context, token=str(simple))
        return simple


class PseudoFunctionNth(PseudoFunctionSelector):
    """Shared ``an+b`` argument handling for the nth-child family."""

    __slots__ = ()

    def parse_argument(self, value: str | None, context: ValidationContext | None) -> NthExpression:
        return parse_nth_expression(self.name, value, context)

    def matches(self, index: int) -> bool:
        """Check whether a 1-based position, counted the way this kind counts, is selected."""
        return bool(self.argument.matches(index))


class PseudoFunctionNthChild(PseudoFunctionNth):
    __slots__ = ()

    kind = PseudoFunctionKind.NTH_CHILD


class PseudoFunctionNthLastChild(PseudoFunctionNth):
    __slots__ = ()

    kind = PseudoFunctionKind.NTH_LAST_CHILD


class PseudoFunctionNthOfType(PseudoFunctionNth):
    __slots__ = ()

    kind = PseudoFunctionKind.NTH_OF_TYPE


class PseudoFunctionNthLastOfType(PseudoFunctionNth):
    __slots__ = ()

    kind = PseudoFunctionKind.NTH_LAST_OF_TYPE


_CONSTRUCTORS = MappingProxyType(
    {
        cls.kind: cls
        for cls in (
            PseudoFunctionLang,
            PseudoFunctionNot,
            PseudoFunctionNthChild,
            PseudoFunctionNthLastChild,
            PseudoFunctionNthOfType,
            PseudoFunctionNthLastOfType,
        )
    }
)

_unbuilt = [kind.value for kind in PseudoFunctionKind if kind not in _CONSTRUCTORS]
if _unbuilt:
    raise RuntimeError(f"No pseudo-function class for: {', '.join(_unbuilt)}")


def new_pseudo_function(
    name: str | None,
    value: str | None,
    context: ValidationContext | None = None,
) -> PseudoFunctionSelector:
    """
    Build the pseudo-function named ``name`` from its raw argument text.

    Args:
        name: The exact pseudo-function name, e.g. ``"nth-child"``
        value: The text between the parentheses, passed through unmodified
        context: Validation context carried into raised errors

    Returns:
        The constructed PseudoFunctionSelector subclass instance

    Raises:
        MissingInputError: ``name`` is None or empty
        UnknownNameError: ``name`` is not a kind this module can build
        SelectorError: the argument does not fit the function's grammar
    """
    if not name:
        raise MissingInputError("missing-pseudo-function-name", value=value, context=context)

    try:
        kind = PseudoFunctionKind(name)
    except ValueError:
        logger.debug("Rejected pseudo-function %r", name)
        raise UnknownNameError("unknown-pseudo-function", name=name, value=value, context=context) from None

    logger.debug("Building :%s(%s)", name, value or "")
    return _CONSTRUCTORS[kind](name, value, context)
