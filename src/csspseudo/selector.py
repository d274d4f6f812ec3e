# CSS selector parsing for csspseudo
# Supports the simple selectors whose pseudo names are checked against a CSS level

from __future__ import annotations

from typing import TYPE_CHECKING

from .capabilities import (
    is_pseudo_class,
    is_pseudo_element,
    is_pseudo_function,
    pseudo_element_exceptions,
    pseudo_elements,
)
from .constants import WHITESPACE
from .context import DEFAULT_CONTEXT, ValidationContext
from .errors import MissingInputError, SelectorError, UnknownNameError
from .pseudo import new_pseudo_function

if TYPE_CHECKING:
    from .pseudo import PseudoFunctionSelector


# Token types for the CSS selector lexer
class TokenType:
    TAG: str = "TAG"  # div, span, pseudo names
    ID: str = "ID"  # #foo
    CLASS: str = "CLASS"  # .bar
    UNIVERSAL: str = "UNIVERSAL"  # *
    STRING: str = "STRING"  # raw pseudo-function argument
    COMBINATOR: str = "COMBINATOR"  # >, +, ~, or whitespace (descendant)
    COMMA: str = "COMMA"  # ,
    COLON: str = "COLON"  # :
    DOUBLE_COLON: str = "DOUBLE_COLON"  # ::
    PAREN_OPEN: str = "PAREN_OPEN"  # (
    PAREN_CLOSE: str = "PAREN_CLOSE"  # )
    EOF: str = "EOF"


class Token:
    __slots__ = ("pos", "type", "value")

    type: str
    value: str | None
    pos: int

    def __init__(self, token_type: str, value: str | None = None, pos: int = 0) -> None:
        self.type = token_type
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, pos={self.pos})"


class SelectorTokenizer:
    """Tokenizes a CSS selector string into tokens."""

    __slots__ = ("length", "pos", "selector")

    selector: str
    pos: int
    length: int

    def __init__(self, selector: str) -> None:
        self.selector = selector
        self.pos = 0
        self.length = len(selector)

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < self.length:
            return self.selector[pos]
        return ""

    def _skip_whitespace(self) -> None:
        while self.pos < self.length and self.selector[self.pos] in WHITESPACE:
            self.pos += 1

    def _is_name_start(self, ch: str) -> bool:
        # CSS identifier start: letter, underscore, or non-ASCII
        return ch.isalpha() or ch == "_" or ch == "-" or ord(ch) > 127

    def _is_name_char(self, ch: str) -> bool:
        # CSS identifier continuation: name-start or digit
        return self._is_name_start(ch) or ch.isdigit()

    def _read_name(self) -> str:
        start = self.pos
        while self.pos < self.length and self._is_name_char(self.selector[self.pos]):
            self.pos += 1
        return self.selector[start : self.pos]

    def _read_argument(self) -> str:
        # Read up to the matching ), skipping parens inside quoted strings
        paren_depth = 1
        quote = ""
        arg_start = self.pos
        while self.pos < self.length:
            c = self.selector[self.pos]
            if quote:
                if c == "\\":
                    self.pos += 2
                    continue
                if c == quote:
                    quote = ""
            elif c in "\"'":
                quote = c
            elif c == "(":
                paren_depth += 1
            elif c == ")":
                paren_depth -= 1
                if paren_depth == 0:
                    break
            self.pos += 1

        if self._peek() != ")":
            raise SelectorError("expected-closing-paren", value=self.selector, position=min(self.pos, self.length))
        return self.selector[arg_start : self.pos].rstrip(WHITESPACE)

    def tokenize(self) -> list[Token]:
        tokens: list[Token] = []
        pending_whitespace = False

        while self.pos < self.length:
            ch = self.selector[self.pos]
            start = self.pos

            # Skip whitespace but remember it for combinator detection
            if ch in WHITESPACE:
                pending_whitespace = True
                self._skip_whitespace()
                continue

            # Handle combinators: >, +, ~
            if ch in ">+~":
                pending_whitespace = False
                self.pos += 1
                self._skip_whitespace()
                tokens.append(Token(TokenType.COMBINATOR, ch, start))
                continue

            # Whitespace followed by anything but a combinator or comma is a
            # descendant combinator
            if pending_whitespace and tokens and ch not in ",":
                tokens.append(Token(TokenType.COMBINATOR, " ", start))
            pending_whitespace = False

            if ch == "*":
                self.pos += 1
                tokens.append(Token(TokenType.UNIVERSAL, None, start))
                continue

            if ch == "#" or ch == ".":
                self.pos += 1
                name = self._read_name()
                if not name:
                    raise SelectorError("expected-identifier", value=self.selector, token=ch, position=self.pos)
                tokens.append(Token(TokenType.ID if ch == "#" else TokenType.CLASS, name, start))
                continue

            if ch == "[":
                raise SelectorError("unsupported-attribute-selector", value=self.selector, position=start)

            # Comma (selector grouping)
            if ch == ",":
                self.pos += 1
                self._skip_whitespace()
                tokens.append(Token(TokenType.COMMA, None, start))
                continue

            if ch == ":":
                self.pos += 1
                if self._peek() == ":":
                    self.pos += 1
                    tokens.append(Token(TokenType.DOUBLE_COLON, None, start))
                else:
                    tokens.append(Token(TokenType.COLON, None, start))

                name_start = self.pos
                name = self._read_name()
                if not name:
                    raise SelectorError(
                        "expected-identifier",
                        value=self.selector,
                        token=self.selector[start : self.pos],
                        position=self.pos,
                    )
                tokens.append(Token(TokenType.TAG, name, name_start))

                # Functional pseudo-class: keep the argument text as-is
                if self._peek() == "(":
                    tokens.append(Token(TokenType.PAREN_OPEN, None, self.pos))
                    self.pos += 1
                    self._skip_whitespace()
                    arg_start = self.pos
                    arg = self._read_argument()
                    if arg:
                        tokens.append(Token(TokenType.STRING, arg, arg_start))
                    tokens.append(Token(TokenType.PAREN_CLOSE, None, self.pos))
                    self.pos += 1
                continue

            # Tag name
            if self._is_name_start(ch):
                name = self._read_name()
                tokens.append(Token(TokenType.TAG, name.lower(), start))  # Tags are case-insensitive
                continue

            raise SelectorError("unexpected-character", value=self.selector, token=ch, position=start)

        tokens.append(Token(TokenType.EOF, None, self.length))
        return tokens


# AST Node types for parsed selectors


class SimpleSelector:
    """A single simple selector (tag, id, class, universal, or pseudo)."""

    __slots__ = ("arg", "function", "name", "pos", "type")

    TYPE_TAG: str = "tag"
    TYPE_ID: str = "id"
    TYPE_CLASS: str = "class"
    TYPE_UNIVERSAL: str = "universal"
    TYPE_PSEUDO_CLASS: str = "pseudo-class"
    TYPE_PSEUDO_ELEMENT: str = "pseudo-element"
    TYPE_PSEUDO_FUNCTION: str = "pseudo-function"

    type: str
    name: str | None
    arg: str | None
    function: PseudoFunctionSelector | None
    pos: int

    def __init__(
        self,
        selector_type: str,
        name: str | None = None,
        arg: str | None = None,
        function: PseudoFunctionSelector | None = None,
        pos: int = 0,
    ) -> None:
        self.type = selector_type
        self.name = name
        self.arg = arg  # Raw text between the parentheses of a pseudo-function
        self.function = function
        self.pos = pos

    def __repr__(self) -> str:
        parts = [f"SimpleSelector({self.type!r}"]
        if self.name:
            parts.append(f", name={self.name!r}")
        if self.arg is not None:
            parts.append(f", arg={self.arg!r}")
        parts.append(")")
        return "".join(parts)

    def __str__(self) -> str:
        if self.type == self.TYPE_UNIVERSAL:
            return "*"
        if self.type == self.TYPE_ID:
            return f"#{self.name}"
        if self.type == self.TYPE_CLASS:
            return f".{self.name}"
        if self.type == self.TYPE_PSEUDO_CLASS:
            return f":{self.name}"
        if self.type == self.TYPE_PSEUDO_ELEMENT:
            return f"::{self.name}"
        if self.type == self.TYPE_PSEUDO_FUNCTION:
            return f":{self.name}({self.arg or ''})"
        return self.name or ""

    # Equality ignores pos
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return (
            self.type == other.type
            and self.name == other.name
            and self.arg == other.arg
            and self.function == other.function
        )

    __hash__ = None  # type: ignore[assignment]


class CompoundSelector:
    """A sequence of simple selectors (e.g., div.foo#bar)."""

    __slots__ = ("selectors",)

    selectors: list[SimpleSelector]

    def __init__(self, selectors: list[SimpleSelector] | None = None) -> None:
        self.selectors = selectors or []

    def __repr__(self) -> str:
        return f"CompoundSelector({self.selectors!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundSelector):
            return NotImplemented
        return self.selectors == other.selectors

    __hash__ = None  # type: ignore[assignment]


class ComplexSelector:
    """A chain of compound selectors with combinators."""

    __slots__ = ("parts",)

    parts: list[tuple[str | None, CompoundSelector]]

    def __init__(self) -> None:
        # List of (combinator, compound_selector) tuples
        # First item has combinator=None
        self.parts = []

    def __repr__(self) -> str:
        return f"ComplexSelector({self.parts!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexSelector):
            return NotImplemented
        return self.parts == other.parts

    __hash__ = None  # type: ignore[assignment]


class SelectorList:
    """A comma-separated list of complex selectors."""

    __slots__ = ("selectors",)

    selectors: list[ComplexSelector]

    def __init__(self, selectors: list[ComplexSelector] | None = None) -> None:
        self.selectors = selectors or []

    def __repr__(self) -> str:
        return f"SelectorList({self.selectors!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorList):
            return NotImplemented
        return self.selectors == other.selectors

    __hash__ = None  # type: ignore[assignment]


# Type alias for parsed selectors
ParsedSelector = ComplexSelector | SelectorList


class SelectorParser:
    """Parses a list of tokens into a selector AST, checking pseudo names as it goes."""

    __slots__ = ("context", "pos", "source", "tokens")

    tokens: list[Token]
    pos: int
    context: ValidationContext
    source: str | None

    def __init__(self, tokens: list[Token], context: ValidationContext | None = None, source: str | None = None) -> None:
        self.tokens = tokens
        self.pos = 0
        self.context = context or DEFAULT_CONTEXT
        self.source = source

    def _peek(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return Token(TokenType.EOF)

    def _advance(self) -> Token:
        token = self._peek()
        self.pos += 1
        return token

    def _expect(self, token_type: str) -> Token:
        token = self._peek()
        if token.type != token_type:
            raise SelectorError("unexpected-token", value=self.source, token=token.type, position=token.pos)
        return self._advance()

    def parse(self) -> ParsedSelector:
        """Parse a complete selector (possibly comma-separated list)."""
        selectors = [self._parse_complex_selector()]

        while self._peek().type == TokenType.COMMA:
            self._advance()  # consume comma
            selectors.append(self._parse_complex_selector())

        token = self._peek()
        if token.type != TokenType.EOF:
            raise SelectorError("unexpected-token", value=self.source, token=token.type, position=token.pos)

        if len(selectors) == 1:
            return selectors[0]
        return SelectorList(selectors)

    def _parse_complex_selector(self) -> ComplexSelector:
        """Parse a complex selector (compound selectors with combinators)."""
        complex_sel = ComplexSelector()

        # First compound selector (no combinator)
        compound = self._parse_compound_selector()
        if not compound:
            token = self._peek()
            raise SelectorError("unexpected-token", value=self.source, token=token.type, position=token.pos)
        complex_sel.parts.append((None, compound))

        # Parse combinator + compound selector pairs
        while self._peek().type == TokenType.COMBINATOR:
            combinator = self._advance()
            compound = self._parse_compound_selector()
            if not compound:
                raise SelectorError(
                    "expected-selector-after-combinator",
                    value=self.source,
                    token=combinator.value,
                    position=combinator.pos,
                )
            complex_sel.parts.append((combinator.value, compound))

        return complex_sel

    def _parse_compound_selector(self) -> CompoundSelector | None:
        """Parse a compound selector (sequence of simple selectors)."""
        simple_selectors: list[SimpleSelector] = []

        while True:
            token = self._peek()

            if token.type == TokenType.TAG:
                self._advance()
                simple_selectors.append(SimpleSelector(SimpleSelector.TYPE_TAG, name=token.value, pos=token.pos))

            elif token.type == TokenType.UNIVERSAL:
                self._advance()
                simple_selectors.append(SimpleSelector(SimpleSelector.TYPE_UNIVERSAL, pos=token.pos))

            elif token.type == TokenType.ID:
                self._advance()
                simple_selectors.append(SimpleSelector(SimpleSelector.TYPE_ID, name=token.value, pos=token.pos))

            elif token.type == TokenType.CLASS:
                self._advance()
                simple_selectors.append(SimpleSelector(SimpleSelector.TYPE_CLASS, name=token.value, pos=token.pos))

            elif token.type in (TokenType.COLON, TokenType.DOUBLE_COLON):
                simple_selectors.append(self._parse_pseudo_selector())

            else:
                break

        if not simple_selectors:
            return None
        return CompoundSelector(simple_selectors)

    def _parse_pseudo_selector(self) -> SimpleSelector:
        """Parse :class, ::element or :function(arg), checking the name against the CSS level."""
        marker = self._advance()
        double = marker.type == TokenType.DOUBLE_COLON
        name_token = self._expect(TokenType.TAG)
        # Pseudo names are ASCII case-insensitive
        name = (name_token.value or "").lower()
        version = self.context.version

        if self._peek().type == TokenType.PAREN_OPEN:
            paren = self._advance()
            arg: str | None = None
            arg_pos = paren.pos + 1
            if self._peek().type == TokenType.STRING:
                arg_token = self._advance()
                arg = arg_token.value
                arg_pos = arg_token.pos
            self._expect(TokenType.PAREN_CLOSE)

            if double or not is_pseudo_function(name, version):
                raise UnknownNameError(
                    "unknown-pseudo-element" if double else "unknown-pseudo-function",
                    name=name,
                    value=self.source,
                    position=name_token.pos,
                    context=self.context,
                )
            try:
                function = new_pseudo_function(name, arg, self.context)
            except SelectorError as e:
                raise e.relocated(arg_pos) from e
            return SimpleSelector(
                SimpleSelector.TYPE_PSEUDO_FUNCTION,
                name=name,
                arg=arg,
                function=function,
                pos=marker.pos,
            )

        if double:
            if not is_pseudo_element(name, version):
                raise UnknownNameError(
                    "unknown-pseudo-element",
                    name=name,
                    value=self.source,
                    position=name_token.pos,
                    context=self.context,
                )
            return SimpleSelector(SimpleSelector.TYPE_PSEUDO_ELEMENT, name=name, pos=marker.pos)

        if is_pseudo_class(name, version, self.context.profile):
            return SimpleSelector(SimpleSelector.TYPE_PSEUDO_CLASS, name=name, pos=marker.pos)

        # Legacy single-colon pseudo-elements; CSS1 only has the single-colon form
        exceptions = pseudo_element_exceptions(version)
        if exceptions is None:
            exceptions = pseudo_elements(version)
        if exceptions is not None and name in exceptions:
            return SimpleSelector(SimpleSelector.TYPE_PSEUDO_ELEMENT, name=name, pos=marker.pos)

        raise UnknownNameError(
            "unknown-pseudo-class",
            name=name,
            value=self.source,
            position=name_token.pos,
            context=self.context,
        )


def parse_selector(selector_string: str | None, context: ValidationContext | None = None) -> ParsedSelector:
    """Parse a CSS selector string into an AST.

    Pseudo names are validated against the context's CSS level and profile,
    and every pseudo-function is constructed with its argument checked.
    Positions in raised errors are offsets into ``selector_string``.
    """
    if not selector_string or not selector_string.strip(WHITESPACE):
        raise MissingInputError("empty-selector", value=selector_string, position=0, context=context)

    tokenizer = SelectorTokenizer(selector_string)
    tokens = tokenizer.tokenize()
    parser = SelectorParser(tokens, context, selector_string)
    return parser.parse()
