"""Error codes, messages and exception types for selector validation.

Every failure carries a kebab-case ``code``. The code is the stable key a
reporting layer translates; ``generate_error_message`` only provides the
English fallback text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import ValidationContext


def generate_error_message(code: str, name: str | None = None, token: str | None = None) -> str:
    """Generate human-readable error message from error code.

    Args:
        code: The error code string (kebab-case format)
        name: Optional selector or pseudo name the error is about
        token: Optional offending piece of input

    Returns:
        Human-readable error message string
    """
    messages = {
        # ================================================================
        # NAME ERRORS
        # ================================================================
        "unknown-pseudo-class": f"Unknown pseudo-class :{name}",
        "unknown-pseudo-element": f"Unknown pseudo-element ::{name}",
        "unknown-pseudo-function": f"Unknown or unsupported pseudo-function :{name}()",
        # ================================================================
        # MISSING INPUT
        # ================================================================
        "missing-pseudo-function-name": "Missing pseudo-function name",
        "missing-pseudo-argument": f"Missing argument for :{name}()",
        "empty-selector": "Empty selector",
        # ================================================================
        # ARGUMENT SYNTAX
        # ================================================================
        "invalid-lang-argument": f"Invalid language tag in :{name}(): unexpected {token!r}",
        "invalid-nth-argument": f"Invalid an+b expression in :{name}(): unexpected {token!r}",
        "invalid-not-argument": f"Invalid selector in :{name}(): {token}",
        "nested-negation": f":{name}() cannot contain another negation",
        "not-a-simple-selector": f":{name}() only accepts a single simple selector",
        "pseudo-element-in-negation": f":{name}() cannot contain the pseudo-element {token}",
        # ================================================================
        # SELECTOR SYNTAX
        # ================================================================
        "unexpected-character": f"Unexpected character {token!r}",
        "unterminated-string": "Unterminated string",
        "expected-identifier": f"Expected identifier after {token}",
        "expected-closing-paren": "Expected )",
        "unexpected-token": f"Unexpected token {token}",
        "expected-selector-after-combinator": f"Expected selector after combinator {token!r}",
        "unsupported-attribute-selector": "Attribute selectors are not supported",
    }

    # Return message or fall back to the code itself if not found
    return messages.get(code, code)


class SelectorError(ValueError):
    """Raised when a selector, a pseudo name or a pseudo argument is invalid."""

    code: str
    name: str | None
    value: str | None
    token: str | None
    position: int | None
    context: ValidationContext | None
    message: str

    def __init__(
        self,
        code: str,
        *,
        name: str | None = None,
        value: str | None = None,
        token: str | None = None,
        position: int | None = None,
        context: ValidationContext | None = None,
    ) -> None:
        self.code = code
        self.name = name
        self.value = value
        self.token = token
        self.position = position
        self.context = context
        self.message = generate_error_message(code, name=name, token=token)
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.position is not None:
            return f"{self.message} at position {self.position}"
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, position={self.position})"

    def relocated(self, offset: int) -> SelectorError:
        """Return a copy positioned relative to ``offset`` in an enclosing text."""
        position = offset + (self.position or 0)
        return type(self)(
            self.code,
            name=self.name,
            value=self.value,
            token=self.token,
            position=position,
            context=self.context,
        )


class UnknownNameError(SelectorError):
    """A pseudo name is not admitted by the active CSS level or not constructible."""


class MissingInputError(SelectorError):
    """A pseudo name or a required argument is absent."""


class ArgumentSyntaxError(SelectorError):
    """A pseudo-function argument does not match the function's grammar."""
