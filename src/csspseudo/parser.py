"""Validation pass over many selectors that keeps going past a bad one."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .context import DEFAULT_CONTEXT, ValidationContext
from .diagnostics import SelectorDiagnostic
from .errors import SelectorError
from .selector import parse_selector

if TYPE_CHECKING:
    from .selector import ParsedSelector

logger = logging.getLogger(__name__)


class StrictModeError(SyntaxError):
    """Raised when strict mode encounters an invalid selector.

    Inherits from SyntaxError to provide Python 3.11+ enhanced error display
    with the offending column highlighted.
    """

    diagnostic: SelectorDiagnostic

    def __init__(self, diagnostic: SelectorDiagnostic) -> None:
        self.diagnostic = diagnostic
        exc = diagnostic.as_exception()
        super().__init__(exc.msg)
        # Copy SyntaxError attributes for enhanced display
        self.filename = exc.filename
        self.lineno = exc.lineno
        self.offset = exc.offset
        self.text = exc.text
        self.end_lineno = getattr(exc, "end_lineno", None)
        self.end_offset = getattr(exc, "end_offset", None)


class SelectorValidator:
    __slots__ = ("collect_errors", "context", "errors", "strict")

    context: ValidationContext
    collect_errors: bool
    strict: bool
    errors: list[SelectorDiagnostic]

    def __init__(
        self,
        context: ValidationContext | None = None,
        *,
        collect_errors: bool = True,
        strict: bool = False,
    ) -> None:
        self.context = context or DEFAULT_CONTEXT
        self.collect_errors = bool(collect_errors)
        self.strict = bool(strict)
        self.errors = []

    def check(self, selector: str) -> ParsedSelector | None:
        """Parse one selector, returning None and recording a diagnostic when it is invalid."""
        try:
            return parse_selector(selector, self.context)
        except SelectorError as e:
            diagnostic = SelectorDiagnostic.from_error(e, selector)
            logger.debug("Rejected selector %r: %s", selector, diagnostic)
            if self.strict:
                raise StrictModeError(diagnostic) from e
            if self.collect_errors:
                self.errors.append(diagnostic)
            return None

    def check_all(self, selectors: Iterable[str]) -> list[ParsedSelector | None]:
        return [self.check(selector) for selector in selectors]
