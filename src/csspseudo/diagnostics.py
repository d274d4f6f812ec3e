from __future__ import annotations

from .errors import SelectorError


class SelectorDiagnostic:
    """Represents a rejected selector with the column of the offending input."""

    __slots__ = ("code", "column", "error_class", "message", "selector")

    code: str
    selector: str | None
    column: int | None
    message: str
    error_class: str

    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    def __init__(
        self,
        code: str,
        selector: str | None = None,
        column: int | None = None,
        message: str | None = None,
        error_class: str = "SelectorError",
    ) -> None:
        self.code = code
        self.selector = selector
        self.column = column
        self.message = message or code
        self.error_class = error_class

    @classmethod
    def from_error(cls, error: SelectorError, selector: str | None) -> SelectorDiagnostic:
        # Columns are 1-based like the rest of Python's error reporting
        column = None if error.position is None else error.position + 1
        return cls(error.code, selector, column, error.message, type(error).__name__)

    def __repr__(self) -> str:
        if self.column is not None:
            return f"SelectorDiagnostic({self.code!r}, column={self.column})"
        return f"SelectorDiagnostic({self.code!r})"

    def __str__(self) -> str:
        prefix = f"{self.selector}" if self.selector is not None else ""
        if self.column is not None:
            prefix = f"{prefix}:{self.column}"
        if self.message != self.code:
            return f"{prefix}: {self.code} - {self.message}"
        return f"{prefix}: {self.code}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectorDiagnostic):
            return NotImplemented
        return self.code == other.code and self.selector == other.selector and self.column == other.column

    def as_exception(self) -> SyntaxError:
        """Convert to a SyntaxError pointing at the offending column.

        Python 3.11+ shows the selector with a caret under the column.
        """
        exc = SyntaxError(self.message)
        exc.msg = self.message
        if self.column is None or self.selector is None:
            return exc

        exc.filename = "<selector>"
        exc.lineno = 1
        exc.offset = self.column
        exc.text = self.selector
        exc.end_lineno = 1
        exc.end_offset = min(self.column + 1, len(self.selector) + 1)
        return exc
