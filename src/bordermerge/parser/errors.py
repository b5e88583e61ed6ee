"""Parser error types."""

from __future__ import annotations

from lark.exceptions import LarkError


class ParseError(Exception):
    """Raised when CSS source cannot be parsed.

    ``line`` and ``column`` are 1-based, or None when the position is unknown
    (e.g. the source ends inside an unclosed block).
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)

    @classmethod
    def from_lark(cls, exc: LarkError) -> ParseError:
        """Wrap a Lark error, keeping only the first line of its message."""
        lines = str(exc).strip().splitlines() or [type(exc).__name__]
        line = getattr(exc, "line", None)
        column = getattr(exc, "column", None)
        # Lark reports -1 for errors at end of input.
        if line is not None and line < 1:
            line = column = None
        return cls(lines[0], line=line, column=column)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"
