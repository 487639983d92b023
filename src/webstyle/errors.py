"""Error types raised at the edges of the style compiler.

The rule functions themselves are total and never raise; these exceptions
belong to the text style-sheet surface and to builder misuse.
"""

from __future__ import annotations


class WebStyleError(Exception):
    """Base error for all webstyle errors."""


class SheetSyntaxError(WebStyleError):
    """Raised when style-sheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class StyleValueError(WebStyleError):
    """Raised when a style-sheet declaration cannot be turned into a descriptor."""

    def __init__(self, message: str, *, line: int | None = None) -> None:
        self.line = line
        super().__init__(message)


class BuilderClosedError(WebStyleError, RuntimeError):
    """Raised when a style builder is used after it has been flushed."""
