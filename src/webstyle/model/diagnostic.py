"""Diagnostic model: findings about a style sheet, located by source line."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"

    @property
    def rank(self) -> int:
        """0 for errors, 1 for warnings, 2 for info; lower sorts first."""
        return _RANKS[self]


_RANKS = {Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFO: 2}


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding about a style sheet.

    Attributes:
        rule: Name of the validation rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        line: Source line of the declaration, argument or block involved.
            None for findings about the sheet as a whole.
        aspect: The declaration name involved (``border``, ``font``...).
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    line: int | None = None
    aspect: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def sort_key(self) -> tuple[int, int, str]:
        """Source order: sheet-wide findings first, then by line and severity."""
        return (self.line or 0, self.severity.rank, self.rule)

    def escalated(self) -> Diagnostic:
        """This diagnostic as an ERROR; errors and info are returned unchanged."""
        if not self.is_warning:
            return self
        return dataclasses.replace(self, severity=Severity.ERROR)

    def __str__(self) -> str:
        where = []
        if self.line is not None:
            where.append(f"line {self.line}")
        if self.aspect:
            where.append(self.aspect)
        location = f" [{', '.join(where)}]" if where else ""
        return f"{self.severity.value}{location}: {self.message}"
