"""Sheet validator: run the rules and report diagnostics in source order."""

from __future__ import annotations

from typing import Callable

from webstyle.errors import WebStyleError
from webstyle.model.diagnostic import Diagnostic, Severity
from webstyle.sheet.model import Sheet
from webstyle.validation.rules import ALL_RULES

RuleFunc = Callable[[Sheet], list[Diagnostic]]


class ValidationError(WebStyleError):
    """Raised when a sheet has ERROR diagnostics (warnings too, when strict)."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        errors = [d for d in diagnostics if d.is_error]
        lines = sorted({d.line for d in errors if d.line is not None})
        where = f" on line(s) {', '.join(map(str, lines))}" if lines else ""
        super().__init__(
            f"Validation failed with {len(errors)} error(s){where}: "
            + "; ".join(d.message for d in errors)
        )


def validate(
    sheet: Sheet,
    extra_rules: list[RuleFunc] | None = None,
    *,
    strict: bool = False,
) -> list[Diagnostic]:
    """Run all validation rules against *sheet*.

    Diagnostics come back in source order (see ``Diagnostic.sort_key``), so
    a sheet reads top to bottom. With *strict*, warnings are escalated to
    errors.
    """
    rules: list[RuleFunc] = [*ALL_RULES, *(extra_rules or ())]
    diagnostics = sorted(
        (d for rule in rules for d in rule(sheet)), key=lambda d: d.sort_key
    )
    if strict:
        diagnostics = [d.escalated() for d in diagnostics]
    return diagnostics


def validate_or_raise(
    sheet: Sheet,
    extra_rules: list[RuleFunc] | None = None,
    *,
    strict: bool = False,
) -> list[Diagnostic]:
    """Run validation and raise :class:`ValidationError` on any error.

    Returns the remaining warnings and info when the sheet passes.
    """
    diagnostics = validate(sheet, extra_rules, strict=strict)
    if any(d.is_error for d in diagnostics):
        raise ValidationError(diagnostics)
    return diagnostics


def summarize(diagnostics: list[Diagnostic]) -> str:
    """One-line count of diagnostics by severity."""
    counts = {severity: 0 for severity in Severity}
    for d in diagnostics:
        counts[d.severity] += 1
    return (
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )
