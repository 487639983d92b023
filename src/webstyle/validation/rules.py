"""Validation rules for style sheets.

Each rule is a function taking a Sheet and returning a list of Diagnostic
objects describing any issues found.
"""

from __future__ import annotations

from webstyle.errors import StyleValueError
from webstyle.model.diagnostic import Diagnostic, Severity
from webstyle.modifiers import lookup_modifier
from webstyle.rules import compile_style
from webstyle.sheet.compiler import ASPECTS, build_descriptor, coerce_argument, field_hints
from webstyle.sheet.model import Block, Declaration, Quoted, Sheet


def _is_valid(declaration: Declaration) -> bool:
    """True when the declaration names a known aspect and every argument coerces."""
    try:
        build_descriptor(declaration)
    except StyleValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_aspect_known(sheet: Sheet) -> list[Diagnostic]:
    """Every declaration must name a known style aspect."""
    diagnostics: list[Diagnostic] = []
    for decl in sheet.declarations():
        if decl.aspect not in ASPECTS:
            diagnostics.append(
                Diagnostic(
                    rule="check_aspect_known",
                    severity=Severity.ERROR,
                    message=f"Unknown style aspect '{decl.aspect}'.",
                    line=decl.line,
                    aspect=decl.aspect,
                    fix=f"Use one of: {', '.join(sorted(ASPECTS))}.",
                )
            )
    return diagnostics


def check_modifier_known(sheet: Sheet) -> list[Diagnostic]:
    """Every block modifier must be a known breakpoint or state."""
    diagnostics: list[Diagnostic] = []
    for block in sheet.blocks():
        for name in block.modifiers:
            if lookup_modifier(name) is None:
                diagnostics.append(
                    Diagnostic(
                        rule="check_modifier_known",
                        severity=Severity.ERROR,
                        message=f"Unknown modifier '{name}'.",
                        line=block.line,
                        fix="Run 'webstyle modifiers' to list the known modifiers.",
                    )
                )
    return diagnostics


def check_argument_known(sheet: Sheet) -> list[Diagnostic]:
    """Argument names must be fields of the declared aspect."""
    diagnostics: list[Diagnostic] = []
    for decl in sheet.declarations():
        cls = ASPECTS.get(decl.aspect)
        if cls is None:
            continue  # check_aspect_known will catch this
        fields = field_hints(cls)
        for arg in decl.arguments:
            if arg.name not in fields:
                diagnostics.append(
                    Diagnostic(
                        rule="check_argument_known",
                        severity=Severity.ERROR,
                        message=f"'{decl.aspect}' has no argument '{arg.name}'.",
                        line=arg.line or decl.line,
                        aspect=decl.aspect,
                        fix=f"Use one of: {', '.join(fields)}.",
                    )
                )
    return diagnostics


def check_duplicate_arguments(sheet: Sheet) -> list[Diagnostic]:
    """An argument may be given at most once per declaration."""
    diagnostics: list[Diagnostic] = []
    for decl in sheet.declarations():
        seen: set[str] = set()
        for arg in decl.arguments:
            if arg.name in seen:
                diagnostics.append(
                    Diagnostic(
                        rule="check_duplicate_arguments",
                        severity=Severity.ERROR,
                        message=f"'{decl.aspect}' argument '{arg.name}' is given more than once.",
                        line=arg.line or decl.line,
                        aspect=decl.aspect,
                        fix="Keep one value for each argument.",
                    )
                )
            seen.add(arg.name)
    return diagnostics


def check_argument_values(sheet: Sheet) -> list[Diagnostic]:
    """Argument values must coerce to the field's type."""
    diagnostics: list[Diagnostic] = []
    for decl in sheet.declarations():
        cls = ASPECTS.get(decl.aspect)
        if cls is None:
            continue
        fields = field_hints(cls)
        for arg in decl.arguments:
            if arg.name not in fields:
                continue  # check_argument_known will catch this
            try:
                coerce_argument(decl, arg)
            except StyleValueError as exc:
                diagnostics.append(
                    Diagnostic(
                        rule="check_argument_values",
                        severity=Severity.ERROR,
                        message=str(exc),
                        line=exc.line,
                        aspect=decl.aspect,
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Semantic rules (WARNING / INFO severity)
# ---------------------------------------------------------------------------


def check_nested_scope(sheet: Sheet) -> list[Diagnostic]:
    """A block inside a block replaces the outer scope instead of combining."""
    diagnostics: list[Diagnostic] = []
    for item, depth in sheet.walk():
        if isinstance(item, Block) and depth > 0:
            diagnostics.append(
                Diagnostic(
                    rule="check_nested_scope",
                    severity=Severity.WARNING,
                    message=(
                        f"Nested block '{', '.join(item.modifiers)}' replaces the "
                        "enclosing scope; the enclosing scope is not restored after it."
                    ),
                    line=item.line,
                    fix="List both modifiers on one block, e.g. 'md, hover { ... }'.",
                )
            )
    return diagnostics


def check_compound_modifiers(sheet: Sheet) -> list[Diagnostic]:
    """Several modifiers on one block are concatenated in the order written."""
    diagnostics: list[Diagnostic] = []
    for block in sheet.blocks():
        if len(block.modifiers) > 1:
            prefix = "".join(f"{name}:" for name in block.modifiers)
            diagnostics.append(
                Diagnostic(
                    rule="check_compound_modifiers",
                    severity=Severity.WARNING,
                    message=(
                        f"Modifiers are combined by concatenation into '{prefix}'; "
                        "order matters."
                    ),
                    line=block.line,
                )
            )
    return diagnostics


def check_empty_output(sheet: Sheet) -> list[Diagnostic]:
    """A declaration that compiles to no tokens is probably a mistake."""
    diagnostics: list[Diagnostic] = []
    for decl in sheet.declarations():
        if not _is_valid(decl):
            continue
        if not compile_style(build_descriptor(decl)):
            diagnostics.append(
                Diagnostic(
                    rule="check_empty_output",
                    severity=Severity.WARNING,
                    message=f"'{decl.aspect}' declaration produces no tokens.",
                    line=decl.line,
                    aspect=decl.aspect,
                    fix="Set at least one argument, or remove the declaration.",
                )
            )
    return diagnostics


def check_raw_literals(sheet: Sheet) -> list[Diagnostic]:
    """Quoted literals are passed through into tokens without any checking."""
    diagnostics: list[Diagnostic] = []
    for decl in sheet.declarations():
        for arg in decl.arguments:
            values = arg.value if isinstance(arg.value, tuple) else (arg.value,)
            for value in values:
                if isinstance(value, Quoted):
                    diagnostics.append(
                        Diagnostic(
                            rule="check_raw_literals",
                            severity=Severity.INFO,
                            message=(
                                f"Raw literal \"{value.text}\" in '{decl.aspect}.{arg.name}' "
                                "is passed through unchecked."
                            ),
                            line=arg.line or decl.line,
                            aspect=decl.aspect,
                        )
                    )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_aspect_known,
    check_modifier_known,
    check_argument_known,
    check_duplicate_arguments,
    check_argument_values,
    check_nested_scope,
    check_compound_modifiers,
    check_empty_output,
    check_raw_literals,
]
