"""Breakpoint and state modifiers, and the prefix-composition algorithm.

A modifier scopes a token to a viewport width (``md:``) or an interaction
state (``hover:``). Several modifiers are combined by plain concatenation in
the order given; no combined selector is synthesised, so ``[hover, md]`` and
``[md, hover]`` give different prefixes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable

from webstyle.model.values import Vocabulary, lookup


class Modifier(Vocabulary):
    # breakpoints
    XS = "xs"
    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    # interaction and media states
    HOVER = "hover"
    FOCUS = "focus"
    ACTIVE = "active"
    PLACEHOLDER = "placeholder"
    DARK = "dark"
    FIRST = "first"
    LAST = "last"
    DISABLED = "disabled"
    MOTION_REDUCE = "motion-reduce"
    # ARIA attribute states
    ARIA_BUSY = "aria-busy"
    ARIA_CHECKED = "aria-checked"
    ARIA_DISABLED = "aria-disabled"
    ARIA_EXPANDED = "aria-expanded"
    ARIA_HIDDEN = "aria-hidden"
    ARIA_PRESSED = "aria-pressed"
    ARIA_READONLY = "aria-readonly"
    ARIA_REQUIRED = "aria-required"
    ARIA_SELECTED = "aria-selected"

    @property
    def prefix(self) -> str:
        return f"{self.value}:"

    @property
    def is_breakpoint(self) -> bool:
        return self in BREAKPOINTS


BREAKPOINTS = frozenset({
    Modifier.XS,
    Modifier.SM,
    Modifier.MD,
    Modifier.LG,
    Modifier.XL,
    Modifier.XL2,
})

STATES = frozenset(m for m in Modifier if m not in BREAKPOINTS)

# Name -> modifier, keyed by canonical form; built once at import.
MODIFIERS: MappingProxyType[str, Modifier] = MappingProxyType(
    {m.value: m for m in Modifier}
)


def lookup_modifier(name: str) -> Modifier | None:
    """Resolve ``"md"``, ``"aria-checked"`` or ``"ARIA_CHECKED"`` to a Modifier."""
    return MODIFIERS.get(name.strip()) or lookup(Modifier, name)


def as_modifiers(on: Modifier | str | Iterable[Modifier | str] | None) -> tuple[Modifier, ...]:
    """Normalise an ``on=`` argument (one modifier or several) to a tuple.

    Raises ValueError for a string that names no modifier.
    """
    if on is None:
        return ()
    if isinstance(on, str):
        on = (on,)
    result: list[Modifier] = []
    for item in on:
        modifier = item if isinstance(item, Modifier) else lookup_modifier(item)
        if modifier is None:
            raise ValueError(f"Unknown modifier: {item!r}")
        result.append(modifier)
    return tuple(result)


def modifier_prefix(modifiers: Iterable[Modifier]) -> str:
    """Concatenate modifier prefixes in the order supplied."""
    return "".join(Modifier(m).prefix for m in modifiers)


def apply_modifiers(tokens: list[str], modifiers: Iterable[Modifier]) -> list[str]:
    """Prefix every token once with the combined prefix of *modifiers*.

    No modifiers leaves the tokens unchanged; no tokens gives ``[]``.
    """
    if not tokens:
        return []
    prefix = modifier_prefix(modifiers)
    if not prefix:
        return list(tokens)
    return [f"{prefix}{token}" for token in tokens]


def apply_modifiers_separately(
    tokens: list[str], modifiers: Iterable[Modifier]
) -> list[str]:
    """Emit one copy of every token per modifier, each with a single prefix.

    ``(["p-4"], [hover, focus])`` gives ``["hover:p-4", "focus:p-4"]``.
    """
    modifiers = list(modifiers)
    if not tokens:
        return []
    if not modifiers:
        return list(tokens)
    return [
        f"{Modifier(m).prefix}{token}" for m in modifiers for token in tokens
    ]
