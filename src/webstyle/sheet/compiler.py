"""Compile a parsed sheet to tokens by driving a :class:`StyleBuilder`.

Each declaration is turned into a descriptor, coercing its arguments from
the descriptor's field type hints. Each block enters its modifier scope and
exits it at the closing brace. A nested block replaces the outer scope and
the outer scope is not restored after it.
"""

from __future__ import annotations

import logging
import re
import types
import typing
from enum import Enum
from functools import lru_cache
from typing import Any, get_args, get_origin, get_type_hints

from webstyle.builder import StyleBuilder
from webstyle.errors import StyleValueError
from webstyle.model import styles
from webstyle.model.color import CustomColor, MonoColor, ShadeColor, parse_color
from webstyle.model.values import Arbitrary, SizeKeyword, lookup, parse_size
from webstyle.modifiers import Modifier, lookup_modifier
from webstyle.sheet.model import Argument, Block, Declaration, Quoted, Sheet

logger = logging.getLogger(__name__)

ASPECTS: types.MappingProxyType[str, type] = types.MappingProxyType({
    "border": styles.Border,
    "rounded": styles.Radius,
    "font": styles.Font,
    "frame": styles.Frame,
    "size": styles.Size,
    "aspect-ratio": styles.AspectRatio,
    "flex": styles.Flex,
    "grid": styles.Grid,
    "position": styles.Position,
    "transform": styles.Transform,
    "transition": styles.Transition,
    "animation": styles.Animation,
    "cursor": styles.Cursor,
    "scroll": styles.Scroll,
    "hidden": styles.Visibility,
    "display": styles.Display,
    "margins": styles.Margin,
    "padding": styles.Padding,
    "margin-insets": styles.MarginInsets,
    "padding-insets": styles.PaddingInsets,
    "border-insets": styles.BorderInsets,
    "position-insets": styles.PositionInsets,
    "spacing": styles.Spacing,
    "background": styles.Background,
    "opacity": styles.Opacity,
    "shadow": styles.Shadow,
    "ring": styles.Ring,
    "outline": styles.Outline,
    "overflow": styles.Overflow,
    "z-index": styles.ZIndex,
})

_COLOR_TYPES = (ShadeColor, MonoColor, CustomColor)
_INT_RE = re.compile(r"-?\d+")
_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0"})


@lru_cache(maxsize=None)
def field_hints(cls: type) -> dict[str, Any]:
    """Resolved field annotations of a descriptor class."""
    return get_type_hints(cls)


def _is_union(hint: Any) -> bool:
    return get_origin(hint) in (typing.Union, types.UnionType)


def _coerce(value: Any, hint: Any) -> Any:
    """Coerce a parsed sheet value to the type named by *hint*."""
    if _is_union(hint):
        options = [a for a in get_args(hint) if a is not type(None)]
        if any(a in _COLOR_TYPES for a in options):
            if isinstance(value, Quoted):
                return CustomColor(value.text)
            return parse_color(_scalar(value))
        if SizeKeyword in options:
            if isinstance(value, Quoted):
                return Arbitrary(value.text)
            return parse_size(_scalar(value))
        if len(options) == 1:
            return _coerce(value, options[0])
        vocabularies = [a for a in options if isinstance(a, type) and issubclass(a, Enum)]
        if vocabularies and str in options:
            # a known member, otherwise a custom name passed through
            text = _text(value)
            member = lookup(vocabularies[0], text)
            return member if member is not None else text
        # int | str offsets
        text = _text(value)
        if isinstance(value, str) and _INT_RE.fullmatch(text):
            return int(text)
        return text

    if get_origin(hint) is tuple:
        item_hint = get_args(hint)[0]
        items = value if isinstance(value, tuple) else (value,)
        return tuple(_coerce(item, item_hint) for item in items)

    if hint is bool:
        text = _scalar(value).lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise ValueError(f"expected a boolean, got {text!r}")
    if hint is int:
        return int(_scalar(value))
    if hint is float:
        return float(_scalar(value))
    if hint is str:
        return _text(value)
    if isinstance(hint, type) and issubclass(hint, Enum):
        member = lookup(hint, _text(value))
        if member is None:
            choices = ", ".join(m.value or m.name.lower() for m in hint)
            raise ValueError(f"expected one of: {choices}")
        return member
    raise TypeError(f"unsupported field type {hint!r}")


def _text(value: Any) -> str:
    if isinstance(value, Quoted):
        return value.text
    if isinstance(value, tuple):
        raise ValueError("expected a single value, got a list")
    return str(value)


def _scalar(value: Any) -> str:
    if isinstance(value, Quoted):
        raise ValueError(f"expected an unquoted value, got {value.text!r}")
    return _text(value)


def resolve_aspect(declaration: Declaration) -> type:
    cls = ASPECTS.get(declaration.aspect)
    if cls is None:
        raise StyleValueError(
            f"Unknown style aspect {declaration.aspect!r}", line=declaration.line
        )
    return cls


def coerce_argument(declaration: Declaration, argument: Argument) -> Any:
    """Coerce one argument, raising StyleValueError naming the aspect and field."""
    hints = field_hints(resolve_aspect(declaration))
    if argument.name not in hints:
        raise StyleValueError(
            f"{declaration.aspect}: unknown argument {argument.name!r} "
            f"(expected one of: {', '.join(hints)})",
            line=argument.line or declaration.line,
        )
    try:
        return _coerce(argument.value, hints[argument.name])
    except (ValueError, TypeError) as e:
        raise StyleValueError(
            f"{declaration.aspect}: invalid value for {argument.name!r}: {e}",
            line=argument.line or declaration.line,
        ) from e


def build_descriptor(declaration: Declaration) -> object:
    """Build the descriptor a declaration names."""
    cls = resolve_aspect(declaration)
    kwargs: dict[str, Any] = {}
    for argument in declaration.arguments:
        if argument.name in kwargs:
            raise StyleValueError(
                f"{declaration.aspect}: argument {argument.name!r} given more than once",
                line=argument.line or declaration.line,
            )
        kwargs[argument.name] = coerce_argument(declaration, argument)
    return cls(**kwargs)


def resolve_modifiers(block: Block) -> tuple[Modifier, ...]:
    resolved: list[Modifier] = []
    for name in block.modifiers:
        modifier = lookup_modifier(name)
        if modifier is None:
            raise StyleValueError(f"Unknown modifier {name!r}", line=block.line)
        resolved.append(modifier)
    return tuple(resolved)


def _emit(items: tuple[Declaration | Block, ...], builder: StyleBuilder) -> None:
    for item in items:
        if isinstance(item, Block):
            builder.enter_scope(*resolve_modifiers(item))
            _emit(item.items, builder)
            builder.exit_scope()
        else:
            builder.add(build_descriptor(item))


def compile_sheet(sheet: Sheet) -> list[str]:
    """Compile *sheet* to its ordered token list."""
    builder = StyleBuilder()
    _emit(sheet.items, builder)
    tokens = builder.flush()
    logger.debug(
        "Compiled %d declaration(s) to %d token(s)", len(sheet.declarations()), len(tokens)
    )
    return tokens
