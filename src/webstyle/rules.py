"""Style rules: one pure function per aspect, mapping a descriptor to tokens.

Rules emit base tokens only; modifier prefixes are applied afterwards by
:mod:`webstyle.modifiers`. Every rule is total over its descriptor type and
never raises. Raw literals are passed through verbatim.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable

from webstyle.model.color import Color
from webstyle.model.styles import (
    Animation,
    AspectRatio,
    Background,
    Border,
    BorderInsets,
    Cursor,
    Display,
    EdgeInsets,
    Flex,
    Font,
    Frame,
    Grid,
    Margin,
    MarginInsets,
    Opacity,
    Outline,
    Overflow,
    Padding,
    PaddingInsets,
    Position,
    PositionInsets,
    Radius,
    Ring,
    Scroll,
    Shadow,
    Size,
    Spacing,
    Transform,
    Transition,
    Visibility,
    ZIndex,
)
from webstyle.model.values import (
    Axis,
    BorderStyle,
    Edge,
    RadiusSide,
    RadiusSize,
    ShadowSize,
    render,
)

DEFAULT_SPACING = 4


def color_rule(color: Color) -> str:
    """Render a color to the text used after ``bg-``, ``text-``, ``border-``..."""
    return color.canonical()


def _signed(prefix: str, value: Any) -> str:
    """Build ``<prefix>-<value>``, moving a negative sign in front of the utility."""
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value < 0:
        return f"-{prefix}-{render(-value)}"
    text = render(value)
    if text.startswith("-"):
        return f"-{prefix}-{text[1:]}"
    return f"{prefix}-{text}"


def _edges(edges: tuple[Edge, ...]) -> tuple[Edge, ...]:
    return tuple(edges) or (Edge.ALL,)


# ---------------------------------------------------------------------------
# Appearance
# ---------------------------------------------------------------------------


def border_rule(d: Border) -> list[str]:
    """``border[-<edge>][-<width>]`` per edge, then style and color.

    With the divide style the per-edge tokens become ``divide-x-<w>`` (for the
    horizontal edge) or ``divide-y-<w>``, and only when a width is given.
    """
    tokens: list[str] = []
    for edge in _edges(d.edges):
        if d.style is BorderStyle.DIVIDE:
            if d.width is not None:
                axis = "x" if edge is Edge.HORIZONTAL else "y"
                tokens.append(f"divide-{axis}-{d.width}")
            continue
        prefix = "border" if edge is Edge.ALL else f"border-{edge.canonical()}"
        tokens.append(prefix if d.width is None else f"{prefix}-{d.width}")
    if d.style is not None and d.style is not BorderStyle.DIVIDE:
        tokens.append(f"border-{d.style.canonical()}")
    if d.color is not None:
        tokens.append(f"border-{color_rule(d.color)}")
    return tokens


def border_insets_rule(d: BorderInsets) -> list[str]:
    """All four side widths (zero included), then style and color."""
    tokens = [
        f"border-t-{d.top}",
        f"border-l-{d.leading}",
        f"border-b-{d.bottom}",
        f"border-r-{d.trailing}",
    ]
    if d.style is not None:
        tokens.append(f"border-{d.style.canonical()}")
    if d.color is not None:
        tokens.append(f"border-{color_rule(d.color)}")
    return tokens


def radius_rule(d: Radius) -> list[str]:
    size = d.size if d.size is not None else RadiusSize.MD
    tokens: list[str] = []
    for side in d.sides or (RadiusSide.ALL,):
        side_part = "" if side is RadiusSide.ALL else f"-{side.canonical()}"
        tokens.append(f"rounded{side_part}-{size.canonical()}")
    return tokens


def background_rule(d: Background) -> list[str]:
    if d.color is None:
        return []
    return [f"bg-{color_rule(d.color)}"]


def opacity_rule(d: Opacity) -> list[str]:
    if d.value is None:
        return []
    return [f"opacity-{render(d.value)}"]


def shadow_rule(d: Shadow) -> list[str]:
    size = d.size if d.size is not None else ShadowSize.MD
    tokens = [f"shadow-{size.canonical()}"]
    if d.color is not None:
        tokens.append(f"shadow-{color_rule(d.color)}")
    return tokens


def ring_rule(d: Ring) -> list[str]:
    width = d.width if d.width is not None else 1
    tokens = [f"ring-{width}"]
    if d.color is not None:
        tokens.append(f"ring-{color_rule(d.color)}")
    return tokens


def outline_rule(d: Outline) -> list[str]:
    tokens: list[str] = []
    if d.width is not None:
        tokens.append(f"outline-{d.width}")
    if d.style is not None:
        tokens.append(f"outline-{d.style.canonical()}")
    if d.color is not None:
        tokens.append(f"outline-{color_rule(d.color)}")
    if d.offset is not None:
        tokens.append(f"outline-offset-{d.offset}")
    return tokens or ["outline"]


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


def font_rule(d: Font) -> list[str]:
    tokens: list[str] = []
    if d.size is not None:
        tokens.append(f"text-{d.size.canonical()}")
    if d.weight is not None:
        tokens.append(f"font-{d.weight.canonical()}")
    if d.alignment is not None:
        tokens.append(f"text-{d.alignment.canonical()}")
    if d.tracking is not None:
        tokens.append(f"tracking-{d.tracking.canonical()}")
    if d.leading is not None:
        tokens.append(f"leading-{d.leading.canonical()}")
    if d.decoration is not None:
        tokens.append(d.decoration.canonical())
    if d.wrapping is not None:
        tokens.append(f"text-{d.wrapping.canonical()}")
    if d.color is not None:
        tokens.append(f"text-{color_rule(d.color)}")
    if d.family is not None:
        tokens.append(f"font-[{d.family}]")
    return tokens


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------

_FRAME_FIELDS = (
    ("width", "w"),
    ("height", "h"),
    ("min_width", "min-w"),
    ("max_width", "max-w"),
    ("min_height", "min-h"),
    ("max_height", "max-h"),
)


def frame_rule(d: Frame) -> list[str]:
    tokens: list[str] = []
    for field, prefix in _FRAME_FIELDS:
        value = getattr(d, field)
        if value is not None:
            tokens.append(f"{prefix}-{render(value)}")
    return tokens


def size_rule(d: Size) -> list[str]:
    if d.value is None:
        return []
    return [f"size-{render(d.value)}"]


def aspect_ratio_rule(d: AspectRatio) -> list[str]:
    if d.square:
        return ["aspect-square"]
    if d.video:
        return ["aspect-video"]
    if d.width is None or d.height is None:
        return []
    return [f"aspect-[{render(d.width)}/{render(d.height)}]"]


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def flex_rule(d: Flex) -> list[str]:
    """A bare ``flex`` is emitted only when direction, justify or align is set."""
    tokens: list[str] = []
    if d.direction is not None or d.justify is not None or d.align is not None:
        tokens.append("flex")
    if d.direction is not None:
        tokens.append(f"flex-{d.direction.canonical()}")
    if d.justify is not None:
        tokens.append(f"justify-{d.justify.canonical()}")
    if d.align is not None:
        tokens.append(f"items-{d.align.canonical()}")
    if d.grow is not None:
        tokens.append(f"flex-{d.grow.canonical()}")
    return tokens


def grid_rule(d: Grid) -> list[str]:
    tokens = ["grid"]
    if d.columns is not None:
        tokens.append(f"grid-cols-{d.columns}")
    if d.rows is not None:
        tokens.append(f"grid-rows-{d.rows}")
    if d.flow is not None:
        tokens.append(f"grid-flow-{d.flow.canonical()}")
    if d.column_span is not None:
        tokens.append(f"col-span-{d.column_span}")
    if d.row_span is not None:
        tokens.append(f"row-span-{d.row_span}")
    return tokens


_POSITION_FIELDS = (
    ("inset", "inset"),
    ("inset_x", "inset-x"),
    ("inset_y", "inset-y"),
    ("top", "top"),
    ("right", "right"),
    ("bottom", "bottom"),
    ("left", "left"),
)


def position_rule(d: Position) -> list[str]:
    tokens: list[str] = []
    if d.type is not None:
        tokens.append(d.type.canonical())
    for field, prefix in _POSITION_FIELDS:
        value = getattr(d, field)
        if value is not None:
            tokens.append(_signed(prefix, value))
    return tokens


def position_insets_rule(d: PositionInsets) -> list[str]:
    tokens: list[str] = []
    if d.type is not None:
        tokens.append(d.type.canonical())
    tokens.extend([
        _signed("top", d.top),
        _signed("left", d.leading),
        _signed("bottom", d.bottom),
        _signed("right", d.trailing),
    ])
    return tokens


def display_rule(d: Display) -> list[str]:
    if d.type is None:
        return []
    return [f"display-{d.type.canonical()}"]


def visibility_rule(d: Visibility) -> list[str]:
    return ["hidden"] if d.is_hidden else []


def overflow_rule(d: Overflow) -> list[str]:
    if d.type is None:
        return []
    axis = d.axis if d.axis is not None else Axis.BOTH
    axis_part = "" if axis is Axis.BOTH else f"-{axis.canonical()}"
    return [f"overflow{axis_part}-{d.type.canonical()}"]


def z_index_rule(d: ZIndex) -> list[str]:
    if d.value is None:
        return []
    return [_signed("z", d.value)]


# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------


def _edge_spacing(letter: str, edges: tuple[Edge, ...], length: Any, auto: bool) -> list[str]:
    length = length if length is not None else DEFAULT_SPACING
    tokens: list[str] = []
    for edge in _edges(edges):
        utility = f"{letter}{edge.canonical()}"
        tokens.append(f"{utility}-auto" if auto else _signed(utility, length))
    return tokens


def margin_rule(d: Margin) -> list[str]:
    return _edge_spacing("m", d.edges, d.length, d.auto)


def padding_rule(d: Padding) -> list[str]:
    return _edge_spacing("p", d.edges, d.length, False)


def _inset_spacing(letter: str, insets: EdgeInsets) -> list[str]:
    """Uniform non-zero insets give one token; otherwise zero sides are omitted."""
    if insets.is_zero:
        return []
    if insets.is_uniform:
        return [_signed(letter, insets.top)]
    sides = (
        (Edge.TOP, insets.top),
        (Edge.LEADING, insets.leading),
        (Edge.BOTTOM, insets.bottom),
        (Edge.TRAILING, insets.trailing),
    )
    return [
        _signed(f"{letter}{edge.canonical()}", value)
        for edge, value in sides
        if value != 0
    ]


def margin_insets_rule(d: MarginInsets) -> list[str]:
    return _inset_spacing("m", d)


def padding_insets_rule(d: PaddingInsets) -> list[str]:
    return _inset_spacing("p", d)


def spacing_rule(d: Spacing) -> list[str]:
    length = d.length if d.length is not None else DEFAULT_SPACING
    axis = d.axis if d.axis is not None else Axis.BOTH
    if axis is Axis.BOTH:
        return [f"space-x-{length}", f"space-y-{length}"]
    return [f"space-{axis.canonical()}-{length}"]


# ---------------------------------------------------------------------------
# Effects and interaction
# ---------------------------------------------------------------------------

_TRANSFORM_FIELDS = (
    ("scale", "scale"),
    ("scale_x", "scale-x"),
    ("scale_y", "scale-y"),
    ("rotate", "rotate"),
    ("translate_x", "translate-x"),
    ("translate_y", "translate-y"),
    ("skew_x", "skew-x"),
    ("skew_y", "skew-y"),
)


def transform_rule(d: Transform) -> list[str]:
    tokens = ["transform"]
    for field, prefix in _TRANSFORM_FIELDS:
        value = getattr(d, field)
        if value is not None:
            tokens.append(_signed(prefix, value))
    return tokens


def transition_rule(d: Transition) -> list[str]:
    if d.property is not None:
        tokens = [f"transition-{d.property.canonical()}"]
    else:
        tokens = ["transition"]
    if d.duration is not None:
        tokens.append(f"duration-{d.duration}")
    if d.easing is not None:
        tokens.append(f"ease-{d.easing.canonical()}")
    if d.delay is not None:
        tokens.append(f"delay-{d.delay}")
    return tokens


def animation_rule(d: Animation) -> list[str]:
    """``animate-<name>``; the other properties have no utility and go in brackets."""
    tokens: list[str] = []
    if d.name is not None:
        tokens.append(f"animate-{render(d.name)}")
    if d.duration is not None:
        tokens.append(f"[animation-duration:{d.duration}ms]")
    if d.timing is not None:
        tokens.append(f"[animation-timing-function:{render(d.timing)}]")
    if d.delay is not None:
        tokens.append(f"[animation-delay:{d.delay}ms]")
    if d.iterations is not None:
        tokens.append(f"[animation-iteration-count:{render(d.iterations)}]")
    if d.direction is not None:
        tokens.append(f"[animation-direction:{d.direction.canonical()}]")
    if d.fill_mode is not None:
        tokens.append(f"[animation-fill-mode:{d.fill_mode.canonical()}]")
    if d.play_state is not None:
        tokens.append(f"[animation-play-state:{d.play_state.canonical()}]")
    return tokens


def cursor_rule(d: Cursor) -> list[str]:
    if d.type is None:
        return []
    return [f"cursor-{d.type.canonical()}"]


# Scroll margin and padding use logical sides: s (start) and e (end).
_SCROLL_EDGES = {
    Edge.ALL: "",
    Edge.TOP: "t",
    Edge.BOTTOM: "b",
    Edge.LEADING: "s",
    Edge.TRAILING: "e",
    Edge.HORIZONTAL: "x",
    Edge.VERTICAL: "y",
}


def scroll_rule(d: Scroll) -> list[str]:
    tokens: list[str] = []
    if d.behavior is not None:
        tokens.append(f"scroll-{d.behavior.canonical()}")
    if d.margin is not None:
        for edge in _edges(d.margin_edges):
            tokens.append(_signed(f"scroll-m{_SCROLL_EDGES[edge]}", d.margin))
    if d.padding is not None:
        for edge in _edges(d.padding_edges):
            tokens.append(f"scroll-p{_SCROLL_EDGES[edge]}-{d.padding}")
    if d.snap_align is not None:
        tokens.append(f"snap-{d.snap_align.canonical()}")
    if d.snap_stop is not None:
        tokens.append(f"snap-{d.snap_stop.canonical()}")
    if d.snap_type is not None:
        tokens.append(f"snap-{d.snap_type.canonical()}")
    return tokens


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

RuleFunc = Callable[[Any], list[str]]

RULES: MappingProxyType[type, RuleFunc] = MappingProxyType({
    Border: border_rule,
    Radius: radius_rule,
    Background: background_rule,
    Opacity: opacity_rule,
    Shadow: shadow_rule,
    Ring: ring_rule,
    Outline: outline_rule,
    Font: font_rule,
    Frame: frame_rule,
    Size: size_rule,
    AspectRatio: aspect_ratio_rule,
    Flex: flex_rule,
    Grid: grid_rule,
    Position: position_rule,
    Display: display_rule,
    Visibility: visibility_rule,
    Overflow: overflow_rule,
    ZIndex: z_index_rule,
    Margin: margin_rule,
    Padding: padding_rule,
    MarginInsets: margin_insets_rule,
    PaddingInsets: padding_insets_rule,
    Spacing: spacing_rule,
    Transform: transform_rule,
    BorderInsets: border_insets_rule,
    PositionInsets: position_insets_rule,
    Transition: transition_rule,
    Animation: animation_rule,
    Cursor: cursor_rule,
    Scroll: scroll_rule,
})


def compile_style(descriptor: object) -> list[str]:
    """Run the rule registered for *descriptor*'s exact type.

    Raises TypeError for an object that is not a style descriptor.
    """
    rule = RULES.get(type(descriptor))
    if rule is None:
        if type(descriptor) is EdgeInsets:
            raise TypeError(
                "EdgeInsets is not a style descriptor; wrap it in MarginInsets, "
                "PaddingInsets, BorderInsets or PositionInsets, or pass it as "
                "insets= to margins(), padding(), border() or position()"
            )
        raise TypeError(
            f"No style rule for {type(descriptor).__name__!r}; "
            f"expected one of: {', '.join(sorted(t.__name__ for t in RULES))}"
        )
    return rule(descriptor)
