"""Style descriptors: one flat, field-optional parameter bundle per style aspect.

Descriptors are data, not commands. Construction never validates; a field
left at None contributes nothing to the compiled output unless the matching
rule documents a default (margin/padding edge and length, radius size,
spacing length, shadow size, ring width).
"""

from __future__ import annotations

from dataclasses import dataclass

from webstyle.model.color import Color
from webstyle.model.values import (
    Align,
    Alignment,
    AnimationDirection,
    AnimationFillMode,
    AnimationName,
    AnimationPlayState,
    AnimationTiming,
    Axis,
    BorderStyle,
    CursorType,
    Decoration,
    Direction,
    DisplayType,
    Easing,
    Edge,
    GridFlow,
    Grow,
    Justify,
    Leading,
    OverflowType,
    PositionType,
    RadiusSide,
    RadiusSize,
    ScrollBehavior,
    ShadowSize,
    SizeValue,
    SnapAlign,
    SnapStop,
    SnapType,
    TextSize,
    Tracking,
    TransitionProperty,
    Weight,
    Wrapping,
)

# An offset that may be negative; ``-4`` and ``"-1/2"`` both become
# leading-minus utilities.
Offset = int | str


# ---------------------------------------------------------------------------
# Appearance
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Border:
    width: int | None = None
    edges: tuple[Edge, ...] = ()
    style: BorderStyle | None = None
    color: Color | None = None


@dataclass(frozen=True)
class Radius:
    """Border radius. Radius is per corner, so sides is a list of selectors."""

    size: RadiusSize | None = None
    sides: tuple[RadiusSide, ...] = ()


@dataclass(frozen=True)
class Background:
    color: Color | None = None


@dataclass(frozen=True)
class Opacity:
    value: int | None = None  # percent, 0-100


@dataclass(frozen=True)
class Shadow:
    size: ShadowSize | None = None
    color: Color | None = None


@dataclass(frozen=True)
class Ring:
    width: int | None = None
    color: Color | None = None


@dataclass(frozen=True)
class Outline:
    width: int | None = None
    style: BorderStyle | None = None
    color: Color | None = None
    offset: int | None = None


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Font:
    size: TextSize | None = None
    weight: Weight | None = None
    alignment: Alignment | None = None
    tracking: Tracking | None = None
    leading: Leading | None = None
    decoration: Decoration | None = None
    wrapping: Wrapping | None = None
    color: Color | None = None
    family: str | None = None


# ---------------------------------------------------------------------------
# Sizing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Frame:
    width: SizeValue | None = None
    height: SizeValue | None = None
    min_width: SizeValue | None = None
    max_width: SizeValue | None = None
    min_height: SizeValue | None = None
    max_height: SizeValue | None = None


@dataclass(frozen=True)
class Size:
    """Equal width and height."""

    value: SizeValue | None = None


@dataclass(frozen=True)
class AspectRatio:
    width: float | None = None
    height: float | None = None
    square: bool = False
    video: bool = False


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Flex:
    direction: Direction | None = None
    justify: Justify | None = None
    align: Align | None = None
    grow: Grow | None = None


@dataclass(frozen=True)
class Grid:
    columns: int | None = None
    rows: int | None = None
    flow: GridFlow | None = None
    column_span: int | None = None
    row_span: int | None = None


@dataclass(frozen=True)
class Position:
    type: PositionType | None = None
    inset: Offset | None = None
    inset_x: Offset | None = None
    inset_y: Offset | None = None
    top: Offset | None = None
    right: Offset | None = None
    bottom: Offset | None = None
    left: Offset | None = None


@dataclass(frozen=True)
class Display:
    type: DisplayType | None = None


@dataclass(frozen=True)
class Visibility:
    is_hidden: bool = True


@dataclass(frozen=True)
class Overflow:
    type: OverflowType | None = None
    axis: Axis | None = None


@dataclass(frozen=True)
class ZIndex:
    value: Offset | None = None


# ---------------------------------------------------------------------------
# Spacing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Margin:
    """Margin on one or more edges; defaults to all edges, length 4."""

    edges: tuple[Edge, ...] = ()
    length: Offset | None = None
    auto: bool = False


@dataclass(frozen=True)
class Padding:
    """Padding on one or more edges; defaults to all edges, length 4."""

    edges: tuple[Edge, ...] = ()
    length: int | str | None = None


@dataclass(frozen=True)
class EdgeInsets:
    """Per-side lengths, leading and trailing mapping to left and right.

    Not a descriptor on its own: wrap it in one of the subclasses below (or
    pass it as ``insets=`` to a chained method) to say what the lengths are
    for. Margin and padding insets omit zero sides; border and position
    insets emit all four, since ``border-t-0`` and ``top-0`` are meaningful.
    """

    top: int = 0
    leading: int = 0
    bottom: int = 0
    trailing: int = 0

    @classmethod
    def uniform(cls, value: int):
        return cls(top=value, leading=value, bottom=value, trailing=value)

    @classmethod
    def symmetric(cls, vertical: int = 0, horizontal: int = 0):
        return cls(top=vertical, leading=horizontal, bottom=vertical, trailing=horizontal)

    @property
    def is_uniform(self) -> bool:
        return self.top == self.leading == self.bottom == self.trailing

    @property
    def is_zero(self) -> bool:
        return self.top == 0 and self.leading == 0 and self.bottom == 0 and self.trailing == 0


@dataclass(frozen=True)
class MarginInsets(EdgeInsets):
    pass


@dataclass(frozen=True)
class PaddingInsets(EdgeInsets):
    pass


@dataclass(frozen=True)
class BorderInsets(EdgeInsets):
    """Per-side border widths plus an optional style and color."""

    style: BorderStyle | None = None
    color: Color | None = None


@dataclass(frozen=True)
class PositionInsets(EdgeInsets):
    """Per-side offsets plus an optional position type."""

    type: PositionType | None = None


@dataclass(frozen=True)
class Spacing:
    """Gap between children along an axis (``space-x-*`` / ``space-y-*``)."""

    length: int | None = None
    axis: Axis | None = None


# ---------------------------------------------------------------------------
# Effects and interaction
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Transform:
    scale: Offset | None = None
    scale_x: Offset | None = None
    scale_y: Offset | None = None
    rotate: Offset | None = None
    translate_x: Offset | None = None
    translate_y: Offset | None = None
    skew_x: Offset | None = None
    skew_y: Offset | None = None


@dataclass(frozen=True)
class Transition:
    property: TransitionProperty | None = None
    duration: int | None = None
    easing: Easing | None = None
    delay: int | None = None


@dataclass(frozen=True)
class Animation:
    """A keyframe animation. Everything but the name renders as an arbitrary property."""

    name: AnimationName | str | None = None
    duration: int | None = None  # ms
    timing: AnimationTiming | str | None = None
    delay: int | None = None  # ms
    iterations: int | str | None = None  # a count, or "infinite"
    direction: AnimationDirection | None = None
    fill_mode: AnimationFillMode | None = None
    play_state: AnimationPlayState | None = None


@dataclass(frozen=True)
class Cursor:
    type: CursorType | None = None


@dataclass(frozen=True)
class Scroll:
    """Scroll behavior, scroll margin and padding, and snap points."""

    behavior: ScrollBehavior | None = None
    margin: Offset | None = None
    margin_edges: tuple[Edge, ...] = ()
    padding: int | None = None
    padding_edges: tuple[Edge, ...] = ()
    snap_align: SnapAlign | None = None
    snap_stop: SnapStop | None = None
    snap_type: SnapType | None = None


Style = (
    Border
    | Radius
    | Background
    | Opacity
    | Shadow
    | Ring
    | Outline
    | Font
    | Frame
    | Size
    | AspectRatio
    | Flex
    | Grid
    | Position
    | Display
    | Visibility
    | Overflow
    | ZIndex
    | Margin
    | Padding
    | MarginInsets
    | PaddingInsets
    | BorderInsets
    | PositionInsets
    | Spacing
    | Transform
    | Transition
    | Animation
    | Cursor
    | Scroll
)
