"""Direct application: attach compiled tokens to a node by chained calls.

Every chained method builds a descriptor and hands it to ``_apply``. Nodes
implement ``_apply`` with :func:`apply_to`, which wraps the node in a new
:class:`Styled` value; the block builder implements it by accumulating. Both
go through :func:`style_tokens`, so the two surfaces agree token for token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from webstyle.markup import Markup, inject_classes, merge_classes
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
from webstyle.modifiers import Modifier, apply_modifiers, as_modifiers
from webstyle.rules import compile_style

logger = logging.getLogger(__name__)

On = Modifier | str | Iterable[Modifier | str] | None


def style_tokens(descriptor: object, modifiers: On = ()) -> list[str]:
    """Compile *descriptor* and prefix the result with *modifiers*."""
    return apply_modifiers(compile_style(descriptor), as_modifiers(modifiers))


def _tuple(value: Any) -> tuple:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Iterable):
        return tuple(value)
    return (value,)


class StyleMethods:
    """One chained method per style aspect.

    Subclasses implement ``_apply(descriptor, on)`` and return whatever the
    chain should continue on.
    """

    def _apply(self, descriptor: object, on: On):
        raise NotImplementedError

    def style(self, descriptor: object, *, on: On = ()):
        return self._apply(descriptor, on)

    # -- appearance ---------------------------------------------------------

    def border(
        self,
        width: int | None = None,
        edges: Edge | Iterable[Edge] = (),
        style: BorderStyle | None = None,
        color: Color | None = None,
        *,
        insets: EdgeInsets | None = None,
        on: On = (),
    ):
        if insets is not None:
            return self._apply(
                BorderInsets(
                    insets.top, insets.leading, insets.bottom, insets.trailing, style, color
                ),
                on,
            )
        return self._apply(Border(width, _tuple(edges), style, color), on)

    def rounded(
        self,
        size: RadiusSize | None = None,
        sides: RadiusSide | Iterable[RadiusSide] = (),
        *,
        on: On = (),
    ):
        return self._apply(Radius(size, _tuple(sides)), on)

    def background(self, color: Color | None = None, *, on: On = ()):
        return self._apply(Background(color), on)

    def opacity(self, value: int | None = None, *, on: On = ()):
        return self._apply(Opacity(value), on)

    def shadow(
        self, size: ShadowSize | None = None, color: Color | None = None, *, on: On = ()
    ):
        return self._apply(Shadow(size, color), on)

    def ring(self, width: int | None = None, color: Color | None = None, *, on: On = ()):
        return self._apply(Ring(width, color), on)

    def outline(
        self,
        width: int | None = None,
        style: BorderStyle | None = None,
        color: Color | None = None,
        offset: int | None = None,
        *,
        on: On = (),
    ):
        return self._apply(Outline(width, style, color, offset), on)

    # -- typography ---------------------------------------------------------

    def font(
        self,
        size: TextSize | None = None,
        weight: Weight | None = None,
        alignment: Alignment | None = None,
        tracking: Tracking | None = None,
        leading: Leading | None = None,
        decoration: Decoration | None = None,
        wrapping: Wrapping | None = None,
        color: Color | None = None,
        family: str | None = None,
        *,
        on: On = (),
    ):
        return self._apply(
            Font(size, weight, alignment, tracking, leading, decoration, wrapping, color, family),
            on,
        )

    # -- sizing -------------------------------------------------------------

    def frame(
        self,
        width: SizeValue | None = None,
        height: SizeValue | None = None,
        min_width: SizeValue | None = None,
        max_width: SizeValue | None = None,
        min_height: SizeValue | None = None,
        max_height: SizeValue | None = None,
        *,
        on: On = (),
    ):
        return self._apply(
            Frame(width, height, min_width, max_width, min_height, max_height), on
        )

    def size(self, value: SizeValue | None = None, *, on: On = ()):
        return self._apply(Size(value), on)

    def aspect_ratio(
        self,
        width: float | None = None,
        height: float | None = None,
        *,
        square: bool = False,
        video: bool = False,
        on: On = (),
    ):
        return self._apply(AspectRatio(width, height, square, video), on)

    # -- layout -------------------------------------------------------------

    def flex(
        self,
        direction: Direction | None = None,
        justify: Justify | None = None,
        align: Align | None = None,
        grow: Grow | None = None,
        *,
        on: On = (),
    ):
        return self._apply(Flex(direction, justify, align, grow), on)

    def grid(
        self,
        columns: int | None = None,
        rows: int | None = None,
        flow: GridFlow | None = None,
        column_span: int | None = None,
        row_span: int | None = None,
        *,
        on: On = (),
    ):
        return self._apply(Grid(columns, rows, flow, column_span, row_span), on)

    def position(
        self,
        type: PositionType | None = None,
        *,
        insets: EdgeInsets | None = None,
        on: On = (),
        **offsets,
    ):
        """Position type plus ``inset``, ``inset_x``, ``inset_y``, ``top``... offsets.

        With *insets* all four sides are emitted instead (``top-0`` included).
        """
        if insets is not None:
            return self._apply(
                PositionInsets(
                    insets.top, insets.leading, insets.bottom, insets.trailing, type
                ),
                on,
            )
        return self._apply(Position(type, **offsets), on)

    def display(self, type: DisplayType | None = None, *, on: On = ()):
        return self._apply(Display(type), on)

    def hidden(self, is_hidden: bool = True, *, on: On = ()):
        return self._apply(Visibility(is_hidden), on)

    def overflow(
        self, type: OverflowType | None = None, axis: Axis | None = None, *, on: On = ()
    ):
        return self._apply(Overflow(type, axis), on)

    def z_index(self, value: int | str | None = None, *, on: On = ()):
        return self._apply(ZIndex(value), on)

    # -- spacing ------------------------------------------------------------

    def margins(
        self,
        edges: Edge | Iterable[Edge] = (),
        length: int | str | None = None,
        *,
        auto: bool = False,
        insets: EdgeInsets | None = None,
        on: On = (),
    ):
        if insets is not None:
            return self._apply(
                MarginInsets(insets.top, insets.leading, insets.bottom, insets.trailing), on
            )
        return self._apply(Margin(_tuple(edges), length, auto), on)

    def padding(
        self,
        edges: Edge | Iterable[Edge] = (),
        length: int | str | None = None,
        *,
        insets: EdgeInsets | None = None,
        on: On = (),
    ):
        if insets is not None:
            return self._apply(
                PaddingInsets(insets.top, insets.leading, insets.bottom, insets.trailing), on
            )
        return self._apply(Padding(_tuple(edges), length), on)

    def spacing(self, length: int | None = None, axis: Axis | None = None, *, on: On = ()):
        return self._apply(Spacing(length, axis), on)

    # -- effects and interaction -------------------------------------------

    def transform(self, *, on: On = (), **components):
        """``scale``, ``scale_x``, ``rotate``, ``translate_x``, ``skew_y``... components."""
        return self._apply(Transform(**components), on)

    def transition(
        self,
        property: TransitionProperty | None = None,
        duration: int | None = None,
        easing: Easing | None = None,
        delay: int | None = None,
        *,
        on: On = (),
    ):
        return self._apply(Transition(property, duration, easing, delay), on)

    def animate(
        self,
        name: AnimationName | str | None = None,
        duration: int | None = None,
        timing: AnimationTiming | str | None = None,
        delay: int | None = None,
        iterations: int | str | None = None,
        direction: AnimationDirection | None = None,
        fill_mode: AnimationFillMode | None = None,
        play_state: AnimationPlayState | None = None,
        *,
        on: On = (),
    ):
        return self._apply(
            Animation(
                name, duration, timing, delay, iterations, direction, fill_mode, play_state
            ),
            on,
        )

    def cursor(self, type: CursorType | None = None, *, on: On = ()):
        return self._apply(Cursor(type), on)

    def scroll(
        self,
        behavior: ScrollBehavior | None = None,
        margin: int | str | None = None,
        padding: int | None = None,
        *,
        margin_edges: Edge | Iterable[Edge] = (),
        padding_edges: Edge | Iterable[Edge] = (),
        snap_align: SnapAlign | None = None,
        snap_stop: SnapStop | None = None,
        snap_type: SnapType | None = None,
        on: On = (),
    ):
        return self._apply(
            Scroll(
                behavior,
                margin,
                _tuple(margin_edges),
                padding,
                _tuple(padding_edges),
                snap_align,
                snap_stop,
                snap_type,
            ),
            on,
        )


class Stylable(StyleMethods):
    """Mixin for renderable nodes: every chained call returns a new :class:`Styled`."""

    def _apply(self, descriptor: object, on: On) -> Styled:
        return apply_to(self, descriptor, on)

    def on(self, *groups) -> Styled:
        """Apply descriptors and ``scoped(...)`` groups through a block builder."""
        from webstyle.builder import apply_block

        return apply_block(self, *groups)


@dataclass(frozen=True)
class Styled(Stylable):
    """A node plus the tokens added to it. The wrapped node is never mutated."""

    content: Markup
    added: tuple[str, ...] = ()

    @property
    def classes(self) -> tuple[str, ...]:
        return merge_classes(self.content.classes, self.added)

    def render(self) -> str:
        return inject_classes(self.content.render(), self.added)


def apply_to(node: Markup, descriptor: object, modifiers: On = ()) -> Styled:
    """Compile *descriptor*, prefix it with *modifiers* and wrap *node*."""
    tokens = style_tokens(descriptor, modifiers)
    logger.debug("%s -> %s", type(descriptor).__name__, tokens)
    return Styled(node, tuple(tokens))
