"""Chained calls and block composition produce identical tokens."""

import pytest

from webstyle.builder import StyleBuilder, style_block
from webstyle.elements import Element
from webstyle.model.color import blue, gray, white
from webstyle.model.styles import (
    Animation,
    AspectRatio,
    Border,
    BorderInsets,
    Flex,
    Font,
    Frame,
    Margin,
    MarginInsets,
    Position,
    PositionInsets,
    Radius,
    Scroll,
    Shadow,
    Transform,
    Transition,
    Visibility,
)
from webstyle.model.values import (
    AnimationName,
    Direction,
    Edge,
    Grow,
    Justify,
    PositionType,
    RadiusSide,
    RadiusSize,
    SizeKeyword,
    TextSize,
    TransitionProperty,
    Weight,
)
from webstyle.modifiers import Modifier
from webstyle.styling import apply_to

DESCRIPTORS = [
    Border(width=2, edges=(Edge.BOTTOM,), color=blue(500)),
    Radius(RadiusSize.LG, (RadiusSide.TOP,)),
    Font(size=TextSize.XL, weight=Weight.SEMIBOLD, color=gray(900)),
    Frame(width=SizeKeyword.FULL, max_width=640),
    AspectRatio(video=True),
    Flex(direction=Direction.ROW, justify=Justify.BETWEEN),
    Flex(grow=Grow.ONE),
    Position(PositionType.ABSOLUTE, top=-2),
    Transform(rotate=-45, scale=105),
    Transition(TransitionProperty.COLORS, 150),
    Visibility(),
    Margin(),
    MarginInsets(top=2, leading=0, bottom=2, trailing=0),
    Shadow(color=white(0.1)),
    MarginInsets.uniform(-2),
    BorderInsets(bottom=2, color=blue(500)),
    PositionInsets(top=-1, type=PositionType.FIXED),
    Animation(AnimationName.SPIN, duration=1000),
    Scroll(margin=4, margin_edges=(Edge.LEADING,)),
]

MODIFIER_SETS = [
    (),
    (Modifier.HOVER,),
    (Modifier.MD,),
    (Modifier.MD, Modifier.HOVER),
    (Modifier.HOVER, Modifier.MD),
    (Modifier.DARK, Modifier.ARIA_EXPANDED),
]


@pytest.mark.parametrize("descriptor", DESCRIPTORS, ids=lambda d: type(d).__name__)
@pytest.mark.parametrize("modifiers", MODIFIER_SETS, ids=lambda m: "".join(x.prefix for x in m) or "none")
def test_chained_matches_block(descriptor, modifiers):
    chained = apply_to(Element("div"), descriptor, modifiers)

    builder = StyleBuilder()
    builder.enter_scope(*modifiers)
    builder.add(descriptor)
    builder.exit_scope()

    assert list(chained.added) == builder.flush()


class TestSurfaceEquivalence:
    def test_method_chain_matches_style_block(self):
        chained = (
            Element("div")
            .padding()
            .border(width=2, edges=Edge.BOTTOM, color=blue(500), on=Modifier.HOVER)
            .flex(Direction.ROW, on=Modifier.MD)
        )

        with style_block(Element("div")) as block:
            block.padding()
            with block.on(Modifier.HOVER):
                block.border(width=2, edges=Edge.BOTTOM, color=blue(500))
            with block.on(Modifier.MD):
                block.flex(Direction.ROW)

        assert chained.classes == block.node.classes
        assert chained.render() == block.node.render()
