"""Tests for compiling parsed style sheets to tokens."""

import pytest

from webstyle.errors import StyleValueError
from webstyle.model.color import CustomColor, blue
from webstyle.model.styles import Animation, Border, Font, Frame, Margin, Position, Scroll
from webstyle.model.values import (
    AnimationName,
    AnimationTiming,
    Arbitrary,
    Edge,
    Fraction,
    PositionType,
    SizeKeyword,
    SnapAlign,
    TextSize,
)
from webstyle.rules import RULES
from webstyle.sheet import ASPECTS, build_descriptor, compile_sheet, parse_sheet


def compile_source(source: str) -> list[str]:
    return compile_sheet(parse_sheet(source))


def descriptor(source: str):
    return build_descriptor(parse_sheet(source).items[0])


# ---------------------------------------------------------------------------
# Aspect table
# ---------------------------------------------------------------------------


class TestAspects:
    def test_every_rule_has_a_name(self):
        assert set(ASPECTS.values()) == set(RULES)

    def test_read_only(self):
        with pytest.raises(TypeError):
            ASPECTS["sparkle"] = Border  # type: ignore[index]


# ---------------------------------------------------------------------------
# Argument coercion
# ---------------------------------------------------------------------------


class TestBuildDescriptor:
    def test_border(self):
        assert descriptor("border(width: 2, edges: bottom, color: blue-500)") == Border(
            width=2, edges=(Edge.BOTTOM,), color=blue(500)
        )

    def test_edge_list(self):
        d = descriptor("margins(edges: [top, x], length: 2)")
        assert d == Margin(edges=(Edge.TOP, Edge.HORIZONTAL), length=2)

    def test_quoted_color_is_custom(self):
        assert descriptor('font(color: "#fafafa")').color == CustomColor("#fafafa")

    def test_vocabulary_by_value(self):
        assert descriptor("font(size: 2xl)") == Font(size=TextSize.XL2)

    def test_sizing_values(self):
        d = descriptor('frame(width: 1/2, height: "17rem", max_width: full)')
        assert d == Frame(
            width=Fraction(1, 2), height=Arbitrary("17rem"), max_width=SizeKeyword.FULL
        )

    def test_offsets(self):
        d = descriptor("position(type: absolute, top: -4, left: 1/2)")
        assert d == Position(PositionType.ABSOLUTE, top=-4, left="1/2")

    def test_boolean(self):
        assert descriptor("hidden(is_hidden: false)").is_hidden is False
        assert descriptor("margins(auto: true)").auto is True

    def test_float(self):
        assert descriptor("aspect-ratio(width: 1.5, height: 1)").width == 1.5

    def test_quoted_string_field(self):
        assert descriptor('font(family: "Inter")').family == "Inter"

    def test_known_animation_name(self):
        assert descriptor("animation(name: spin)") == Animation(AnimationName.SPIN)

    def test_custom_animation_name(self):
        assert descriptor("animation(name: wiggle)") == Animation("wiggle")

    def test_custom_timing(self):
        d = descriptor('animation(timing: "cubic-bezier(0.4,0,0.2,1)")')
        assert d.timing == "cubic-bezier(0.4,0,0.2,1)"
        assert descriptor("animation(timing: ease-in)").timing is AnimationTiming.EASE_IN

    def test_iterations(self):
        assert descriptor("animation(iterations: 3)").iterations == 3
        assert descriptor("animation(iterations: infinite)").iterations == "infinite"

    def test_scroll(self):
        d = descriptor("scroll(margin: -2, margin_edges: [leading], snap_align: start)")
        assert d == Scroll(margin=-2, margin_edges=(Edge.LEADING,), snap_align=SnapAlign.START)


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------


class TestCompileSheet:
    def test_border_scenario(self):
        tokens = compile_source("border(width: 2, edges: bottom, color: blue-500)")
        assert tokens == ["border-b-2", "border-blue-500"]

    def test_block_then_unscoped(self):
        tokens = compile_source("hover { background(color: blue-600) }\npadding()")
        assert tokens == ["hover:bg-blue-600", "p-4"]

    def test_source_order(self):
        tokens = compile_source("padding()\nhover { background(color: blue-600) }")
        assert tokens == ["p-4", "hover:bg-blue-600"]

    def test_compound_block(self):
        assert compile_source("md, hover { opacity(value: 50) }") == ["md:hover:opacity-50"]

    def test_nested_block_replaces_scope(self):
        tokens = compile_source("md { hover { padding() } margins() }")
        assert tokens == ["hover:p-4", "m-4"]

    def test_opacity_color(self):
        assert compile_source("background(color: blue-500/75)") == ["bg-blue-500/75"]

    def test_custom_color(self):
        assert compile_source('font(color: "#fafafa")') == ["text-[#fafafa]"]

    def test_flex(self):
        assert compile_source("flex(direction: row, justify: between)") == [
            "flex",
            "flex-row",
            "justify-between",
        ]
        assert compile_source("flex(grow: one)") == ["flex-1"]

    def test_defaults(self):
        assert compile_source("margins()\nrounded()") == ["m-4", "rounded-md"]

    def test_insets(self):
        assert compile_source("margin-insets(top: 2, bottom: 2)") == ["mt-2", "mb-2"]
        assert compile_source(
            "padding-insets(top: 3, leading: 3, bottom: 3, trailing: 3)"
        ) == ["p-3"]

    def test_aspect_ratio(self):
        assert compile_source("aspect-ratio(width: 16, height: 9)") == ["aspect-[16/9]"]

    def test_hidden(self):
        assert compile_source("hidden()") == ["hidden"]
        assert compile_source("hidden(is_hidden: false)") == []

    def test_empty_sheet(self):
        assert compile_source("") == []

    def test_border_insets(self):
        assert compile_source("border-insets(bottom: 2, color: blue-500)") == [
            "border-t-0",
            "border-l-0",
            "border-b-2",
            "border-r-0",
            "border-blue-500",
        ]

    def test_position_insets(self):
        tokens = compile_source("position-insets(type: fixed, top: -1)")
        assert tokens == ["fixed", "-top-1", "left-0", "bottom-0", "right-0"]

    def test_negative_uniform_insets(self):
        source = "margin-insets(top: -2, leading: -2, bottom: -2, trailing: -2)"
        assert compile_source(source) == ["-m-2"]

    def test_animation_and_scroll(self):
        source = "hover { animation(name: bounce, duration: 200) }\nscroll(behavior: smooth)"
        assert compile_source(source) == [
            "hover:animate-bounce",
            "hover:[animation-duration:200ms]",
            "scroll-smooth",
        ]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestCompileErrors:
    def test_unknown_aspect(self):
        with pytest.raises(StyleValueError, match="Unknown style aspect 'sparkle'"):
            compile_source("sparkle()")

    def test_unknown_argument(self):
        with pytest.raises(StyleValueError, match="thickness"):
            compile_source("border(thickness: 2)")

    def test_bad_value_names_aspect_and_field(self):
        with pytest.raises(StyleValueError) as exc_info:
            compile_source("border(width: wide)")
        message = str(exc_info.value)
        assert "border" in message
        assert "width" in message

    def test_color_without_shade(self):
        with pytest.raises(StyleValueError):
            compile_source("background(color: blue)")

    def test_unknown_vocabulary_member(self):
        with pytest.raises(StyleValueError, match="expected one of"):
            compile_source("font(weight: heavy)")

    def test_unknown_modifier(self):
        with pytest.raises(StyleValueError, match="Unknown modifier 'wiggle'"):
            compile_source("wiggle { padding() }")

    def test_duplicate_argument(self):
        with pytest.raises(StyleValueError, match="'length' given more than once") as exc_info:
            compile_source("padding(\n  length: 2,\n  length: 4\n)")
        assert exc_info.value.line == 3

    def test_error_line(self):
        with pytest.raises(StyleValueError) as exc_info:
            compile_source("padding()\nborder(width: x)")
        assert exc_info.value.line == 2
