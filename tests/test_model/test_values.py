"""Tests for scalar vocabularies, sizing values and edge insets."""

import pytest

from webstyle.model.styles import EdgeInsets, MarginInsets
from webstyle.model.values import (
    Arbitrary,
    Characters,
    ContainerSize,
    Direction,
    Edge,
    Fraction,
    Grow,
    Shade,
    SizeKeyword,
    TextSize,
    lookup,
    parse_size,
    render,
)


# ---------------------------------------------------------------------------
# Canonical forms
# ---------------------------------------------------------------------------


class TestCanonicalForm:
    def test_edge_selectors(self):
        assert [e.canonical() for e in Edge] == ["", "t", "l", "r", "b", "x", "y"]

    def test_canonical_is_stable(self):
        for member in TextSize:
            assert member.canonical() == member.canonical()

    def test_xl_scale_text_sizes(self):
        assert TextSize.XL2.canonical() == "2xl"
        assert TextSize.XL9.canonical() == "9xl"

    def test_direction_column_is_col(self):
        assert Direction.COLUMN.canonical() == "col"

    def test_shade_steps(self):
        assert [int(s) for s in Shade] == [
            50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950
        ]
        assert Shade.S950.canonical() == "950"


class TestLookup:
    def test_by_value(self):
        assert lookup(TextSize, "2xl") is TextSize.XL2

    def test_by_member_name(self):
        assert lookup(TextSize, "xl2") is TextSize.XL2
        assert lookup(Edge, "bottom") is Edge.BOTTOM

    def test_by_short_value(self):
        assert lookup(Edge, "b") is Edge.BOTTOM

    def test_dashed_name(self):
        assert lookup(Direction, "row-reverse") is Direction.ROW_REVERSE

    def test_numeric_value(self):
        assert lookup(Grow, "1") is Grow.ONE

    def test_unknown_returns_none(self):
        assert lookup(Edge, "diagonal") is None


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


class TestRender:
    def test_vocabulary(self):
        assert render(SizeKeyword.FULL) == "full"

    def test_int(self):
        assert render(4) == "4"

    def test_integral_float_drops_fraction(self):
        assert render(16.0) == "16"

    def test_float(self):
        assert render(1.5) == "1.5"

    def test_shade(self):
        assert render(Shade.S500) == "500"

    def test_sizing_helpers(self):
        assert render(Fraction(1, 2)) == "1/2"
        assert render(Characters(60)) == "[60ch]"
        assert render(Arbitrary("17rem")) == "[17rem]"

    def test_plain_string_verbatim(self):
        assert render("[calc(100%-1rem)]") == "[calc(100%-1rem)]"


# ---------------------------------------------------------------------------
# parse_size
# ---------------------------------------------------------------------------


class TestParseSize:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("4", 4),
            ("-2", -2),
            ("1/2", Fraction(1, 2)),
            ("60ch", Characters(60)),
            ("[17rem]", Arbitrary("17rem")),
            ("full", SizeKeyword.FULL),
            ("min", SizeKeyword.MIN),
            ("3xs", ContainerSize.XS3),
            ("md", ContainerSize.MD),
        ],
    )
    def test_known_forms(self, text, expected):
        assert parse_size(text) == expected

    def test_unknown_passes_through(self):
        assert parse_size("weird") == "weird"


# ---------------------------------------------------------------------------
# EdgeInsets
# ---------------------------------------------------------------------------


class TestEdgeInsets:
    def test_defaults_are_zero(self):
        insets = EdgeInsets()
        assert insets.is_zero
        assert insets.is_uniform

    def test_uniform(self):
        insets = EdgeInsets.uniform(3)
        assert insets == EdgeInsets(3, 3, 3, 3)
        assert insets.is_uniform
        assert not insets.is_zero

    def test_symmetric(self):
        insets = EdgeInsets.symmetric(vertical=2, horizontal=4)
        assert insets == EdgeInsets(top=2, leading=4, bottom=2, trailing=4)
        assert not insets.is_uniform

    def test_subclass_constructors_keep_type(self):
        assert type(MarginInsets.uniform(2)) is MarginInsets

    def test_frozen(self):
        insets = EdgeInsets()
        with pytest.raises(AttributeError):
            insets.top = 2  # type: ignore[misc]
