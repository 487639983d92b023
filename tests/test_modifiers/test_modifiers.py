"""Tests for modifier prefixes and prefix composition."""

import pytest

from webstyle.model.color import blue
from webstyle.model.styles import Background
from webstyle.modifiers import (
    BREAKPOINTS,
    MODIFIERS,
    STATES,
    Modifier,
    apply_modifiers,
    apply_modifiers_separately,
    as_modifiers,
    lookup_modifier,
    modifier_prefix,
)
from webstyle.styling import style_tokens


# ---------------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------------


class TestModifierVocabulary:
    def test_prefixes(self):
        assert Modifier.MD.prefix == "md:"
        assert Modifier.XL2.prefix == "2xl:"
        assert Modifier.HOVER.prefix == "hover:"
        assert Modifier.ARIA_CHECKED.prefix == "aria-checked:"
        assert Modifier.MOTION_REDUCE.prefix == "motion-reduce:"

    def test_breakpoints_and_states_partition(self):
        assert len(BREAKPOINTS) == 6
        assert len(STATES) == 18
        assert BREAKPOINTS.isdisjoint(STATES)
        assert BREAKPOINTS | STATES == set(Modifier)

    def test_is_breakpoint(self):
        assert Modifier.LG.is_breakpoint
        assert not Modifier.DARK.is_breakpoint

    def test_table_lookup(self):
        assert MODIFIERS["hover"] is Modifier.HOVER
        assert MODIFIERS["2xl"] is Modifier.XL2

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MODIFIERS["wobble"] = Modifier.HOVER  # type: ignore[index]


class TestLookupModifier:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("md", Modifier.MD),
            ("2xl", Modifier.XL2),
            ("xl2", Modifier.XL2),
            ("aria-checked", Modifier.ARIA_CHECKED),
            ("ARIA_CHECKED", Modifier.ARIA_CHECKED),
            ("motion_reduce", Modifier.MOTION_REDUCE),
        ],
    )
    def test_known(self, name, expected):
        assert lookup_modifier(name) is expected

    def test_unknown(self):
        assert lookup_modifier("wobble") is None


class TestAsModifiers:
    def test_none(self):
        assert as_modifiers(None) == ()

    def test_single_modifier(self):
        assert as_modifiers(Modifier.HOVER) == (Modifier.HOVER,)

    def test_single_name(self):
        assert as_modifiers("md") == (Modifier.MD,)

    def test_sequence(self):
        assert as_modifiers(["hover", Modifier.MD]) == (Modifier.HOVER, Modifier.MD)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown modifier"):
            as_modifiers("wobble")


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class TestApplyModifiers:
    def test_no_modifiers_passes_through(self):
        assert apply_modifiers(["p-4", "m-2"], []) == ["p-4", "m-2"]

    def test_no_tokens(self):
        assert apply_modifiers([], [Modifier.HOVER]) == []

    def test_prefix_applied_once_per_token(self):
        assert apply_modifiers(["p-4", "m-2"], [Modifier.HOVER]) == ["hover:p-4", "hover:m-2"]

    def test_combined_prefix(self):
        assert apply_modifiers(["bg-blue-500"], [Modifier.MD, Modifier.HOVER]) == [
            "md:hover:bg-blue-500"
        ]

    def test_order_sensitive(self):
        assert modifier_prefix([Modifier.HOVER, Modifier.MD]) == "hover:md:"
        assert modifier_prefix([Modifier.MD, Modifier.HOVER]) == "md:hover:"

    def test_order_changes_descriptor_output(self):
        d = Background(blue(500))
        first = style_tokens(d, [Modifier.HOVER, Modifier.MD])
        second = style_tokens(d, [Modifier.MD, Modifier.HOVER])
        assert first == ["hover:md:bg-blue-500"]
        assert second == ["md:hover:bg-blue-500"]
        assert first != second

    def test_returns_new_list(self):
        tokens = ["p-4"]
        result = apply_modifiers(tokens, [])
        assert result == tokens
        assert result is not tokens


class TestApplyModifiersSeparately:
    def test_one_copy_per_modifier(self):
        result = apply_modifiers_separately(["p-4", "m-2"], [Modifier.HOVER, Modifier.FOCUS])
        assert result == ["hover:p-4", "hover:m-2", "focus:p-4", "focus:m-2"]

    def test_no_modifiers(self):
        assert apply_modifiers_separately(["p-4"], []) == ["p-4"]

    def test_no_tokens(self):
        assert apply_modifiers_separately([], [Modifier.HOVER]) == []
