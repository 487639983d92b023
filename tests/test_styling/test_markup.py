"""Tests for the class-merge contract and the minimal element tree."""

from webstyle.elements import Element, Text
from webstyle.markup import Markup, inject_classes, merge_classes


# ---------------------------------------------------------------------------
# merge_classes / inject_classes
# ---------------------------------------------------------------------------


class TestMergeClasses:
    def test_appends_in_order(self):
        assert merge_classes(("a", "b"), ("c",)) == ("a", "b", "c")

    def test_keeps_duplicates(self):
        assert merge_classes(("a", "b"), ("b", "a")) == ("a", "b", "b", "a")


class TestInjectClasses:
    def test_adds_class_attribute(self):
        assert inject_classes("<div>x</div>", ["p-4"]) == '<div class="p-4">x</div>'

    def test_extends_existing_class(self):
        markup = '<div class="card" id="x">y</div>'
        assert inject_classes(markup, ["p-4", "m-2"]) == (
            '<div class="card p-4 m-2" id="x">y</div>'
        )

    def test_only_first_tag(self):
        markup = "<ul><li>a</li></ul>"
        assert inject_classes(markup, ["list-none"]) == (
            '<ul class="list-none"><li>a</li></ul>'
        )

    def test_self_closing(self):
        markup = '<img src="a.png" />'
        assert inject_classes(markup, ["w-4"]) == '<img class="w-4" src="a.png" />'

    def test_bare_text_wrapped_in_span(self):
        assert inject_classes("hello", ["font-bold"]) == (
            '<span class="font-bold">hello</span>'
        )

    def test_no_classes_is_identity(self):
        assert inject_classes("<p>x</p>", []) == "<p>x</p>"


# ---------------------------------------------------------------------------
# Element / Text
# ---------------------------------------------------------------------------


class TestElement:
    def test_render_with_attributes(self):
        el = Element("a", classes=("link",), attributes={"href": "/x"}, children=("Go",))
        assert el.render() == '<a class="link" href="/x">Go</a>'

    def test_render_self_closing(self):
        assert Element("br", self_closing=True).render() == "<br />"

    def test_text_children_escaped(self):
        assert Element("p", children=("a < b",)).render() == "<p>a &lt; b</p>"

    def test_nested_children(self):
        el = Element("div", children=(Element("span", children=("x",)),))
        assert el.render() == "<div><span>x</span></div>"

    def test_is_markup(self):
        assert isinstance(Element("div"), Markup)
        assert isinstance(Text("x"), Markup)

    def test_classes_normalised_to_tuple(self):
        assert Element("div", classes=["a", "b"]).classes == ("a", "b")


class TestText:
    def test_render_escapes(self):
        assert Text("1 < 2").render() == "1 &lt; 2"

    def test_has_no_classes(self):
        assert Text("x").classes == ()
