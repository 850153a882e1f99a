"""Tests for style tree construction and display classification."""

from wink_layout.css import parse_css
from wink_layout.css.values import Keyword, Length
from wink_layout.dom import elem, text
from wink_layout.style import Display, style_tree

from tests.helpers import styled


def test_tree_mirrors_document():
    document = elem("div", {}, [elem("p", {}, [text("hi")]), text("tail"), elem("span")])
    root = style_tree(document, parse_css("p { display: none; }"))

    assert root.node is document
    assert [child.node for child in root.children] == document.child_nodes
    assert root.children[0].children[0].node is document.child_nodes[0].child_nodes[0]


def test_display_none_children_are_still_styled():
    document = elem("div", {}, [elem("p", {}, [elem("b")])])
    root = style_tree(document, parse_css("p { display: none; } b { width: 1px; }"))
    assert root.children[0].display() == Display.NONE
    assert root.children[0].children[0].value("width") == Length(1)


def test_text_nodes_have_empty_map():
    document = elem("div", {}, [text("hi")])
    root = style_tree(document, parse_css("* { display: block; }"))
    assert root.specified_values == {"display": Keyword("block")}
    assert root.children[0].specified_values == {}


class TestDisplay:
    def test_block(self):
        assert styled({"display": Keyword("block")}).display() == Display.BLOCK

    def test_none(self):
        assert styled({"display": Keyword("none")}).display() == Display.NONE

    def test_defaults_to_inline(self):
        assert styled().display() == Display.INLINE

    def test_other_values_are_inline(self):
        assert styled({"display": Keyword("flex")}).display() == Display.INLINE
        assert styled({"display": Keyword("inline-block")}).display() == Display.INLINE
        assert styled({"display": Length(3)}).display() == Display.INLINE


class TestLookup:
    def test_specific_property_first(self):
        node = styled({"margin-left": Length(1), "margin": Length(2)})
        assert node.lookup("margin-left", "margin", Length(0)) == Length(1)

    def test_falls_back_to_shorthand(self):
        node = styled({"margin": Length(2)})
        assert node.lookup("margin-left", "margin", Length(0)) == Length(2)

    def test_default(self):
        assert styled().lookup("margin-left", "margin", Length(0)) == Length(0)

    def test_value_missing(self):
        assert styled().value("width") is None
