"""End-to-end tests: document and stylesheet in, laid-out box tree out."""

import json
import logging
import os

import pytest

from wink_layout.css import parse_css
from wink_layout.css.values import Color
from wink_layout.dom import elem, parse_html, text
from wink_layout.errors import DisplayNoneRootError
from wink_layout.layout import BoxType, LayoutEngine, Rect, format_layout_tree, layout_tree
from wink_layout.style import style_tree
from wink_layout.utils.config import Config

EXAMPLES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "examples")

CENTERED_CSS = """
#a { display: block; width: 100px; margin: auto; }
.w { background: #ff0000; }
p { display: block; height: 20px; }
"""


@pytest.fixture
def engine(tmp_path):
    return LayoutEngine(Config(str(tmp_path / "config.json")))


def centered_document():
    return elem("div", {"id": "a", "class": "w"}, [elem("p", {}, [text("x")])])


class TestCenteredBox:
    def test_layout_from_nodes(self, viewport):
        styled_root = style_tree(centered_document(), parse_css(CENTERED_CSS))
        root = layout_tree(styled_root, viewport)

        assert root.dimensions.content == Rect(350, 0, 100, 20)
        assert (root.dimensions.margin.left, root.dimensions.margin.right) == (350, 350)

        [p_box] = root.children
        assert p_box.box_type == BoxType.BLOCK
        assert p_box.dimensions.content == Rect(350, 0, 100, 20)

    def test_without_display_block_root_is_inline(self, viewport):
        sheet = parse_css("#a { width: 100px; margin: auto; } .w { background: #ff0000; } "
                          "p { display: block; height: 20px; }")
        root = layout_tree(style_tree(centered_document(), sheet), viewport)

        assert root.box_type == BoxType.INLINE
        assert root.dimensions.content == Rect()
        assert root.dimensions.margin_box() == Rect()

        [p_box] = root.children
        assert p_box.box_type == BoxType.BLOCK
        assert p_box.dimensions.content == Rect()

    def test_fractional_width_in_single_precision(self, viewport):
        sheet = parse_css("div { display: block; width: 100.1px; margin: auto; }")
        root = layout_tree(style_tree(elem("div"), sheet), viewport)
        assert root.dimensions.margin.left == 349.95001220703125
        assert root.dimensions.content.x == 349.95001220703125

    def test_background_is_specified(self, viewport):
        styled_root = style_tree(centered_document(), parse_css(CENTERED_CSS))
        root = layout_tree(styled_root, viewport)
        assert root.get_style_node().value("background") == Color(255, 0, 0, 255)

    def test_layout_from_html(self, engine):
        document = parse_html('<div id="a" class="w"><p>x</p></div>')
        root = engine.create_layout(document, parse_css(CENTERED_CSS))
        assert root.dimensions.content == Rect(350, 0, 100, 20)
        assert root.children[0].dimensions.content == Rect(350, 0, 100, 20)

    def test_text_inside_block_is_grouped(self, engine):
        root = engine.create_layout(centered_document(), parse_css(CENTERED_CSS))
        p_box = root.children[0]
        assert [child.box_type for child in p_box.children] == [BoxType.ANONYMOUS_BLOCK]
        assert p_box.children[0].children[0].get_style_node().node.data == "x"

    def test_format(self, engine):
        document = elem("div", {"id": "a", "class": "w"}, [elem("p")])
        root = engine.create_layout(document, parse_css(CENTERED_CSS))
        assert format_layout_tree(root) == (
            "block <div> content(x=350 y=0 w=100 h=20) margin_box(x=0 y=0 w=800 h=20)\n"
            "  block <p> content(x=350 y=0 w=100 h=20) margin_box(x=350 y=0 w=100 h=20)"
        )

    def test_format_labels_anonymous_and_text_boxes(self, engine):
        root = engine.create_layout(centered_document(), parse_css(CENTERED_CSS))
        lines = format_layout_tree(root).splitlines()
        assert lines[2].startswith("    anonymous content(")
        assert lines[3].startswith("      inline #text content(")


class TestLayoutEngine:
    def test_display_none_subtree_is_pruned(self, engine):
        document = elem("div", {}, [
            elem("p", {"class": "gone"}, [elem("p")]),
            elem("p"),
            elem("p"),
        ])
        sheet = parse_css("div, p { display: block; height: 10px; } div { height: auto; } "
                          ".gone { display: none; }")
        root = engine.create_layout(document, sheet)
        assert [child.get_style_node().node for child in root.children] == document.child_nodes[1:]
        assert root.dimensions.content.height == 20

    def test_display_none_root(self, engine):
        with pytest.raises(DisplayNoneRootError):
            engine.create_layout(elem("div"), parse_css("div { display: none; }"))

    def test_viewport_defaults(self, engine):
        viewport = engine.viewport()
        assert viewport.content == Rect(0, 0, 800, 600)

    def test_viewport_overrides(self, engine):
        assert engine.viewport(320, 200).content == Rect(0, 0, 320, 200)

    def test_viewport_from_config(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"viewport": {"width": 400}}))
        engine = LayoutEngine(Config(str(config_path)))

        assert engine.viewport().content == Rect(0, 0, 400, 600)
        root = engine.create_layout(elem("div"), parse_css("div { display: block; }"))
        assert root.dimensions.content.width == 400

    def test_width_override(self, engine):
        root = engine.create_layout(elem("div"), parse_css("div { display: block; }"), viewport_width=250)
        assert root.dimensions.content.width == 250

    def test_logs_phase_timings(self, engine, caplog):
        with caplog.at_level(logging.DEBUG, logger="wink_layout"):
            engine.create_layout(elem("div"), parse_css("div { display: block; }"))
        assert "LayoutEngine style took" in caplog.text
        assert "LayoutEngine layout took" in caplog.text

    def test_bundled_example(self, engine):
        with open(os.path.join(EXAMPLES_DIR, "test.html"), encoding="utf-8") as f:
            document = parse_html(f.read())
        with open(os.path.join(EXAMPLES_DIR, "test.css"), encoding="utf-8") as f:
            sheet = parse_css(f.read())

        root = engine.create_layout(document, sheet)

        # Seven nested boxes, each with 12px of padding on every side
        box, depth = root, 1
        while box.children:
            box, depth = box.children[0], depth + 1
        assert depth == 7
        assert box.dimensions.content == Rect(84, 84, 632, 0)
        assert root.dimensions.margin_box() == Rect(0, 0, 800, 168)
