"""Tests for block width, position and height calculation."""

import pytest

from wink_layout.css.values import AUTO, Keyword, Length, f32
from wink_layout.layout import BoxType, LayoutBox, Rect, layout_tree

from tests.helpers import containing_block, styled


def px(number):
    return Length(number)


def block(values=None, children=None):
    values = dict(values or {})
    values.setdefault("display", Keyword("block"))
    return styled(values, children)


def solve_width(values, width=800.0):
    box = LayoutBox(BoxType.BLOCK, block(values))
    box.calculate_block_width(containing_block(width))
    return box.dimensions


# ---------------------------------------------------------------------------
# Width
# ---------------------------------------------------------------------------


class TestWidth:
    def test_over_constrained_adjusts_right_margin(self):
        d = solve_width({"width": px(100), "margin-left": px(10), "margin-right": px(20)})
        assert (d.margin.left, d.content.width, d.margin.right) == (10, 100, 690)

    def test_auto_right_margin_takes_underflow(self):
        d = solve_width({"width": px(100), "margin-left": px(10), "margin-right": AUTO})
        assert (d.margin.left, d.content.width, d.margin.right) == (10, 100, 690)

    def test_auto_left_margin_takes_underflow(self):
        d = solve_width({"width": px(100), "margin-left": AUTO, "margin-right": px(20)})
        assert (d.margin.left, d.content.width, d.margin.right) == (680, 100, 20)

    def test_both_margins_auto_centers(self):
        d = solve_width({"width": px(100), "margin": AUTO})
        assert (d.margin.left, d.margin.right) == (350, 350)

    def test_auto_width_fills_container(self):
        d = solve_width({"margin-left": px(10), "margin-right": px(20), "padding": px(5)})
        assert d.content.width == 760
        assert (d.padding.left, d.padding.right) == (5, 5)

    def test_auto_width_zeroes_auto_margins(self):
        d = solve_width({"margin": AUTO})
        assert (d.margin.left, d.content.width, d.margin.right) == (0, 800, 0)

    def test_auto_width_never_negative(self):
        d = solve_width({"margin-left": px(500), "margin-right": px(400)})
        assert (d.margin.left, d.content.width, d.margin.right) == (500, 0, 300)

    def test_auto_width_with_oversized_padding(self):
        d = solve_width({"padding": px(500)})
        assert d.content.width == 0
        assert d.margin.right == -200

    def test_too_wide_box_ignores_auto_margins(self):
        d = solve_width({"width": px(900), "margin": AUTO})
        assert (d.margin.left, d.content.width, d.margin.right) == (0, 900, -100)

    def test_borders(self):
        d = solve_width({"width": px(100), "border-width": px(3), "border-right-width": px(7)})
        assert (d.border.left, d.border.right) == (3, 7)
        assert d.margin.right == 690

    def test_margin_box_spans_container(self):
        d = solve_width({"width": px(120), "margin-left": px(13), "padding-left": px(4),
                         "border-width": px(2)}, width=500.0)
        assert d.margin_box().width == 500

    def test_single_precision_centering(self):
        d = solve_width({"width": px(100.1), "margin": AUTO})
        assert d.content.width == 100.09999847412109375
        assert d.margin.left == d.margin.right == 349.95001220703125

    def test_non_length_values_count_as_zero(self):
        d = solve_width({"padding": Keyword("thick"), "margin-left": AUTO, "width": px(100)})
        assert d.padding.left == 0
        assert d.margin.left == 700


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------


def test_position_below_containing_block_content():
    box = LayoutBox(BoxType.BLOCK, block({
        "margin-top": px(5), "border-top-width": px(1), "padding-top": px(2),
        "margin-left": px(3), "border-left-width": px(1), "padding-left": px(2),
        "margin-bottom": px(4), "padding-bottom": px(6),
    }))
    cb = containing_block(200.0, x=10.0, y=20.0, height=30.0)
    box.calculate_block_width(cb)
    box.calculate_block_position(cb)

    d = box.dimensions
    assert (d.content.x, d.content.y) == (16, 58)
    assert (d.margin.bottom, d.padding.bottom) == (4, 6)


def test_auto_vertical_margins_are_zero():
    box = LayoutBox(BoxType.BLOCK, block({"margin": AUTO}))
    box.calculate_block_position(containing_block())
    assert (box.dimensions.margin.top, box.dimensions.margin.bottom) == (0, 0)


# ---------------------------------------------------------------------------
# Children and height
# ---------------------------------------------------------------------------


class TestStacking:
    def test_children_stack_vertically(self):
        root = layout_tree(block({}, [
            block({"height": px(10)}),
            block({"height": px(20), "margin-top": px(5), "margin-bottom": px(5)}),
            block({"height": px(30)}),
        ]), containing_block())

        first, second, third = root.children
        assert first.dimensions.content == Rect(0, 0, 800, 10)
        assert second.dimensions.content == Rect(0, 15, 800, 20)
        assert third.dimensions.content == Rect(0, 40, 800, 30)
        assert root.dimensions.content.height == 70

    def test_heights_accumulate_in_single_precision(self):
        root = layout_tree(block({}, [block({"height": px(0.1)}) for _ in range(3)]), containing_block())
        tenth = f32(0.1)
        assert root.children[2].dimensions.content.y == f32(tenth + tenth)
        assert root.dimensions.content.height == f32(f32(tenth + tenth) + tenth)

    def test_children_start_below_parent_edges(self):
        root = layout_tree(block({"padding": px(10)}, [block({"height": px(5)})]), containing_block())
        child = root.children[0]
        assert child.dimensions.content == Rect(10, 10, 780, 5)
        assert root.dimensions.margin_box() == Rect(0, 0, 800, 25)

    def test_explicit_height_overrides_content(self):
        root = layout_tree(block({"height": px(50)}, [block({"height": px(100)})]), containing_block())
        assert root.dimensions.content.height == 50

    def test_negative_height_is_kept(self):
        root = layout_tree(block({"height": px(-5)}), containing_block())
        assert root.dimensions.content.height == -5

    def test_auto_height(self):
        root = layout_tree(block({"height": AUTO}, [block({"height": px(12)})]), containing_block())
        assert root.dimensions.content.height == 12

    def test_display_none_child_takes_no_space(self):
        children = [block({"height": px(10)}), block({"height": px(20)})]
        hidden = block({"display": Keyword("none"), "height": px(99)})
        with_hidden = layout_tree(block({}, [children[0], hidden, children[1]]), containing_block())
        without = layout_tree(block({}, children), containing_block())
        assert with_hidden.dimensions.content.height == without.dimensions.content.height == 30

    def test_anonymous_box_contributes_no_height(self):
        root = layout_tree(block({}, [styled(), block({"height": px(10)})]), containing_block())
        assert root.children[1].dimensions.content.y == 0
        assert root.dimensions.content.height == 10


class TestLayoutTree:
    def test_viewport_height_is_ignored(self, viewport):
        root = layout_tree(block({"height": px(20)}), viewport)
        assert root.dimensions.content == Rect(0, 0, 800, 20)

    def test_viewport_is_not_modified(self, viewport):
        layout_tree(block(), viewport)
        assert viewport.content == Rect(0, 0, 800, 600)

    @pytest.mark.parametrize("width", [0.0, 320.0, 1024.0])
    def test_root_fills_viewport_width(self, width):
        root = layout_tree(block(), containing_block(width))
        assert root.dimensions.margin_box().width == width
