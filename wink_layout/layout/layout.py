"""
Block layout implementation.
This module builds the box tree from a styled tree and solves the CSS2.1
width, position and height equations for block boxes in normal flow.
"""

import logging
from enum import Enum
from typing import List, Optional

from ..css.values import AUTO, ZERO, Length, Unit, Value, f32
from ..errors import AnonymousBoxStyleError, DisplayNoneRootError
from ..style import Display, StyledNode
from .box_metrics import Dimensions

logger = logging.getLogger(__name__)


class BoxType(Enum):
    """Kinds of layout boxes."""
    BLOCK = "block"
    INLINE = "inline"
    ANONYMOUS_BLOCK = "anonymous"


class LayoutBox:
    """
    A node of the layout tree.

    Block and inline boxes reference the styled node they were generated
    from; anonymous block boxes have none and only group inline children.
    """

    def __init__(self, box_type: BoxType, style_node: Optional[StyledNode] = None):
        """
        Initialize a layout box.

        Args:
            box_type: The kind of box
            style_node: The originating styled node; must be None for anonymous boxes
        """
        if (box_type == BoxType.ANONYMOUS_BLOCK) != (style_node is None):
            raise ValueError(f"{box_type.value} box created with style node {style_node!r}")

        self.box_type = box_type
        self._style_node = style_node
        self.dimensions = Dimensions()
        self.children: List[LayoutBox] = []

    def get_style_node(self) -> StyledNode:
        """
        Get the styled node this box was generated from.

        Raises:
            AnonymousBoxStyleError: For anonymous block boxes
        """
        if self._style_node is None:
            raise AnonymousBoxStyleError()
        return self._style_node

    def get_inline_container(self) -> 'LayoutBox':
        """
        Find the box a new inline child should go into.

        Inline and anonymous boxes hold inline children directly. A block box
        keeps using its trailing anonymous box, or appends a new one.
        """
        if self.box_type in (BoxType.INLINE, BoxType.ANONYMOUS_BLOCK):
            return self

        if not self.children or self.children[-1].box_type != BoxType.ANONYMOUS_BLOCK:
            self.children.append(LayoutBox(BoxType.ANONYMOUS_BLOCK))
        return self.children[-1]

    def layout(self, containing_block: Dimensions) -> None:
        """
        Lay out a box and its descendants.

        Args:
            containing_block: Dimensions of the parent box (or the viewport)
        """
        if self.box_type == BoxType.BLOCK:
            self.layout_block(containing_block)
        # Inline and anonymous boxes get no geometry: inline layout is not implemented

    def layout_block(self, containing_block: Dimensions) -> None:
        """
        Lay out a block box and its descendants.

        Args:
            containing_block: Dimensions of the containing block
        """
        # Child width can depend on parent width, so width comes first
        self.calculate_block_width(containing_block)

        # Determine where the box is located within its container
        self.calculate_block_position(containing_block)

        # Recursively lay out the children of this box
        self.layout_block_children()

        # Parent height can depend on child height, so height comes last
        self.calculate_block_height()

    def calculate_block_width(self, containing_block: Dimensions) -> None:
        """
        Resolve width and horizontal margins, borders and padding.

        Sets the content width and the left/right edges so that the margin box
        fills the containing block's content width (CSS2.1 section 10.3.3).

        Args:
            containing_block: Dimensions of the containing block
        """
        style = self.get_style_node()

        # `width` has initial value `auto`
        width = style.value('width') or AUTO

        # margin, border and padding have initial value 0
        margin_left = style.lookup('margin-left', 'margin', ZERO)
        margin_right = style.lookup('margin-right', 'margin', ZERO)

        border_left = style.lookup('border-left-width', 'border-width', ZERO)
        border_right = style.lookup('border-right-width', 'border-width', ZERO)

        padding_left = style.lookup('padding-left', 'padding', ZERO)
        padding_right = style.lookup('padding-right', 'padding', ZERO)

        total = 0.0
        for value in (margin_left, margin_right, border_left, border_right,
                      padding_left, padding_right, width):
            total = f32(total + value.to_px())

        # If width is not auto and the box is wider than the container, treat auto margins as 0
        if width != AUTO and total > containing_block.content.width:
            if margin_left == AUTO:
                margin_left = ZERO
            if margin_right == AUTO:
                margin_right = ZERO

        underflow = f32(containing_block.content.width - total)

        width_auto = width == AUTO
        margin_left_auto = margin_left == AUTO
        margin_right_auto = margin_right == AUTO

        if not width_auto and not margin_left_auto and not margin_right_auto:
            # Over-constrained: the right margin takes up the difference
            margin_right = _px(margin_right.to_px() + underflow)
        elif not width_auto and not margin_left_auto and margin_right_auto:
            margin_right = _px(underflow)
        elif not width_auto and margin_left_auto and not margin_right_auto:
            margin_left = _px(underflow)
        elif width_auto:
            # If width is auto, any other auto values become 0
            if margin_left_auto:
                margin_left = ZERO
            if margin_right_auto:
                margin_right = ZERO

            if underflow >= 0.0:
                # Expand width to fill the underflow
                width = _px(underflow)
            else:
                # Width can't be negative, adjust the right margin instead
                width = ZERO
                margin_right = _px(margin_right.to_px() + underflow)
        else:
            # Both margins auto: center the box
            margin_left = _px(underflow / 2.0)
            margin_right = _px(underflow / 2.0)

        d = self.dimensions
        d.content.width = width.to_px()

        d.padding.left = padding_left.to_px()
        d.padding.right = padding_right.to_px()

        d.border.left = border_left.to_px()
        d.border.right = border_right.to_px()

        d.margin.left = margin_left.to_px()
        d.margin.right = margin_right.to_px()

    def calculate_block_position(self, containing_block: Dimensions) -> None:
        """
        Resolve vertical edges and place the box below its earlier siblings.

        The containing block's content height is the running height of the
        siblings laid out so far, so the box stacks directly beneath them.

        Args:
            containing_block: Dimensions of the containing block
        """
        style = self.get_style_node()
        d = self.dimensions

        # An auto vertical margin has no px length, so it resolves to zero
        d.margin.top = style.lookup('margin-top', 'margin', ZERO).to_px()
        d.margin.bottom = style.lookup('margin-bottom', 'margin', ZERO).to_px()

        d.border.top = style.lookup('border-top-width', 'border-width', ZERO).to_px()
        d.border.bottom = style.lookup('border-bottom-width', 'border-width', ZERO).to_px()

        d.padding.top = style.lookup('padding-top', 'padding', ZERO).to_px()
        d.padding.bottom = style.lookup('padding-bottom', 'padding', ZERO).to_px()

        d.content.x = _sum(containing_block.content.x, d.margin.left, d.border.left, d.padding.left)
        d.content.y = _sum(containing_block.content.y, containing_block.content.height,
                           d.margin.top, d.border.top, d.padding.top)

    def layout_block_children(self) -> None:
        """Lay out the children top to bottom, accumulating the content height."""
        d = self.dimensions
        for child in self.children:
            child.layout(d)
            # Track the height so each child is laid out below the previous one
            d.content.height = f32(d.content.height + child.dimensions.margin_box().height)

    def calculate_block_height(self) -> None:
        """
        Apply an explicit ``height``.

        If the height is set to a px length, use that exact length; otherwise
        keep the value accumulated by ``layout_block_children``.
        """
        height = self.get_style_node().value('height')
        if isinstance(height, Length) and height.unit == Unit.PX:
            self.dimensions.content.height = height.number

    def __repr__(self):
        if self._style_node is None:
            return f"LayoutBox({self.box_type.value})"
        return f"LayoutBox({self.box_type.value}, {self._style_node.node!r})"


def _px(number: float) -> Value:
    return Length(number, Unit.PX)


def _sum(*numbers: float) -> float:
    # Left to right, rounding after every addition
    total = numbers[0]
    for number in numbers[1:]:
        total = f32(total + number)
    return total


def build_layout_tree(style_node: StyledNode) -> LayoutBox:
    """
    Build the tree of layout boxes for a styled tree, without laying it out.

    Args:
        style_node: Root of the styled tree

    Returns:
        The root layout box

    Raises:
        DisplayNoneRootError: If the root resolves to ``display: none``
    """
    display = style_node.display()
    if display == Display.BLOCK:
        root = LayoutBox(BoxType.BLOCK, style_node)
    elif display == Display.INLINE:
        root = LayoutBox(BoxType.INLINE, style_node)
    else:
        raise DisplayNoneRootError()

    for child in style_node.children:
        child_display = child.display()
        if child_display == Display.BLOCK:
            root.children.append(build_layout_tree(child))
        elif child_display == Display.INLINE:
            root.get_inline_container().children.append(build_layout_tree(child))
        # Nodes with display: none generate no boxes

    return root
