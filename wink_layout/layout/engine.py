"""
Layout Engine.
This module runs the style and layout passes over a document for a fixed viewport.
"""

import logging
from typing import List, Optional

from ..css.stylesheet import Stylesheet
from ..css.values import f32
from ..dom import Node
from ..style import StyledNode, style_tree
from ..utils.config import Config
from ..utils.logging import PerformanceLogger
from .box_metrics import Dimensions, Rect
from .layout import BoxType, LayoutBox, build_layout_tree

logger = logging.getLogger(__name__)


def layout_tree(node: StyledNode, containing_block: Dimensions) -> LayoutBox:
    """
    Build and lay out the box tree for a styled tree.

    The root box is stacked from the top of the containing block, so its
    content height is treated as zero. The caller's dimensions are not modified.

    Args:
        node: Root of the styled tree
        containing_block: The viewport

    Returns:
        The laid-out root box
    """
    containing_block = containing_block.copy()
    containing_block.content.height = 0.0

    root_box = build_layout_tree(node)
    root_box.layout(containing_block)
    return root_box


class LayoutEngine:
    """
    Layout Engine.

    This class lays out documents against a viewport taken from its configuration.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the layout engine.

        Args:
            config: Configuration to read the default viewport from
        """
        self.config = config if config is not None else Config()
        self.perf = PerformanceLogger(logger, "LayoutEngine")
        logger.debug("Layout Engine initialized")

    def viewport(self, width: Optional[float] = None, height: Optional[float] = None) -> Dimensions:
        """
        Create the viewport dimensions.

        Args:
            width: Viewport width override
            height: Viewport height override

        Returns:
            Dimensions with a content rectangle at the origin
        """
        if width is None:
            width = self.config.get('viewport.width', 800)
        if height is None:
            height = self.config.get('viewport.height', 600)

        viewport = Dimensions()
        viewport.content.width = f32(width)
        viewport.content.height = f32(height)
        return viewport

    def create_layout(self, document: Node, stylesheet: Stylesheet,
                      viewport_width: Optional[float] = None,
                      viewport_height: Optional[float] = None) -> LayoutBox:
        """
        Create a layout tree from a document.

        Args:
            document: Root of the document tree
            stylesheet: Stylesheet to apply
            viewport_width: Optional viewport width override
            viewport_height: Optional viewport height override

        Returns:
            Root layout box
        """
        viewport = self.viewport(viewport_width, viewport_height)

        self.perf.start("style")
        styled_root = style_tree(document, stylesheet)
        self.perf.end("style")

        self.perf.start("layout")
        root_box = layout_tree(styled_root, viewport)
        self.perf.end("layout")

        logger.info(f"Laid out {document!r} in a {viewport.content.width:g}x{viewport.content.height:g} viewport")
        return root_box


def _format_rect(rect: Rect) -> str:
    return f"x={rect.x:g} y={rect.y:g} w={rect.width:g} h={rect.height:g}"


def format_layout_tree(box: LayoutBox) -> str:
    """
    Render a layout tree as indented text, one box per line.

    Args:
        box: Root layout box

    Returns:
        The text dump
    """
    lines: List[str] = []
    _format_box(box, 0, lines)
    return "\n".join(lines)


def _format_box(box: LayoutBox, depth: int, lines: List[str]) -> None:
    if box.box_type == BoxType.ANONYMOUS_BLOCK:
        label = "anonymous"
    else:
        node = box.get_style_node().node
        if node.is_text():
            label = f"{box.box_type.value} #text"
        else:
            label = f"{box.box_type.value} <{node.tag_name}>"

    d = box.dimensions
    lines.append(f"{'  ' * depth}{label} content({_format_rect(d.content)}) "
                 f"margin_box({_format_rect(d.margin_box())})")

    for child in box.children:
        _format_box(child, depth + 1, lines)
