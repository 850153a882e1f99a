"""
Layout implementation for the layout engine.
This package provides the box model, box tree construction and block layout.
"""

from .box_metrics import Dimensions, EdgeSizes, Rect
from .layout import BoxType, LayoutBox, build_layout_tree
from .engine import LayoutEngine, format_layout_tree, layout_tree

__all__ = [
    'Dimensions', 'EdgeSizes', 'Rect', 'BoxType', 'LayoutBox', 'build_layout_tree',
    'LayoutEngine', 'format_layout_tree', 'layout_tree',
]
