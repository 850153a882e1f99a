"""
Wink Layout - a CSS2.1 block layout engine in Python.

Turns a document tree and a stylesheet into a tree of positioned, sized boxes.
"""

from .errors import (
    AnonymousBoxStyleError,
    ConfigError,
    CSSSyntaxError,
    DisplayNoneRootError,
    LayoutEngineError,
    LayoutTreeError,
    SelectorSyntaxError,
    UnitError,
)
from .dom import Element, Node, Text, elem, parse_html, text
from .css import Stylesheet, parse_css
from .style import Display, StyledNode, style_tree
from .layout import (
    BoxType,
    Dimensions,
    EdgeSizes,
    LayoutBox,
    LayoutEngine,
    Rect,
    build_layout_tree,
    format_layout_tree,
    layout_tree,
)

# Package information
__version__ = "0.1.0"
__author__ = "Wink Browser Team"
__description__ = "A CSS2.1 block layout engine in Python"

__all__ = [
    'AnonymousBoxStyleError', 'ConfigError', 'CSSSyntaxError', 'DisplayNoneRootError',
    'LayoutEngineError', 'LayoutTreeError', 'SelectorSyntaxError', 'UnitError',
    'Element', 'Node', 'Text', 'elem', 'parse_html', 'text',
    'Stylesheet', 'parse_css',
    'Display', 'StyledNode', 'style_tree',
    'BoxType', 'Dimensions', 'EdgeSizes', 'LayoutBox', 'LayoutEngine', 'Rect',
    'build_layout_tree', 'format_layout_tree', 'layout_tree',
]
