"""
Document tree for the layout engine.
This package provides the element/text tree and the HTML adapter that builds it.
"""

from .node import Node, NodeType
from .element import Element, elem
from .text import Text, text
from .parser import HTMLParser, parse_html

__all__ = [
    'Node', 'NodeType', 'Element', 'Text', 'elem', 'text', 'HTMLParser', 'parse_html'
]
