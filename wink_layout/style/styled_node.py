"""
Style tree construction.
This module pairs every document node with its specified values.
"""

from enum import Enum
from typing import List, Optional

from ..css.stylesheet import Stylesheet
from ..css.values import Keyword, Value
from ..dom import Node
from .cascade import PropertyMap, specified_values


class Display(Enum):
    """Values of the ``display`` property the layout pass understands."""
    INLINE = "inline"
    BLOCK = "block"
    NONE = "none"


class StyledNode:
    """
    A document node together with its specified values.

    The styled tree references the document tree and never outlives it.
    """

    def __init__(self, node: Node, specified_values: PropertyMap, children: List['StyledNode']):
        """
        Initialize a styled node.

        Args:
            node: The document node this node styles
            specified_values: Property name to value mapping
            children: Styled children, mirroring the node's children
        """
        self.node = node
        self.specified_values = specified_values
        self.children = children

    def value(self, name: str) -> Optional[Value]:
        """Return the specified value of a property if it exists, otherwise None."""
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """
        Return the value of ``name``, else of ``fallback_name``, else ``default``.

        Args:
            name: Per-side property, e.g. ``margin-left``
            fallback_name: Shorthand property, e.g. ``margin``
            default: Value used when neither is specified

        Returns:
            The first value found
        """
        value = self.value(name)
        if value is not None:
            return value
        value = self.value(fallback_name)
        if value is not None:
            return value
        return default

    def display(self) -> Display:
        """The value of the ``display`` property (defaults to inline)."""
        value = self.value('display')
        if value == Keyword('block'):
            return Display.BLOCK
        if value == Keyword('none'):
            return Display.NONE
        return Display.INLINE

    def __repr__(self):
        return f"StyledNode({self.node!r}, {len(self.specified_values)} properties)"


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """
    Apply a stylesheet to an entire document tree.

    Text nodes get an empty property map. Every child is styled, whatever
    its display; ``display: none`` is handled by the layout pass.

    Args:
        root: Root of the document tree
        stylesheet: The stylesheet to apply

    Returns:
        Root of the styled tree
    """
    if root.is_element():
        values = specified_values(root, stylesheet)
    else:
        values = {}

    children = [style_tree(child, stylesheet) for child in root.child_nodes]
    return StyledNode(root, values, children)
