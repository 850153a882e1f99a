"""Builders shared by the layout tests."""

from wink_layout.dom import elem
from wink_layout.layout import Dimensions
from wink_layout.style import StyledNode


def styled(values=None, children=None, tag="div"):
    """Build a styled node directly, bypassing the cascade."""
    return StyledNode(elem(tag), dict(values or {}), list(children or []))


def containing_block(width=800.0, x=0.0, y=0.0, height=0.0):
    dimensions = Dimensions()
    dimensions.content.x = x
    dimensions.content.y = y
    dimensions.content.width = width
    dimensions.content.height = height
    return dimensions
