"""
Text node implementation for the document tree.
"""

from .node import Node, NodeType


class Text(Node):
    """
    Text node implementation.

    This class represents a text leaf in the document tree.
    """

    def __init__(self, data: str):
        """
        Initialize a text node.

        Args:
            data: The text content
        """
        super().__init__(NodeType.TEXT_NODE)

        # Ensure data is not None
        if data is None:
            data = ""

        self.node_name = "#text"
        self.data = data

    def append_child(self, child: Node) -> Node:
        raise ValueError("Text nodes cannot have children")

    def __repr__(self):
        return f"<Text {self.data!r}>"


def text(data: str) -> Text:
    """Build a text node."""
    return Text(data)
