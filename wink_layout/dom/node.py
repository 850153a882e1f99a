"""
Node implementation for the document tree.
This module implements the minimal node interface the style and layout passes read.
"""

from enum import IntEnum
from typing import List, Optional


class NodeType(IntEnum):
    """Node types, numbered as in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3


class Node:
    """
    Base Node implementation for the document tree.

    Nodes are built once by the HTML adapter (or by hand in tests) and are
    read-only from the point of view of the style and layout passes.
    """

    def __init__(self, node_type: NodeType):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
        """
        self.node_type = node_type

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []

        self.node_name: str = "#node"

    @property
    def children(self) -> List['Node']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]

    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT_NODE

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        # If child already has a parent, remove it first
        if child.parent_node is not None:
            child.parent_node.remove_child(child)

        child.parent_node = self
        self.child_nodes.append(child)
        return child

    def remove_child(self, child: 'Node') -> 'Node':
        """
        Remove a child node from this node.

        Args:
            child: The node to remove

        Returns:
            The removed node
        """
        if child not in self.child_nodes:
            raise ValueError("Child not found in child nodes")

        child.parent_node = None
        self.child_nodes.remove(child)
        return child

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.node_name}>"
