"""
Element implementation for the document tree.
"""

from typing import Dict, Iterable, Optional, Set

from .node import Node, NodeType


class Element(Node):
    """
    Element node: a tag name, an attribute map and ordered children.
    """

    def __init__(self,
                 tag_name: str,
                 attributes: Optional[Dict[str, str]] = None,
                 children: Optional[Iterable[Node]] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            attributes: Attribute name to value mapping
            children: Child nodes to append, in order
        """
        super().__init__(NodeType.ELEMENT_NODE)

        # Selectors compare tag names exactly, so keep the name as given
        self.tag_name = tag_name
        self.node_name = tag_name

        self.attributes: Dict[str, str] = dict(attributes or {})

        for child in children or ():
            self.append_child(child)

    @property
    def id(self) -> Optional[str]:
        """Get the ID of the element, or None when it has no ``id`` attribute."""
        return self.get_attribute('id')

    @property
    def class_list(self) -> Set[str]:
        """Get the set of classes applied to this element."""
        class_attr = self.get_attribute('class')
        if not class_attr:
            return set()
        return set(class_attr.split())

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get an attribute value.

        Args:
            name: Attribute name

        Returns:
            The attribute value, or None if the attribute is not set
        """
        return self.attributes.get(name)

    def __repr__(self):
        attrs = ''.join(f' {name}="{value}"' for name, value in self.attributes.items())
        return f"<Element {self.tag_name}{attrs}>"


def elem(tag_name: str,
         attributes: Optional[Dict[str, str]] = None,
         children: Optional[Iterable[Node]] = None) -> Element:
    """Build an element node."""
    return Element(tag_name, attributes, children)
