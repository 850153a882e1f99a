"""
HTML adapter.
This module turns markup into the Element/Text tree the style pass consumes,
using html5lib for tokenizing and tree construction.
"""

import logging
from typing import List

import html5lib

from .node import Node
from .element import Element
from .text import Text

logger = logging.getLogger(__name__)

# Node type constants of the minidom tree html5lib builds
_DOM_ELEMENT_NODE = 1
_DOM_TEXT_NODE = 3


class HTMLParser:
    """HTML parser for creating document trees from markup."""

    def __init__(self):
        """Initialize the HTML parser."""
        self._parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))

    def parse(self, html_content: str) -> Node:
        """
        Parse HTML content into a document tree.

        A fragment with a single top-level node yields that node as the root;
        otherwise the top-level nodes are wrapped in an ``html`` element.

        Args:
            html_content: The HTML content to parse

        Returns:
            The root node of the parsed tree
        """
        fragment = self._parser.parseFragment(html_content)
        # The tree builder can split one run of text over adjacent text nodes
        fragment.normalize()

        nodes: List[Node] = []
        for child in fragment.childNodes:
            converted = self._convert_node(child)
            if converted is not None:
                nodes.append(converted)

        if len(nodes) == 1:
            root = nodes[0]
        else:
            root = Element("html", {}, nodes)

        logger.debug(f"Parsed HTML into root <{root.node_name}> with {len(root.child_nodes)} children")
        return root

    def _convert_node(self, node):
        """
        Recursively convert a parsed html5lib node.

        Args:
            node: The parsed node from html5lib

        Returns:
            The converted node, or None for nodes the tree does not keep
        """
        if node.nodeType == _DOM_TEXT_NODE:
            # Whitespace between tags carries no content
            data = node.nodeValue or ""
            if not data.strip():
                return None
            return Text(data)

        if node.nodeType == _DOM_ELEMENT_NODE:
            return self._convert_element(node)

        # Comments, doctypes and processing instructions are dropped
        return None

    def _convert_element(self, element) -> Element:
        """
        Convert an html5lib element to our Element implementation.

        Args:
            element: The element from html5lib to convert

        Returns:
            Our Element implementation
        """
        tag_name = element.tagName.lower()

        attributes = {}
        if element.attributes is not None:
            for name, value in element.attributes.items():
                attributes[name] = value

        new_element = Element(tag_name, attributes)
        for child in element.childNodes:
            converted = self._convert_node(child)
            if converted is not None:
                new_element.append_child(converted)

        return new_element


def parse_html(html_content: str) -> Node:
    """
    Parse HTML content into a document tree.

    Args:
        html_content: The HTML content to parse

    Returns:
        The root node of the parsed tree
    """
    return HTMLParser().parse(html_content)
