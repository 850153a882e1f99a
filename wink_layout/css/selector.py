"""
CSS Selector matching.
This module handles simple selectors (tag, id and class constraints) and their specificity.
"""

from typing import Iterable, List, Optional, Tuple

from ..dom import Element

Specificity = Tuple[int, int, int]


class SimpleSelector:
    """
    Represents a simple CSS selector such as ``div#main.wide``.

    Each constraint is optional; an absent constraint matches anything.
    """

    def __init__(self,
                 tag_name: Optional[str] = None,
                 id: Optional[str] = None,
                 classes: Optional[Iterable[str]] = None):
        """
        Initialize a simple selector.

        Args:
            tag_name: Required tag name, or None
            id: Required id attribute, or None
            classes: Class names the element must all carry
        """
        self.tag_name = tag_name
        self.id = id
        self.classes: List[str] = list(classes or [])

    def specificity(self) -> Specificity:
        """
        Compute the specificity triple ``(ids, classes, tags)``.

        Returns:
            The specificity; triples compare lexicographically
        """
        a = 1 if self.id is not None else 0
        b = len(self.classes)
        c = 1 if self.tag_name is not None else 0
        return (a, b, c)

    def __eq__(self, other):
        if not isinstance(other, SimpleSelector):
            return NotImplemented
        return (self.tag_name == other.tag_name and self.id == other.id
                and set(self.classes) == set(other.classes))

    def __hash__(self):
        return hash((self.tag_name, self.id, frozenset(self.classes)))

    def __str__(self):
        text = self.tag_name or ''
        if self.id is not None:
            text += f"#{self.id}"
        text += ''.join(f".{name}" for name in self.classes)
        return text or '*'

    def __repr__(self):
        return f"SimpleSelector({str(self)!r}, specificity={self.specificity()})"


def specificity(selector: SimpleSelector) -> Specificity:
    """Return the specificity triple of a selector."""
    return selector.specificity()


def matches_selector(selector: SimpleSelector, element: Element) -> bool:
    """
    Check if an element matches a simple selector.

    Args:
        selector: The selector to check
        element: The element to match against

    Returns:
        True if the element satisfies every constraint of the selector
    """
    if selector.tag_name is not None and element.tag_name != selector.tag_name:
        return False

    if selector.id is not None and element.id != selector.id:
        return False

    element_classes = element.class_list
    if any(class_name not in element_classes for class_name in selector.classes):
        return False

    return True


def matches(element: Element, selector: SimpleSelector) -> bool:
    """Argument order used by the cascade: element first."""
    return matches_selector(selector, element)
