"""
CSS box model metrics. All sizes are in px, in single precision.
"""

from typing import Optional

from ..css.values import f32


class Rect:
    """A rectangle: position of its top-left corner plus its size."""

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 0.0, height: float = 0.0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def expanded_by(self, edge: 'EdgeSizes') -> 'Rect':
        """
        Grow the rectangle outwards by the given edge sizes.

        Args:
            edge: Size to add on each side

        Returns:
            A new rectangle
        """
        return Rect(
            f32(self.x - edge.left),
            f32(self.y - edge.top),
            f32(f32(self.width + edge.left) + edge.right),
            f32(f32(self.height + edge.top) + edge.bottom),
        )

    def copy(self) -> 'Rect':
        return Rect(self.x, self.y, self.width, self.height)

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)

    def __repr__(self):
        return f"Rect(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


class EdgeSizes:
    """Sizes of the four edges of a box (padding, border or margin)."""

    def __init__(self, left: float = 0.0, right: float = 0.0, top: float = 0.0, bottom: float = 0.0):
        self.left = left
        self.right = right
        self.top = top
        self.bottom = bottom

    def copy(self) -> 'EdgeSizes':
        return EdgeSizes(self.left, self.right, self.top, self.bottom)

    def __eq__(self, other):
        if not isinstance(other, EdgeSizes):
            return NotImplemented
        return ((self.left, self.right, self.top, self.bottom)
                == (other.left, other.right, other.top, other.bottom))

    def __repr__(self):
        return f"EdgeSizes(left={self.left}, right={self.right}, top={self.top}, bottom={self.bottom})"


class Dimensions:
    """
    Represents the CSS box model metrics for a layout box.

    Only the content rectangle and the three edges are stored; the padding,
    border and margin boxes are derived from them on demand.
    """

    def __init__(self,
                 content: Optional[Rect] = None,
                 padding: Optional[EdgeSizes] = None,
                 border: Optional[EdgeSizes] = None,
                 margin: Optional[EdgeSizes] = None):
        # Position of the content area relative to the document origin
        self.content = content if content is not None else Rect()

        # Surrounding edges
        self.padding = padding if padding is not None else EdgeSizes()
        self.border = border if border is not None else EdgeSizes()
        self.margin = margin if margin is not None else EdgeSizes()

    def padding_box(self) -> Rect:
        """The area covered by the content area plus its padding."""
        return self.content.expanded_by(self.padding)

    def border_box(self) -> Rect:
        """The area covered by the content area plus padding and borders."""
        return self.padding_box().expanded_by(self.border)

    def margin_box(self) -> Rect:
        """The area covered by the content area plus padding, borders, and margin."""
        return self.border_box().expanded_by(self.margin)

    def copy(self) -> 'Dimensions':
        return Dimensions(self.content.copy(), self.padding.copy(), self.border.copy(), self.margin.copy())

    def __repr__(self):
        return (f"Dimensions(content={self.content!r}, padding={self.padding!r}, "
                f"border={self.border!r}, margin={self.margin!r})")
