"""Bounding-box and outline geometry shared by the predicate and the span resolver."""

from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from .models import Direction, PerimeterSpan, PlacedWord, Position


class Side(Enum):
    """A side of a word's bounding rectangle."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    def opposite(self) -> "Side":
        return _OPPOSITE_SIDES[self]


class Corner(Enum):
    """A corner of a word's bounding rectangle."""
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_RIGHT = "bottom_right"
    BOTTOM_LEFT = "bottom_left"

    def opposite(self) -> "Corner":
        return _OPPOSITE_CORNERS[self]


_OPPOSITE_SIDES = {
    Side.TOP: Side.BOTTOM,
    Side.BOTTOM: Side.TOP,
    Side.LEFT: Side.RIGHT,
    Side.RIGHT: Side.LEFT,
}

_OPPOSITE_CORNERS = {
    Corner.TOP_LEFT: Corner.BOTTOM_RIGHT,
    Corner.BOTTOM_RIGHT: Corner.TOP_LEFT,
    Corner.TOP_RIGHT: Corner.BOTTOM_LEFT,
    Corner.BOTTOM_LEFT: Corner.TOP_RIGHT,
}

_CORNERS = {
    (Side.TOP, Side.LEFT): Corner.TOP_LEFT,
    (Side.TOP, Side.RIGHT): Corner.TOP_RIGHT,
    (Side.BOTTOM, Side.RIGHT): Corner.BOTTOM_RIGHT,
    (Side.BOTTOM, Side.LEFT): Corner.BOTTOM_LEFT,
}

Placement = Union[Side, Corner]


class Box(NamedTuple):
    """Cell rectangle with exclusive right/bottom bounds."""
    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def of(cls, word: PlacedWord) -> "Box":
        width, height = word.size
        x, y = word.position
        return cls(x, y, x + width, y + height)


def gaps(a: Box, b: Box) -> Tuple[int, int]:
    """Empty columns and rows between two boxes.

    0 means the boxes touch along that axis, a negative value means their
    extents overlap on it.
    """
    dx = max(b.left - a.right, a.left - b.right)
    dy = max(b.top - a.bottom, a.top - b.bottom)
    return dx, dy


def relative_placement(a: Box, b: Box) -> Optional[Placement]:
    """Side or corner of ``a`` that ``b`` touches.

    Returns None when the boxes overlap or are separated by at least one cell.
    """
    dx, dy = gaps(a, b)
    if dx > 0 or dy > 0 or (dx < 0 and dy < 0):
        return None

    horizontal = None
    if dx == 0:
        horizontal = Side.LEFT if b.right <= a.left else Side.RIGHT
    vertical = None
    if dy == 0:
        vertical = Side.TOP if b.bottom <= a.top else Side.BOTTOM

    if horizontal is not None and vertical is not None:
        return _CORNERS[(vertical, horizontal)]
    return horizontal if horizontal is not None else vertical


def contact_range(a: Box, b: Box, side: Side) -> Tuple[int, int]:
    """First and last cell offsets of ``a`` (from its top-left) lying against ``b`` on ``side``."""
    if side in (Side.TOP, Side.BOTTOM):
        return max(a.left, b.left) - a.left, min(a.right, b.right) - a.left - 1
    return max(a.top, b.top) - a.top, min(a.bottom, b.bottom) - a.top - 1


def crossing_cell(a: PlacedWord, b: PlacedWord) -> Position:
    """The cell where two perpendicular words' lines cross."""
    across, down = (a, b) if a.direction is Direction.RIGHT else (b, a)
    return Position(down.position.x, across.position.y)


class Outline:
    """Clockwise numbering of the unit segments around a word's rectangle.

    Starting at the top-left corner: the top side left to right, the right
    side top to bottom, the bottom side right to left and the left side
    bottom to top. A word of length L has ``2L + 2`` segments.
    """

    def __init__(self, word: PlacedWord):
        self.width, self.height = word.size
        self.perimeter = 2 * (self.width + self.height)

    def segment(self, side: Side, offset: int) -> int:
        """Segment on ``side`` next to the cell ``offset`` cells from the top-left."""
        width, height = self.width, self.height
        if side is Side.TOP:
            return offset
        if side is Side.RIGHT:
            return width + offset
        if side is Side.BOTTOM:
            return width + height + (width - 1 - offset)
        return 2 * width + height + (height - 1 - offset)

    def side_span(self, side: Side, first: int, last: int) -> PerimeterSpan:
        """Span from the segment before the contact to the segment after it."""
        ends = (self.segment(side, first), self.segment(side, last))
        return PerimeterSpan(
            (min(ends) - 1) % self.perimeter,
            (max(ends) + 1) % self.perimeter,
        )

    def corner_span(self, corner: Corner) -> PerimeterSpan:
        """Span joining the two segments that meet at ``corner``."""
        width, height = self.width, self.height
        after = {
            Corner.TOP_RIGHT: width,
            Corner.BOTTOM_RIGHT: width + height,
            Corner.BOTTOM_LEFT: 2 * width + height,
            Corner.TOP_LEFT: self.perimeter,
        }[corner]
        return PerimeterSpan(after - 1, after % self.perimeter)
