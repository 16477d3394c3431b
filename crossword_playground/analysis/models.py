"""Data models for layout conflict analysis."""

from enum import Enum
from typing import Any, Dict, Hashable, List, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Caller-supplied word identifier (a sequence index when words come as a list)
WordId = Hashable


class Direction(str, Enum):
    """Direction a word runs in from its starting cell."""
    RIGHT = "right"
    DOWN = "down"

    @property
    def step(self) -> Tuple[int, int]:
        """Unit (dx, dy) vector along the direction."""
        return (1, 0) if self is Direction.RIGHT else (0, 1)

    def opposite(self) -> "Direction":
        return Direction.DOWN if self is Direction.RIGHT else Direction.RIGHT

    @classmethod
    def parse(cls, value: Any) -> Any:
        """Map the accepted spellings (R/D, H/V, across/down) onto a Direction."""
        if isinstance(value, str):
            return _DIRECTION_ALIASES.get(value.strip().lower(), value)
        return value


_DIRECTION_ALIASES = {
    "r": Direction.RIGHT,
    "h": Direction.RIGHT,
    "right": Direction.RIGHT,
    "across": Direction.RIGHT,
    "d": Direction.DOWN,
    "v": Direction.DOWN,
    "down": Direction.DOWN,
}


class Position(NamedTuple):
    """A cell coordinate on the (unbounded, signed) grid."""
    x: int
    y: int

    def shifted(self, direction: Direction, amount: int = 1) -> "Position":
        dx, dy = direction.step
        return Position(self.x + dx * amount, self.y + dy * amount)


class ConflictKind(str, Enum):
    """Kinds of incompatibility between two placed words.

    The values double as the keys of :class:`WordCompatibilitySettings`.
    """
    INVALID_INTERSECTION = "invalid_intersection"
    CORNER_BY_CORNER = "corner_by_corner"
    HEAD_BY_HEAD = "head_by_head"
    SIDE_BY_SIDE = "side_by_side"
    SIDE_BY_HEAD = "side_by_head"
    OVERLAP = "overlap"

    @property
    def is_cell_conflict(self) -> bool:
        """Cell conflicts happen at shared cells and have no outline span."""
        return self in (ConflictKind.INVALID_INTERSECTION, ConflictKind.OVERLAP)


class PlacedWord(BaseModel):
    """A word placed on the grid: start cell, direction and characters.

    Characters can be anything hashable that displays through ``str()``;
    a plain string is split into its characters.
    """
    model_config = ConfigDict(frozen=True)

    position: Position
    direction: Direction
    characters: Tuple[Hashable, ...] = Field(..., min_length=1)

    @field_validator("direction", mode="before")
    @classmethod
    def _parse_direction(cls, value: Any) -> Any:
        return Direction.parse(value)

    @field_validator("characters", mode="before")
    @classmethod
    def _split_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(value)
        return value

    @property
    def length(self) -> int:
        return len(self.characters)

    @property
    def text(self) -> str:
        return "".join(str(c) for c in self.characters)

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) of the word's bounding rectangle in cells."""
        if self.direction is Direction.RIGHT:
            return self.length, 1
        return 1, self.length

    def cell(self, index: int) -> Position:
        return self.position.shifted(self.direction, index)

    def cells(self) -> List[Position]:
        return [self.cell(i) for i in range(self.length)]

    def index_of(self, position: Position) -> Optional[int]:
        """Offset of ``position`` within the word, or None if not covered."""
        dx = position.x - self.position.x
        dy = position.y - self.position.y
        along, across = (dx, dy) if self.direction is Direction.RIGHT else (dy, dx)
        if across != 0 or not 0 <= along < self.length:
            return None
        return along

    def character_at(self, position: Position) -> Optional[Hashable]:
        index = self.index_of(position)
        return None if index is None else self.characters[index]


class WordCompatibilitySettings(BaseModel):
    """Which conflict kinds are detected. Setting a flag to False disables that kind."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    invalid_intersection: bool = True
    corner_by_corner: bool = True
    head_by_head: bool = True
    side_by_side: bool = True
    side_by_head: bool = True
    overlap: bool = True

    def is_enabled(self, kind: ConflictKind) -> bool:
        return getattr(self, kind.value)

    def disabled_kinds(self) -> List[ConflictKind]:
        return [kind for kind in ConflictKind if not self.is_enabled(kind)]


class WordConflict(NamedTuple):
    """A conflict as seen from one word: its kind and the other word."""
    kind: ConflictKind
    other: WordId


class PerimeterSpan(NamedTuple):
    """Clockwise interval of outline segments; wraps through 0 when end < start."""
    start: int
    end: int


class ConflictSpan(NamedTuple):
    """Where on ``word``'s outline a conflict with ``other`` is highlighted."""
    kind: ConflictKind
    word: WordId
    span: PerimeterSpan
    other: WordId


class CellOccupant(NamedTuple):
    """A word covering a cell, and which of its characters lands there."""
    word_id: WordId
    index: int


class CellOccupancy(BaseModel):
    """Everything known about one occupied cell."""
    occupants: List[CellOccupant] = Field(default_factory=list)
    conflicts: List[WordConflict] = Field(default_factory=list)
    character: Optional[Hashable] = None  # None when the occupants disagree

    @property
    def conflicted(self) -> bool:
        return bool(self.conflicts)

    @property
    def shared(self) -> bool:
        return len(self.occupants) > 1


class EdgeOccupancy(BaseModel):
    """Words whose outline runs through the boundary between two cells."""
    word_ids: List[WordId] = Field(default_factory=list)
    conflicts: List[WordConflict] = Field(default_factory=list)

    @property
    def conflicted(self) -> bool:
        return bool(self.conflicts)


EdgeKey = Tuple[Position, Direction]


class ConflictReport(BaseModel):
    """Result of analysing a word layout."""
    word_conflicts: Dict[WordId, List[WordConflict]] = Field(default_factory=dict)
    cells: Dict[Position, CellOccupancy] = Field(default_factory=dict)
    edges: Dict[EdgeKey, EdgeOccupancy] = Field(default_factory=dict)
    spans: List[ConflictSpan] = Field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return any(self.word_conflicts.values())

    def conflicted_words(self) -> List[WordId]:
        return [word_id for word_id, conflicts in self.word_conflicts.items() if conflicts]

    def conflicts_of_kind(self, kind: ConflictKind) -> List[Tuple[WordId, WordId]]:
        """(word, other) pairs for every stored conflict of ``kind``, both perspectives."""
        return [
            (word_id, conflict.other)
            for word_id, conflicts in self.word_conflicts.items()
            for conflict in conflicts
            if conflict.kind is kind
        ]

    def to_serializable(self) -> Dict[str, Any]:
        """Flatten the report into JSON-friendly lists (tuple keys are not valid JSON)."""
        return {
            "has_conflicts": self.has_conflicts,
            "words": [
                {
                    "id": word_id,
                    "conflicts": [{"kind": c.kind.value, "other": c.other} for c in conflicts],
                }
                for word_id, conflicts in self.word_conflicts.items()
            ],
            "cells": [
                {
                    "x": position.x,
                    "y": position.y,
                    "occupants": [{"word": o.word_id, "index": o.index} for o in cell.occupants],
                    "character": None if cell.character is None else str(cell.character),
                    "conflicted": cell.conflicted,
                }
                for position, cell in self.cells.items()
            ],
            "edges": [
                {
                    "x": position.x,
                    "y": position.y,
                    "direction": direction.value,
                    "words": list(edge.word_ids),
                    "conflicted": edge.conflicted,
                }
                for (position, direction), edge in self.edges.items()
            ],
            "spans": [
                {
                    "kind": span.kind.value,
                    "word": span.word,
                    "start": span.span.start,
                    "end": span.span.end,
                    "other": span.other,
                }
                for span in self.spans
            ],
        }
