"""
Outline spans for adjacency conflicts.

For each conflict between word A and word B the span names the stretch of
A's outline facing B, in clockwise perimeter offsets (see
:class:`~.geometry.Outline`). B's placement around A must be one the
conflict kind allows for A's direction; anything else means the predicate
and the geometry disagree.
"""

from typing import Dict, FrozenSet, List, Mapping, Tuple

from .errors import InternalConsistencyError
from .geometry import Box, Corner, Outline, Placement, Side, contact_range, relative_placement
from .models import (
    ConflictKind,
    ConflictSpan,
    Direction,
    PerimeterSpan,
    PlacedWord,
    WordConflict,
    WordId,
)


_ALL_CORNERS: FrozenSet[Placement] = frozenset(Corner)
_ALL_SIDES: FrozenSet[Placement] = frozenset(Side)
_HORIZONTAL_SIDES: FrozenSet[Placement] = frozenset({Side.LEFT, Side.RIGHT})
_VERTICAL_SIDES: FrozenSet[Placement] = frozenset({Side.TOP, Side.BOTTOM})

# Placements of the other word allowed per (conflict kind, direction of the word)
ALLOWED_PLACEMENTS: Dict[Tuple[ConflictKind, Direction], FrozenSet[Placement]] = {
    (ConflictKind.CORNER_BY_CORNER, Direction.RIGHT): _ALL_CORNERS,
    (ConflictKind.CORNER_BY_CORNER, Direction.DOWN): _ALL_CORNERS,
    (ConflictKind.HEAD_BY_HEAD, Direction.RIGHT): _HORIZONTAL_SIDES,
    (ConflictKind.HEAD_BY_HEAD, Direction.DOWN): _VERTICAL_SIDES,
    (ConflictKind.SIDE_BY_SIDE, Direction.RIGHT): _VERTICAL_SIDES,
    (ConflictKind.SIDE_BY_SIDE, Direction.DOWN): _HORIZONTAL_SIDES,
    (ConflictKind.SIDE_BY_HEAD, Direction.RIGHT): _ALL_SIDES,
    (ConflictKind.SIDE_BY_HEAD, Direction.DOWN): _ALL_SIDES,
}


def resolve_span(kind: ConflictKind, word: PlacedWord, other: PlacedWord) -> PerimeterSpan:
    """Span of ``word``'s outline where its ``kind`` conflict with ``other`` shows."""
    allowed = ALLOWED_PLACEMENTS.get((kind, word.direction))
    if allowed is None:
        raise InternalConsistencyError(f"{kind.value} is a cell conflict and has no outline span")

    box, other_box = Box.of(word), Box.of(other)
    placement = relative_placement(box, other_box)
    if placement not in allowed:
        raise InternalConsistencyError(
            f"{kind.value} between '{word.text}' at {tuple(word.position)} {word.direction.value} "
            f"and '{other.text}' at {tuple(other.position)} {other.direction.value} "
            f"has unexpected placement {placement}"
        )

    outline = Outline(word)
    if isinstance(placement, Corner):
        return outline.corner_span(placement)
    first, last = contact_range(box, other_box, placement)
    return outline.side_span(placement, first, last)


def resolve_spans(
    conflict_index: Mapping[WordId, List[WordConflict]],
    words: Mapping[WordId, PlacedWord],
) -> List[ConflictSpan]:
    """One span per word and adjacency conflict; cell conflicts are left to the cell map."""
    spans: List[ConflictSpan] = []
    for word_id, conflicts in conflict_index.items():
        word = words[word_id]
        for kind, other_id in conflicts:
            if kind.is_cell_conflict:
                continue
            span = resolve_span(kind, word, words[other_id])
            spans.append(ConflictSpan(kind, word_id, span, other_id))
    return spans
