"""
Pairwise compatibility predicate for placed words.

Two words conflict when their bounding boxes touch or overlap in a way a
crossword layout does not allow:

1. Invalid intersection: perpendicular words cross on different characters
2. Corner by corner: perpendicular words touch only diagonally
3. Head by head: parallel words sit end to end on the same line
4. Side by side: parallel words run next to each other
5. Side by head: one word's end touches the other's side
6. Overlap: parallel words share cells

Everything is integer comparisons on positions and lengths.
"""

from typing import Optional

from .geometry import Box, crossing_cell, gaps
from .models import ConflictKind, Direction, PlacedWord, WordCompatibilitySettings


def classify_pair(word_a: PlacedWord, word_b: PlacedWord) -> Optional[ConflictKind]:
    """Geometric classification of a word pair, ignoring settings."""
    dx, dy = gaps(Box.of(word_a), Box.of(word_b))

    # At least one empty row or column in between
    if dx > 0 or dy > 0:
        return None

    parallel = word_a.direction == word_b.direction
    overlapping = dx < 0 and dy < 0

    if overlapping and not parallel:
        cell = crossing_cell(word_a, word_b)
        if word_a.character_at(cell) == word_b.character_at(cell):
            return None
        return ConflictKind.INVALID_INTERSECTION

    if dx == 0 and dy == 0:
        # Diagonal contact only matters for crossing directions
        return None if parallel else ConflictKind.CORNER_BY_CORNER

    if parallel and not overlapping:
        touches_along_axis = dx == 0 if word_a.direction is Direction.RIGHT else dy == 0
        if touches_along_axis:
            return ConflictKind.HEAD_BY_HEAD
        return ConflictKind.SIDE_BY_SIDE

    if not parallel:
        return ConflictKind.SIDE_BY_HEAD

    return ConflictKind.OVERLAP


def word_compatibility_issue(
    word_a: PlacedWord,
    word_b: PlacedWord,
    settings: WordCompatibilitySettings,
) -> Optional[ConflictKind]:
    """Return the conflict between two words, or None if they are compatible.

    A kind disabled in ``settings`` is treated as compatible.
    """
    kind = classify_pair(word_a, word_b)
    if kind is None or not settings.is_enabled(kind):
        return None
    return kind
