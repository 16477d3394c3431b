"""Pairwise conflict index over a word set."""

from itertools import combinations
from typing import Dict, List, Mapping

from ..utils.logger import get_logger
from .compatibility import word_compatibility_issue
from .models import PlacedWord, WordCompatibilitySettings, WordConflict, WordId


LOGGER = get_logger(__name__)


def build_conflict_index(
    words: Mapping[WordId, PlacedWord],
    settings: WordCompatibilitySettings,
) -> Dict[WordId, List[WordConflict]]:
    """
    Evaluate every unordered pair of words once and record each conflict under both words.

    Every word gets an entry, empty when it has no conflicts. Conflicts are
    listed in pair-enumeration order.
    """
    index: Dict[WordId, List[WordConflict]] = {word_id: [] for word_id in words}

    pairs = 0
    found = 0
    for id_a, id_b in combinations(words, 2):
        pairs += 1
        kind = word_compatibility_issue(words[id_a], words[id_b], settings)
        if kind is None:
            continue
        found += 1
        index[id_a].append(WordConflict(kind, id_b))
        index[id_b].append(WordConflict(kind, id_a))

    LOGGER.debug("Evaluated %d word pairs, %d conflicts", pairs, found)
    return index
