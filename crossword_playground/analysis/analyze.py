"""
Layout analysis entry point.

Runs the whole pipeline on a snapshot of placed words:
1. Pairwise compatibility (conflict index per word)
2. Cell occupancy (shared characters, conflicted cells)
3. Edge occupancy (boundaries between cells of a word)
4. Outline spans for adjacency conflicts

Nothing is cached between calls; every call recomputes from scratch.
"""

from typing import Dict, Mapping, Optional, Sequence, Union

from ..utils.logger import get_logger
from .conflicts import build_conflict_index
from .errors import InvalidWordError
from .models import ConflictReport, PlacedWord, WordCompatibilitySettings, WordId
from .occupancy import build_cell_map, build_edge_map
from .spans import resolve_spans


LOGGER = get_logger(__name__)

Words = Union[Sequence[PlacedWord], Mapping[WordId, PlacedWord]]


def identify_words(words: Words) -> Dict[WordId, PlacedWord]:
    """Key the words by their ids; a plain sequence is keyed by index."""
    if isinstance(words, Mapping):
        items = list(words.items())
    else:
        items = list(enumerate(words))

    for word_id, word in items:
        if not isinstance(word, PlacedWord):
            raise InvalidWordError(f"Word {word_id!r} is not a PlacedWord: {word!r}")
        if word.length == 0:
            raise InvalidWordError(f"Word {word_id!r} at {tuple(word.position)} has no characters")

    return dict(items)


def analyze(
    words: Words,
    settings: Optional[WordCompatibilitySettings] = None,
) -> ConflictReport:
    """
    Analyse a word layout for conflicts.

    Args:
        words: Placed words, either a sequence (ids are indices) or a mapping of id to word
        settings: Conflict kinds to detect (all of them by default)

    Returns:
        ConflictReport with per-word conflicts, cell and edge maps and outline spans
    """
    if settings is None:
        settings = WordCompatibilitySettings()

    identified = identify_words(words)
    conflict_index = build_conflict_index(identified, settings)
    cells = build_cell_map(conflict_index, identified)
    edges = build_edge_map(conflict_index, identified)
    spans = resolve_spans(conflict_index, identified)

    LOGGER.debug(
        "Analysed %d words: %d cells, %d edges, %d spans",
        len(identified),
        len(cells),
        len(edges),
        len(spans),
    )

    return ConflictReport(
        word_conflicts=conflict_index,
        cells=cells,
        edges=edges,
        spans=spans,
    )
