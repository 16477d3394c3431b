"""Cell and edge occupancy maps built from a conflict index."""

from typing import Dict, List, Mapping

from .models import (
    CellOccupancy,
    CellOccupant,
    EdgeKey,
    EdgeOccupancy,
    PlacedWord,
    Position,
    WordConflict,
    WordId,
)


def build_cell_map(
    conflict_index: Mapping[WordId, List[WordConflict]],
    words: Mapping[WordId, PlacedWord],
) -> Dict[Position, CellOccupancy]:
    """Map every occupied cell to its occupants and the conflicts they carry.

    A cell shows a character only when all of its occupants agree on it.
    """
    cells: Dict[Position, CellOccupancy] = {}

    for word_id, conflicts in conflict_index.items():
        word = words[word_id]
        for i, position in enumerate(word.cells()):
            cell = cells.setdefault(position, CellOccupancy())
            cell.occupants.append(CellOccupant(word_id, i))
            cell.conflicts.extend(conflicts)

    for cell in cells.values():
        characters = {words[o.word_id].characters[o.index] for o in cell.occupants}
        if len(characters) == 1:
            cell.character = next(iter(characters))

    return cells


def build_edge_map(
    conflict_index: Mapping[WordId, List[WordConflict]],
    words: Mapping[WordId, PlacedWord],
) -> Dict[EdgeKey, EdgeOccupancy]:
    """Map every boundary between consecutive cells of a word to the words running through it.

    The key is the cell before the boundary and the word direction.
    """
    edges: Dict[EdgeKey, EdgeOccupancy] = {}

    for word_id, conflicts in conflict_index.items():
        word = words[word_id]
        for i in range(word.length - 1):
            edge = edges.setdefault((word.cell(i), word.direction), EdgeOccupancy())
            edge.word_ids.append(word_id)
            edge.conflicts.extend(conflicts)

    return edges
