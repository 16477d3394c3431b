"""
Tests for the cell and edge occupancy maps.
"""

from itertools import product

from crossword_playground.analysis import (
    CellOccupant,
    ConflictKind,
    Direction,
    PlacedWord,
    WordCompatibilitySettings,
    WordConflict,
    analyze,
)


def word(text, x, y, direction="right"):
    return PlacedWord(position=(x, y), direction=direction, characters=text)


class TestCellMap:
    """Occupied cells, their occupants and inherited conflicts."""

    def test_valid_crossing(self):
        """HELLO and LOCAL share the 'L' at (2, 0)."""
        report = analyze([word("HELLO", 0, 0), word("LOCAL", 2, 0, "down")])
        assert len(report.cells) == 9

        shared = report.cells[(2, 0)]
        assert shared.occupants == [CellOccupant(0, 2), CellOccupant(1, 0)]
        assert shared.character == "L"
        assert shared.shared is True
        assert shared.conflicted is False

    def test_single_occupant_cells(self):
        report = analyze([word("CAT", 0, 0)])
        assert [report.cells[(x, 0)].character for x in range(3)] == ["C", "A", "T"]
        assert all(not cell.shared for cell in report.cells.values())

    def test_invalid_intersection_cell(self):
        """CAT's 'A' and DOG's 'O' meet at (3, 2)."""
        report = analyze([word("CAT", 2, 2), word("DOG", 3, 1, "down")])
        cell = report.cells[(3, 2)]
        assert cell.character is None
        assert cell.conflicted is True
        assert cell.occupants == [CellOccupant(0, 1), CellOccupant(1, 1)]
        assert cell.conflicts == [
            WordConflict(ConflictKind.INVALID_INTERSECTION, 1),
            WordConflict(ConflictKind.INVALID_INTERSECTION, 0),
        ]

    def test_conflict_marks_every_cell_of_the_word(self):
        """An adjacency conflict is inherited by all cells of both words."""
        report = analyze([word("AT", 3, 3), word("TABLE", 5, 3), word("DOG", 0, 10)])
        for x in range(3, 10):
            assert report.cells[(x, 3)].conflicted
        for x in range(3):
            assert not report.cells[(x, 10)].conflicted

    def test_overlapping_words_with_agreeing_letters(self):
        report = analyze([word("CAT", 0, 0), word("AT", 1, 0)])
        assert report.cells[(1, 0)].character == "A"
        assert report.cells[(2, 0)].character == "T"
        assert report.cells[(1, 0)].conflicts == [
            WordConflict(ConflictKind.OVERLAP, 1),
            WordConflict(ConflictKind.OVERLAP, 0),
        ]

    def test_disabled_conflict_leaves_cell_clean(self):
        """A disagreeing cell without a detected conflict shows no character but is not conflicted."""
        settings = WordCompatibilitySettings(invalid_intersection=False)
        report = analyze([word("CAT", 2, 2), word("DOG", 3, 1, "down")], settings)
        cell = report.cells[(3, 2)]
        assert cell.character is None
        assert cell.conflicted is False

    def test_non_string_characters(self):
        report = analyze([PlacedWord(position=(0, 0), direction="down", characters=(1, 2, 3))])
        assert report.cells[(0, 2)].character == 3


class TestEdgeMap:
    """Boundaries between consecutive cells of a word."""

    def test_edge_keys(self):
        report = analyze([word("HELLO", 0, 0), word("LOCAL", 2, 0, "down")])
        assert len(report.edges) == 8
        assert set(report.edges) == {
            *(((x, 0), Direction.RIGHT) for x in range(4)),
            *(((2, y), Direction.DOWN) for y in range(4)),
        }
        assert report.edges[((2, 0), Direction.RIGHT)].word_ids == [0]
        assert report.edges[((2, 0), Direction.DOWN)].word_ids == [1]

    def test_single_letter_has_no_edges(self):
        report = analyze([word("A", 0, 0), word("B", 5, 5, "down")])
        assert report.edges == {}

    def test_overlapping_words_share_edges(self):
        report = analyze([word("CAT", 0, 0), word("AT", 1, 0)])
        shared = report.edges[((1, 0), Direction.RIGHT)]
        assert shared.word_ids == [0, 1]
        assert shared.conflicted is True
        assert report.edges[((0, 0), Direction.RIGHT)].word_ids == [0]

    def test_edges_inherit_conflicts(self):
        report = analyze([word("AT", 3, 3), word("TABLE", 5, 3)])
        assert report.edges[((3, 3), Direction.RIGHT)].conflicts == [WordConflict(ConflictKind.HEAD_BY_HEAD, 1)]
        assert report.edges[((8, 3), Direction.RIGHT)].conflicts == [WordConflict(ConflictKind.HEAD_BY_HEAD, 0)]


def _sample_words():
    return [
        word(text, x, y, direction)
        for text, x, y, direction in product(("AB", "BA"), range(2), range(2), ("right", "down"))
    ]


class TestCellAgreement:
    """A cell shows a character exactly when its occupants agree."""

    def test_agreement_over_sampled_pairs(self):
        for a, b in product(_sample_words(), repeat=2):
            words = [a, b]
            report = analyze(words)
            for cell in report.cells.values():
                letters = {words[o.word_id].characters[o.index] for o in cell.occupants}
                if cell.character is not None:
                    assert letters == {cell.character}
                    continue
                assert len(letters) > 1
                assert any(c.kind.is_cell_conflict for c in cell.conflicts), (a, b)
