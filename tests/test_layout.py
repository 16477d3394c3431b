"""
Test suite for layout parsing and loading.

Tests the compact line format:
- Parse errors (EMPTY_LAYOUT, INVALID_LINE, INVALID_DIRECTION, DUPLICATE_ID)
- Aliases, ids, signed coordinates
And YAML layout files (settings, words, board blocks).
"""

import pytest

from crossword_playground.analysis import (
    ConflictKind,
    Direction,
    LayoutLoadError,
    PlacedWord,
    load_layout,
    layout_from_mapping,
    parse_layout,
)


class TestParseLayout:
    """Compact line format."""

    def test_basic_lines(self):
        entries, errors = parse_layout("""
        HELLO @ 0,0 R
        LOCAL @ 2,0 D
        """)
        assert errors == []
        assert [(e.word, e.x, e.y, e.direction) for e in entries] == [
            ("HELLO", 0, 0, Direction.RIGHT),
            ("LOCAL", 2, 0, Direction.DOWN),
        ]

    def test_ids_and_parenthesised_coordinates(self):
        entries, errors = parse_layout("local: LOCAL @ (2, 0) down")
        assert errors == []
        assert entries[0].id == "local"
        assert (entries[0].x, entries[0].y) == (2, 0)

    def test_aliases_and_case(self):
        entries, errors = parse_layout("cat @ 0,0 h\ndog @ 5,5 V\nemu @ 9,9 Across")
        assert errors == []
        assert [e.word for e in entries] == ["CAT", "DOG", "EMU"]
        assert [e.direction for e in entries] == [Direction.RIGHT, Direction.DOWN, Direction.RIGHT]

    def test_negative_coordinates(self):
        entries, _ = parse_layout("SEZAM @ 10,-2 D")
        assert (entries[0].x, entries[0].y) == (10, -2)

    def test_comments_skipped(self):
        entries, errors = parse_layout("# a comment\nCAT @ 0,0 R\n\n# another")
        assert errors == []
        assert len(entries) == 1

    def test_empty_layout(self):
        entries, errors = parse_layout("")
        assert entries == []
        assert errors[0].code == "EMPTY_LAYOUT"

    def test_only_comments_is_empty(self):
        _, errors = parse_layout("# nothing here\n\n")
        assert [e.code for e in errors] == ["EMPTY_LAYOUT"]

    def test_invalid_line_reports_line_number(self):
        entries, errors = parse_layout("CAT @ 0,0 R\n\nDOG 0,2 R\nEMU @ 5,5 D")
        assert [e.word for e in entries] == ["CAT", "EMU"]
        assert len(errors) == 1
        assert errors[0].code == "INVALID_LINE"
        assert errors[0].line == 3

    def test_missing_coordinates(self):
        _, errors = parse_layout("CAT @ R")
        assert errors[0].code == "INVALID_LINE"

    def test_invalid_direction(self):
        _, errors = parse_layout("CAT @ 0,0 X")
        assert errors[0].code == "INVALID_DIRECTION"
        assert errors[0].line == 1

    def test_duplicate_id(self):
        entries, errors = parse_layout("a: CAT @ 0,0 R\na: DOG @ 0,2 R")
        assert len(entries) == 1
        assert errors[0].code == "DUPLICATE_ID"
        assert errors[0].line == 2

    def test_entry_to_placed_word(self):
        entries, _ = parse_layout("CAT @ 1,2 D")
        assert entries[0].to_placed_word() == PlacedWord(position=(1, 2), direction="down", characters="CAT")


class TestLayoutFromMapping:
    """Validated layouts built from parsed documents."""

    def test_words_and_settings(self):
        layout = layout_from_mapping({
            "settings": {"corner_by_corner": False},
            "words": [
                {"id": "hello", "word": "hello", "x": 0, "y": 0, "direction": "right"},
                {"word": "LOCAL", "x": 2, "y": 0, "direction": "D"},
            ],
        })
        assert layout.settings.disabled_kinds() == [ConflictKind.CORNER_BY_CORNER]
        words = layout.placed_words()
        assert list(words) == ["hello", 1]
        assert words["hello"].text == "HELLO"
        assert words[1].direction is Direction.DOWN

    def test_board_block_appended_after_words(self):
        layout = layout_from_mapping({
            "words": [{"word": "CAT", "x": 0, "y": 0, "direction": "right"}],
            "board": "DOG @ 0,2 R\nemu: EMU @ 5,5 D",
        })
        assert [e.word for e in layout.words] == ["CAT", "DOG", "EMU"]
        assert list(layout.placed_words()) == [0, 1, "emu"]

    def test_empty_document(self):
        layout = layout_from_mapping(None)
        assert layout.words == []
        assert layout.settings.disabled_kinds() == []

    def test_invalid_board(self):
        with pytest.raises(LayoutLoadError, match="line 2"):
            layout_from_mapping({"board": "CAT @ 0,0 R\nnot a word line"})

    def test_duplicate_ids_across_words_and_board(self):
        with pytest.raises(LayoutLoadError, match="Duplicate word id"):
            layout_from_mapping({
                "words": [{"id": "a", "word": "CAT", "x": 0, "y": 0, "direction": "right"}],
                "board": "a: DOG @ 0,2 R",
            })

    def test_unknown_setting(self):
        with pytest.raises(LayoutLoadError):
            layout_from_mapping({"settings": {"diagonal": False}})

    def test_unknown_top_level_key(self):
        with pytest.raises(LayoutLoadError):
            layout_from_mapping({"wordz": []})

    def test_empty_word(self):
        with pytest.raises(LayoutLoadError):
            layout_from_mapping({"words": [{"word": "", "x": 0, "y": 0, "direction": "right"}]})


class TestLoadLayout:
    """YAML layout files."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text(
            "settings:\n"
            "  overlap: false\n"
            "words:\n"
            "  - {id: at, word: AT, x: 3, y: 3, direction: right}\n"
            "board: |\n"
            "  TABLE @ 5,3 R\n"
        )
        layout = load_layout(path)
        assert layout.settings.overlap is False
        words = layout.placed_words()
        assert list(words) == ["at", 1]
        assert words[1].position == (5, 3)

    def test_load_from_string_path(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("board: CAT @ 0,0 R\n")
        assert len(load_layout(str(path)).words) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(LayoutLoadError, match="not found"):
            load_layout(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("words: [unclosed\n")
        with pytest.raises(LayoutLoadError, match="Could not parse"):
            load_layout(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("- CAT\n- DOG\n")
        with pytest.raises(LayoutLoadError, match="mapping"):
            load_layout(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("")
        assert load_layout(path).words == []
