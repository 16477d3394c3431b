"""Layout loading: compact line format and YAML documents."""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import LayoutLoadError
from .models import Direction, PlacedWord, Position, WordCompatibilitySettings, WordId


# [id:] WORD @ x,y DIRECTION   e.g. "hello: HELLO @ 0,0 R" or "LOCAL @ (2, 0) down"
LINE_PATTERN = re.compile(
    r'^(?:(?P<id>[\w-]+)\s*:\s*)?'
    r'(?P<word>[^\s@]+)\s*@\s*'
    r'\(?\s*(?P<x>-?\d+)\s*,\s*(?P<y>-?\d+)\s*\)?\s+'
    r'(?P<direction>[A-Za-z]+)$'
)


class LayoutEntry(BaseModel):
    """A word as written in a layout file."""
    id: Optional[str] = None
    word: str = Field(..., min_length=1)
    x: int
    y: int
    direction: Direction

    @field_validator("word")
    @classmethod
    def _uppercase(cls, value: str) -> str:
        return value.upper()

    @field_validator("direction", mode="before")
    @classmethod
    def _parse_direction(cls, value: Any) -> Any:
        return Direction.parse(value)

    def to_placed_word(self) -> PlacedWord:
        return PlacedWord(position=Position(self.x, self.y), direction=self.direction, characters=self.word)


class LayoutError(BaseModel):
    """A problem found while parsing a layout."""
    code: str
    message: str
    line: Optional[int] = None


class Layout(BaseModel):
    """A word layout plus the compatibility settings to analyse it with."""
    model_config = ConfigDict(extra='forbid')

    settings: WordCompatibilitySettings = Field(default_factory=WordCompatibilitySettings)
    words: List[LayoutEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_ids(self) -> "Layout":
        seen = set()
        for entry in self.words:
            if entry.id is None:
                continue
            if entry.id in seen:
                raise ValueError(f"Duplicate word id '{entry.id}'")
            seen.add(entry.id)
        return self

    def placed_words(self) -> Dict[WordId, PlacedWord]:
        """Words keyed by their id, or by their position in the list when unnamed."""
        return {
            entry.id if entry.id is not None else index: entry.to_placed_word()
            for index, entry in enumerate(self.words)
        }


def parse_layout(text: str) -> Tuple[List[LayoutEntry], List[LayoutError]]:
    """
    Parse the compact layout format, one word per line.

    Blank lines and lines starting with '#' are skipped. Returns a tuple of
    (entries, errors); parsing continues past bad lines.
    """
    entries: List[LayoutEntry] = []
    errors: List[LayoutError] = []
    seen_ids = set()

    lines = [
        (number, line.strip())
        for number, line in enumerate(text.split('\n'), start=1)
        if line.strip() and not line.strip().startswith('#')
    ]

    if not lines:
        errors.append(LayoutError(
            code="EMPTY_LAYOUT",
            message="Layout is empty"
        ))
        return entries, errors

    for number, line in lines:
        match = LINE_PATTERN.match(line)
        if not match:
            errors.append(LayoutError(
                code="INVALID_LINE",
                message=f"Invalid line format: '{line}'",
                line=number
            ))
            continue

        direction = Direction.parse(match.group("direction"))
        if not isinstance(direction, Direction):
            errors.append(LayoutError(
                code="INVALID_DIRECTION",
                message=f"Unknown direction '{match.group('direction')}' in line '{line}'",
                line=number
            ))
            continue

        word_id = match.group("id")
        if word_id is not None:
            if word_id in seen_ids:
                errors.append(LayoutError(
                    code="DUPLICATE_ID",
                    message=f"Word id '{word_id}' is used more than once",
                    line=number
                ))
                continue
            seen_ids.add(word_id)

        entries.append(LayoutEntry(
            id=word_id,
            word=match.group("word"),
            x=int(match.group("x")),
            y=int(match.group("y")),
            direction=direction
        ))

    return entries, errors


def layout_from_mapping(data: Optional[Dict[str, Any]]) -> Layout:
    """
    Build a Layout from a parsed YAML document.

    Accepts ``settings`` (compatibility flags), ``words`` (list of entries)
    and ``board`` (a block in the compact line format, appended after ``words``).
    """
    data = dict(data or {})
    board = data.pop("board", None)

    if board is not None:
        entries, errors = parse_layout(str(board))
        if errors:
            details = "; ".join(
                f"line {e.line}: {e.message}" if e.line else e.message for e in errors
            )
            raise LayoutLoadError(f"Invalid board: {details}")
        data["words"] = list(data.get("words") or []) + [e.model_dump() for e in entries]

    try:
        return Layout(**data)
    except ValidationError as e:
        raise LayoutLoadError(f"Invalid layout: {e}") from e


def load_layout(layout_path: str | Path) -> Layout:
    """Load a layout from a YAML file."""
    path = Path(layout_path)

    if not path.exists():
        raise LayoutLoadError(f"Layout file not found: {layout_path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LayoutLoadError(f"Could not parse {layout_path}: {e}") from e

    if data is not None and not isinstance(data, dict):
        raise LayoutLoadError(f"Layout file {layout_path} must contain a mapping")

    return layout_from_mapping(data)
