"""Human-readable conflict summaries, most severe first."""

from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from .geometry import crossing_cell
from .models import ConflictKind, ConflictReport, PlacedWord, WordId


# Severity levels
CRITICAL = 0  # Shared cells with ambiguous content - the layout cannot be read
HIGH = 1  # Parallel words that merge into one line or run alongside
MEDIUM = 2  # A word's end pressed against another word
LOW = 3  # Diagonal corner contact

SEVERITY: Dict[ConflictKind, int] = {
    ConflictKind.INVALID_INTERSECTION: CRITICAL,
    ConflictKind.OVERLAP: CRITICAL,
    ConflictKind.HEAD_BY_HEAD: HIGH,
    ConflictKind.SIDE_BY_SIDE: HIGH,
    ConflictKind.SIDE_BY_HEAD: MEDIUM,
    ConflictKind.CORNER_BY_CORNER: LOW,
}

_DESCRIPTIONS: Dict[ConflictKind, str] = {
    ConflictKind.OVERLAP: "run over the same cells",
    ConflictKind.HEAD_BY_HEAD: "touch end to end",
    ConflictKind.SIDE_BY_SIDE: "run side by side",
    ConflictKind.SIDE_BY_HEAD: "touch end to side",
    ConflictKind.CORNER_BY_CORNER: "touch corner to corner",
}


class ConflictMessage(BaseModel):
    """A single described conflict between two words."""
    code: str
    message: str
    words: List[WordId] = Field(default_factory=list)
    level: int = LOW


def _label(word: PlacedWord) -> str:
    return f"'{word.text}' at ({word.position.x}, {word.position.y}) {word.direction.value}"


def describe_conflict(
    kind: ConflictKind,
    word_id: WordId,
    other_id: WordId,
    words: Mapping[WordId, PlacedWord],
) -> ConflictMessage:
    """Describe one conflict between two words."""
    word, other = words[word_id], words[other_id]

    if kind is ConflictKind.INVALID_INTERSECTION:
        cell = crossing_cell(word, other)
        message = (
            f"{_label(word)} and {_label(other)} cross at ({cell.x}, {cell.y}) "
            f"on different letters: '{word.character_at(cell)}' vs '{other.character_at(cell)}'"
        )
    else:
        message = f"{_label(word)} and {_label(other)} {_DESCRIPTIONS[kind]}"

    return ConflictMessage(
        code=kind.name,
        message=message,
        words=[word_id, other_id],
        level=SEVERITY[kind],
    )


def describe_conflicts(
    report: ConflictReport,
    words: Mapping[WordId, PlacedWord],
    max_messages: Optional[int] = 10,
) -> List[ConflictMessage]:
    """
    Describe each conflicting pair once, ordered by severity.

    Args:
        report: Analysis result
        words: The analysed words, keyed as in the report
        max_messages: Maximum number of messages to return (None for all)

    Returns:
        Messages, with a trailing ADDITIONAL_CONFLICTS entry when truncated
    """
    result: List[ConflictMessage] = []
    seen = set()

    for word_id, conflicts in report.word_conflicts.items():
        for kind, other_id in conflicts:
            pair = frozenset((word_id, other_id))
            if pair in seen:
                continue
            seen.add(pair)
            result.append(describe_conflict(kind, word_id, other_id, words))

    # Stable sort keeps pair enumeration order within a level
    result.sort(key=lambda m: m.level)

    if max_messages is None or len(result) <= max_messages:
        return result

    # Room for at least the summary entry
    max_messages = max(max_messages, 1)

    kept = result[:max_messages - 1]
    num_hidden = len(result) - len(kept)

    kept.append(ConflictMessage(
        code="ADDITIONAL_CONFLICTS",
        message=f"... and {num_hidden} more conflict{'s' if num_hidden > 1 else ''}. Fix the above first.",
        level=result[max_messages - 1].level
    ))
    return kept
