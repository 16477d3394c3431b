"""Layout conflict analysis for crossword playgrounds."""

from .analyze import analyze, identify_words
from .models import (
    Direction,
    Position,
    PlacedWord,
    WordCompatibilitySettings,
    ConflictKind,
    WordConflict,
    PerimeterSpan,
    ConflictSpan,
    CellOccupant,
    CellOccupancy,
    EdgeOccupancy,
    ConflictReport,
)
from .errors import ConflictAnalysisError, InvalidWordError, InternalConsistencyError, LayoutLoadError
from .compatibility import word_compatibility_issue, classify_pair
from .conflicts import build_conflict_index
from .occupancy import build_cell_map, build_edge_map
from .spans import resolve_span, resolve_spans
from .layout import Layout, LayoutEntry, LayoutError, parse_layout, load_layout, layout_from_mapping
from .summary import ConflictMessage, describe_conflicts

__all__ = [
    # Main analysis
    "analyze",
    "identify_words",
    # Models
    "Direction",
    "Position",
    "PlacedWord",
    "WordCompatibilitySettings",
    "ConflictKind",
    "WordConflict",
    "PerimeterSpan",
    "ConflictSpan",
    "CellOccupant",
    "CellOccupancy",
    "EdgeOccupancy",
    "ConflictReport",
    # Errors
    "ConflictAnalysisError",
    "InvalidWordError",
    "InternalConsistencyError",
    "LayoutLoadError",
    # Pipeline stages
    "word_compatibility_issue",
    "classify_pair",
    "build_conflict_index",
    "build_cell_map",
    "build_edge_map",
    "resolve_span",
    "resolve_spans",
    # Layout files
    "Layout",
    "LayoutEntry",
    "LayoutError",
    "parse_layout",
    "load_layout",
    "layout_from_mapping",
    # Summaries
    "ConflictMessage",
    "describe_conflicts",
]
