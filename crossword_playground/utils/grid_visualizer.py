"""Plain-text rendering of an analysed layout."""

from typing import Callable, Dict, Tuple

from ..analysis.models import CellOccupancy, ConflictReport, Position

EMPTY = '.'
DISAGREEMENT = '?'
CLEAN = '#'
CONFLICTED = '!'


def _render(cells: Dict[Position, CellOccupancy], symbol: Callable[[CellOccupancy], str]) -> str:
    if not cells:
        return ""

    min_x = min(pos.x for pos in cells)
    max_x = max(pos.x for pos in cells)
    min_y = min(pos.y for pos in cells)
    max_y = max(pos.y for pos in cells)

    lines = [
        ''.join(
            symbol(cells[(x, y)]) if (x, y) in cells else EMPTY
            for x in range(min_x, max_x + 1)
        )
        for y in range(min_y, max_y + 1)
    ]

    return '\n'.join(lines)


def render_grid(report: ConflictReport) -> str:
    """Render the cell characters; cells whose words disagree show '?'."""
    return _render(
        report.cells,
        lambda cell: DISAGREEMENT if cell.character is None else str(cell.character),
    )


def render_conflict_mask(report: ConflictReport) -> str:
    """Render occupied cells as '#', or '!' where an occupying word has a conflict."""
    return _render(report.cells, lambda cell: CONFLICTED if cell.conflicted else CLEAN)


def grid_bounds(report: ConflictReport) -> Tuple[Position, Position]:
    """Top-left and bottom-right occupied corners of the layout."""
    if not report.cells:
        raise ValueError("Empty layout has no bounds")
    xs = [pos.x for pos in report.cells]
    ys = [pos.y for pos in report.cells]
    return Position(min(xs), min(ys)), Position(max(xs), max(ys))
