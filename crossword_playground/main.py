"""
Command-line entry point for analysing crossword layouts.

Usage:
    python -m crossword_playground.main layout.yaml
    python -m crossword_playground.main layout.yaml --output results/report.json --grid --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .analysis import ConflictAnalysisError, ConflictReport, analyze, describe_conflicts, load_layout
from .utils.grid_visualizer import grid_bounds, render_conflict_mask, render_grid
from .utils.logger import configure_logging, get_logger


LOGGER = get_logger(__name__)

EXIT_OK = 0
EXIT_CONFLICTS = 1
EXIT_ERROR = 2


def save_report(report: ConflictReport, path: str | Path) -> None:
    """Write the report as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(report.to_serializable(), f, indent=2, default=str)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Find conflicts between words in a crossword layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example layout.yaml:
  settings:
    corner_by_corner: false
  words:
    - {id: hello, word: HELLO, x: 0, y: 0, direction: right}
    - {id: local, word: LOCAL, x: 2, y: 0, direction: down}
  board: |
    TABLE @ 0,2 R
        """
    )
    parser.add_argument(
        "layout",
        help="Path to YAML layout file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the conflict report JSON"
    )
    parser.add_argument(
        "--grid",
        action="store_true",
        help="Print the rendered grid and its conflict mask"
    )
    parser.add_argument(
        "--max-messages",
        type=int,
        default=10,
        help="Maximum number of conflicts to list (default: 10)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log analysis details"
    )

    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        layout = load_layout(args.layout)
    except ConflictAnalysisError as e:
        print(f"Error loading layout: {e}", file=sys.stderr)
        return EXIT_ERROR

    words = layout.placed_words()
    disabled = layout.settings.disabled_kinds()
    LOGGER.info("Loaded %d words from %s", len(words), args.layout)
    if disabled:
        LOGGER.info("Disabled conflict kinds: %s", ", ".join(k.value for k in disabled))

    try:
        report = analyze(words, layout.settings)
    except ConflictAnalysisError as e:
        LOGGER.error("Analysis failed: %s", e)
        print(f"Error during analysis: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.output:
        save_report(report, args.output)
        print(f"Report saved to: {args.output}")

    if args.grid and report.cells:
        top_left, bottom_right = grid_bounds(report)
        print(f"Grid from ({top_left.x}, {top_left.y}) to ({bottom_right.x}, {bottom_right.y}):")
        print(render_grid(report))
        print()
        print("Conflicts:")
        print(render_conflict_mask(report))
        print()

    messages = describe_conflicts(report, words, max_messages=args.max_messages)

    print("=== Layout Summary ===")
    print(f"Words: {len(words)}")
    print(f"Conflicted words: {len(report.conflicted_words())}")
    if not messages:
        print("No conflicts found")
        return EXIT_OK

    for message in messages:
        print(f"  - [{message.code}] {message.message}")
    return EXIT_CONFLICTS


if __name__ == "__main__":
    sys.exit(main())
