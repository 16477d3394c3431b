"""Crossword playground: word layout conflict analysis."""

__version__ = "0.1.0"
