"""Exception hierarchy for layout conflict analysis."""


class ConflictAnalysisError(Exception):
    """Base exception for analysis failures."""


class InvalidWordError(ConflictAnalysisError):
    """Raised when the word set handed to the analyzer is malformed."""


class InternalConsistencyError(ConflictAnalysisError):
    """Raised when a conflict's geometry contradicts its classified kind."""


class LayoutLoadError(ConflictAnalysisError):
    """Raised when a layout file cannot be read or validated."""
