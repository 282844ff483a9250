"""
Exceptions raised by the review engine.
"""


class ReviewEngineError(Exception):
    """Base exception for the review engine."""
    pass


class InvalidArgument(ReviewEngineError, ValueError):
    """Raised when a caller passes input the engine cannot schedule against."""
    pass
