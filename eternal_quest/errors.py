"""Error taxonomy for the goal engine.

Every error the engine raises derives from EngineError so callers can catch
one type and render a message. None of them are fatal.
"""
from __future__ import annotations
from typing import Optional


class EngineError(Exception):
    """Base class for goal engine errors."""
    pass


class ValidationError(EngineError, ValueError):
    """Invalid arguments when creating a goal."""
    pass


class OutOfRangeError(EngineError, IndexError):
    """Goal index outside the manager's collection."""
    pass


class NotFoundError(EngineError):
    """Load source does not exist."""
    pass


class SaveError(EngineError):
    """Save destination not writable or load source not readable."""
    pass


class ParseError(EngineError, ValueError):
    """Malformed persisted record."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
