# errors.py
# Exception hierarchy for the solver and its boundaries

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by this package."""


class InvalidDateError(PuzzleError, ValueError):
    def __init__(self, month: int, day: int, reason: str):
        self.month = month
        self.day = day
        self.reason = reason
        super().__init__(f"invalid date {month}/{day}: {reason}")


class SerializationError(PuzzleError):
    """Solutions could not be turned into (or written as) their host-visible form."""
