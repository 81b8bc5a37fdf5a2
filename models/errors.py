"""Errors raised by the routine analysis engine."""

from datetime import date
from typing import Optional


class FormatError(ValueError):
    """A wall-clock, date or payload literal could not be parsed."""

    def __init__(self, literal: str, expected: str = "HH:MM"):
        self.literal = literal
        self.expected = expected
        super().__init__(f"Malformed value {literal!r} (expected {expected})")


class RangeError(ValueError):
    """An interval whose end precedes its start."""

    def __init__(self, message: str, start: Optional[object] = None, end: Optional[object] = None):
        self.start = start
        self.end = end
        super().__init__(message)

    @classmethod
    def for_dates(cls, range_start: date, range_end: date) -> "RangeError":
        return cls(
            f"Date range end {range_end.isoformat()} precedes start {range_start.isoformat()}",
            start=range_start,
            end=range_end,
        )
