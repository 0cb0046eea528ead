"""Exceptions raised by the calendar engine."""
from __future__ import annotations

__all__ = [
    "CalendarError",
    "InvalidDate",
    "InvalidYear",
    "MalformedKey",
]


class CalendarError(ValueError):
    """Base class for rejected calendar input."""


class InvalidDate(CalendarError):
    """A month or day is out of range for its calendar, month or leap state."""


class InvalidYear(CalendarError):
    """A year (or Julian Day Number) lies outside the supported range."""


class MalformedKey(CalendarError):
    """A storage key is not a valid ``YYYY-MM-DD`` Gregorian date."""
