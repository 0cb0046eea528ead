"""Gregorian ``YYYY-MM-DD`` keys used to index date-bound records.

A key always carries the Gregorian projection of a date, so records stored
while one calendar view is active are found again under the other.
"""
from __future__ import annotations

import logging
import re

from .calendar_date import CalendarDate
from .errors import CalendarError, MalformedKey

__all__ = [
    "decode",
    "encode",
    "is_valid",
]

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(r"([0-9]+)-([0-9]+)-([0-9]+)")


def encode(value: CalendarDate) -> str:
    g = value.gregorian
    return f"{g.year:04d}-{g.month:02d}-{g.day:02d}"


def decode(key: str) -> CalendarDate:
    match = _KEY_RE.fullmatch(key) if isinstance(key, str) else None
    if match is None:
        logger.debug("Rejected malformed date key %r", key)
        raise MalformedKey(f"Date key must look like YYYY-MM-DD, got {key!r}")
    year, month, day = (int(part) for part in match.groups())
    try:
        return CalendarDate.from_gregorian(year, month, day)
    except CalendarError as exc:
        logger.debug("Rejected date key %r: %s", key, exc)
        raise MalformedKey(f"Date key {key!r} is not a valid date: {exc}") from exc


def is_valid(key: str) -> bool:
    try:
        decode(key)
    except MalformedKey:
        return False
    return True
