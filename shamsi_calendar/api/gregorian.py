"""Proleptic Gregorian calendar ↔ Julian Day Number arithmetic."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from .errors import InvalidDate, InvalidYear

__all__ = [
    "EPOCH_JDN",
    "MIN_YEAR",
    "GregorianDate",
    "days_in_month",
    "from_jdn",
    "is_leap",
    "to_jdn",
    "validate",
]

MIN_YEAR = 1
# 0001-01-01; there is no year zero below it.
EPOCH_JDN = 1721426

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class GregorianDate:
    """Immutable representation of a proleptic Gregorian calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        validate(self.year, self.month, self.day)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


def is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise InvalidDate(f"month must be in 1..12 for Gregorian calendar, got {month}")
    if month == 2 and is_leap(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def validate(year: int, month: int, day: int) -> None:
    """Raise if ``year-month-day`` is not a real Gregorian date."""

    if year < MIN_YEAR:
        raise InvalidYear(f"Gregorian year must be >= {MIN_YEAR}, got {year}")
    max_day = days_in_month(year, month)
    if not (1 <= day <= max_day):
        raise InvalidDate(f"day must be in 1..{max_day} for {year}-{month:02d}, got {day}")


def to_jdn(year: int, month: int, day: int) -> int:
    validate(year, month, day)
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def from_jdn(jdn: int) -> GregorianDate:
    if jdn < EPOCH_JDN:
        raise InvalidYear(f"Julian Day Number {jdn} is before 0001-01-01")
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - 146097 * b // 4
    d = (4 * c + 3) // 1461
    e = c - 1461 * d // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return GregorianDate(year, month, day)
