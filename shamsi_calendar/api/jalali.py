"""Jalali (Solar Hijri) calendar ↔ Julian Day Number arithmetic."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Tuple

from . import gregorian, leap
from .errors import InvalidDate, InvalidYear

__all__ = [
    "EPOCH_JDN",
    "MAX_JDN",
    "JalaliDate",
    "days_in_month",
    "from_jdn",
    "is_leap",
    "to_jdn",
    "validate",
]

is_leap = leap.is_leap


@dataclass(frozen=True)
class JalaliDate:
    """Immutable representation of a Jalali (Persian) calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        validate(self.year, self.month, self.day)

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def to_gregorian(self) -> date:
        return gregorian.from_jdn(to_jdn(self.year, self.month, self.day)).to_date()


def days_in_month(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise InvalidDate(f"month must be in 1..12 for Jalali calendar, got {month}")
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if leap.is_leap(year) else 29


def validate(year: int, month: int, day: int) -> None:
    """Raise if ``year-month-day`` is not a real Jalali date."""

    max_day = days_in_month(year, month)
    if not (1 <= day <= max_day):
        raise InvalidDate(f"day must be in 1..{max_day} for {year}-{month:02d}, got {day}")


def _month_offset(month: int) -> int:
    if month <= 6:
        return (month - 1) * 31
    return (month - 7) * 30 + 186


def _first_day(info: leap.JalaliYearInfo) -> int:
    return gregorian.to_jdn(info.gregorian_year, 3, info.march_day)


def to_jdn(year: int, month: int, day: int) -> int:
    validate(year, month, day)
    return _first_day(leap.year_info(year)) + _month_offset(month) + day - 1


EPOCH_JDN = to_jdn(leap.MIN_YEAR, 1, 1)
MAX_JDN = to_jdn(leap.MAX_YEAR, 12, days_in_month(leap.MAX_YEAR, 12))


def from_jdn(jdn: int) -> JalaliDate:
    if not (EPOCH_JDN <= jdn <= MAX_JDN):
        raise InvalidYear(f"Julian Day Number {jdn} is outside the Jalali range")

    # Clamped so Esfand of the last supported year never asks for year + 1.
    year = min(gregorian.from_jdn(jdn).year - 621, leap.MAX_YEAR)
    offset = jdn - _first_day(leap.year_info(year))

    if offset >= 0:
        if offset <= 185:
            return JalaliDate(year, 1 + offset // 31, offset % 31 + 1)
        offset -= 186
    else:
        # Before Farvardin 1: the tail of Esfand of the previous year.
        year -= 1
        offset += 180 if leap.is_leap(year) else 179
    return JalaliDate(year, 7 + offset // 30, offset % 30 + 1)
