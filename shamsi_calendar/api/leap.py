"""Jalali leap years from the break-point table of the 2820-year grand cycle.

The years in :data:`BREAKS` are the points at which the 33-year sub-cycle
pattern restarts.  Between two breaks leap years fall every four years
(with a five-year gap closing each 33-year run); the last few years of an
interval are folded back onto the start of a sub-cycle.  The same scan also
yields the running count of leap days, which fixes the day of March on which
each Jalali year begins.
"""
from __future__ import annotations

from typing import NamedTuple, Tuple

from .errors import InvalidYear

__all__ = [
    "BREAKS",
    "MAX_YEAR",
    "MIN_YEAR",
    "JalaliYearInfo",
    "is_leap",
    "year_info",
]

BREAKS = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

MIN_YEAR = 1
MAX_YEAR = BREAKS[-1] - 1


class JalaliYearInfo(NamedTuple):
    is_leap: bool
    gregorian_year: int
    # Day of March (Gregorian) on which Farvardin 1 falls.
    march_day: int


def _check_year(jalali_year: int) -> None:
    if not (MIN_YEAR <= jalali_year <= MAX_YEAR):
        raise InvalidYear(
            f"Jalali year must be in {MIN_YEAR}..{MAX_YEAR}, got {jalali_year}"
        )


def _scan(jalali_year: int) -> Tuple[int, int, int]:
    """Return ``(interval_start, interval_length, leap_count)`` for a year.

    ``leap_count`` is the number of leap days accumulated by the completed
    intervals, offset so that year 1 lines up with the Gregorian epoch.
    """

    leap_count = -14
    start = BREAKS[0]
    jump = 0
    for brk in BREAKS[1:]:
        jump = brk - start
        if jalali_year < brk:
            break
        leap_count += jump // 33 * 8 + jump % 33 // 4
        start = brk
    return start, jump, leap_count


def _leap_in_interval(n: int, jump: int) -> bool:
    if jump - n < 6:
        n = n - jump + 33 * (jump // 33)
    # Floor modulo, not the truncating "-1 counts as 4" form: in the folded
    # tail of a 29-year interval n goes negative, and only floor modulo keeps
    # the leap flags in step with year_info (years 33/34 and 1205/1206 swap
    # otherwise).
    return ((n + 1) % 33 - 1) % 4 == 0


def is_leap(jalali_year: int) -> bool:
    """Return ``True`` if the Jalali year has 366 days."""

    _check_year(jalali_year)
    start, jump, _ = _scan(jalali_year)
    return _leap_in_interval(jalali_year - start, jump)


def year_info(jalali_year: int) -> JalaliYearInfo:
    """Return the leap flag and the Gregorian start of a Jalali year."""

    _check_year(jalali_year)
    start, jump, leap_j = _scan(jalali_year)
    n = jalali_year - start
    leap_j += n // 33 * 8 + (n % 33 + 3) // 4
    if jump % 33 == 4 and jump - n == 4:
        leap_j += 1

    gregorian_year = jalali_year + 621
    leap_g = gregorian_year // 4 - (gregorian_year // 100 + 1) * 3 // 4 - 150
    return JalaliYearInfo(
        is_leap=_leap_in_interval(n, jump),
        gregorian_year=gregorian_year,
        march_day=20 + leap_j - leap_g,
    )
