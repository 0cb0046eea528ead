"""Gregorian ↔ Jalali conversion helpers used by templates and whitelisted methods."""
from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Tuple, Union

from . import jalali, leap
from .calendar_date import CalendarDate
from .jalali import JalaliDate
from .locale import to_latin_digits
from .views import JALALI

__all__ = [
    "JalaliDate",
    "coerce_gregorian",
    "coerce_jalali",
    "format_jalali",
    "gregorian_to_jalali",
    "jalali_to_gregorian",
    "is_jalali_leap",
]

GregorianLike = Union[str, date, datetime, CalendarDate, Iterable[int]]
JalaliLike = Union[str, JalaliDate, CalendarDate, Iterable[int]]


def _split_date_string(value: str, calendar: str) -> Tuple[int, int, int]:
    tokens = to_latin_digits(value.strip()).replace("/", "-").split("-")
    if len(tokens) != 3:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}")
    try:
        year, month, day = (int(part) for part in tokens)
    except ValueError as exc:
        raise ValueError(f"Unsupported {calendar} date string: {value!r}") from exc
    return year, month, day


def _unpack(value: Iterable[int], expected: str) -> Tuple[int, int, int]:
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Expected {expected}, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_gregorian(value: GregorianLike) -> Tuple[int, int, int]:
    if isinstance(value, CalendarDate):
        return value.gregorian.as_tuple()
    if isinstance(value, (date, datetime)):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_date_string(value, "Gregorian")
    return _unpack(value, "a date")


def coerce_jalali(value: JalaliLike) -> Tuple[int, int, int]:
    if isinstance(value, CalendarDate):
        return value.jalali.as_tuple()
    if isinstance(value, JalaliDate):
        return value.as_tuple()
    if isinstance(value, str):
        return _split_date_string(value, "Jalali")
    return _unpack(value, "a JalaliDate")


def gregorian_to_jalali(value: GregorianLike) -> JalaliDate:
    return CalendarDate.from_gregorian(*coerce_gregorian(value)).jalali


def jalali_to_gregorian(value: JalaliLike) -> date:
    return CalendarDate.from_jdn(jalali.to_jdn(*coerce_jalali(value))).to_date()


def is_jalali_leap(year: int) -> bool:
    return leap.is_leap(year)


def format_jalali(value: GregorianLike, pattern: str = "YYYY/MM/DD") -> str:
    """Template filter: render a Gregorian value as a Jalali string.

    Empty values render as an empty string.
    """

    if value is None or value == "":
        return ""
    return CalendarDate.from_gregorian(*coerce_gregorian(value)).format(pattern, JALALI)
