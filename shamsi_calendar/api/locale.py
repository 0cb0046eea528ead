"""Month and weekday names plus Persian digit helpers.

Weekday lists start on Saturday so they can be indexed directly with
:attr:`CalendarDate.day_of_week`.
"""
from __future__ import annotations

from .views import GREGORIAN, require_view

__all__ = [
    "GREGORIAN_MONTH_NAMES",
    "GREGORIAN_WEEKDAY_NAMES",
    "GREGORIAN_WEEKDAY_NAMES_SHORT",
    "JALALI_MONTH_NAMES",
    "JALALI_WEEKDAY_NAMES",
    "JALALI_WEEKDAY_NAMES_SHORT",
    "month_name",
    "to_latin_digits",
    "to_persian_digits",
    "weekday_name",
]

JALALI_MONTH_NAMES = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)

JALALI_WEEKDAY_NAMES = (
    "شنبه",
    "یکشنبه",
    "دوشنبه",
    "سه‌شنبه",
    "چهارشنبه",
    "پنجشنبه",
    "جمعه",
)
JALALI_WEEKDAY_NAMES_SHORT = ("ش", "ی", "د", "س", "چ", "پ", "ج")

GREGORIAN_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

GREGORIAN_WEEKDAY_NAMES = (
    "Saturday",
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
)
GREGORIAN_WEEKDAY_NAMES_SHORT = ("Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri")

_PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
_ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
_TO_PERSIAN = str.maketrans("0123456789", _PERSIAN_DIGITS)
_TO_LATIN = str.maketrans(_PERSIAN_DIGITS + _ARABIC_INDIC_DIGITS, "0123456789" * 2)


def month_name(month: int, view: str) -> str:
    if not (1 <= month <= 12):
        raise ValueError(f"month must be in 1..12, got {month}")
    names = GREGORIAN_MONTH_NAMES if require_view(view) == GREGORIAN else JALALI_MONTH_NAMES
    return names[month - 1]


def weekday_name(day_of_week: int, view: str, short: bool = False) -> str:
    """Return the name for ``day_of_week`` (0 = Saturday)."""

    if not (0 <= day_of_week <= 6):
        raise ValueError(f"day of week must be in 0..6, got {day_of_week}")
    if require_view(view) == GREGORIAN:
        names = GREGORIAN_WEEKDAY_NAMES_SHORT if short else GREGORIAN_WEEKDAY_NAMES
    else:
        names = JALALI_WEEKDAY_NAMES_SHORT if short else JALALI_WEEKDAY_NAMES
    return names[day_of_week]


def to_persian_digits(text: str) -> str:
    return text.translate(_TO_PERSIAN)


def to_latin_digits(text: str) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits."""

    return text.translate(_TO_LATIN)
