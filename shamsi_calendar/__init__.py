"""Gregorian ↔ Jalali calendar engine with Frappe integration."""

from .api import (
    GREGORIAN,
    JALALI,
    CalendarDate,
    CalendarError,
    GregorianDate,
    InvalidDate,
    InvalidYear,
    JalaliDate,
    MalformedKey,
)

__version__ = "0.3.0"

__all__ = [
    "CalendarDate",
    "CalendarError",
    "GREGORIAN",
    "GregorianDate",
    "InvalidDate",
    "InvalidYear",
    "JALALI",
    "JalaliDate",
    "MalformedKey",
    "__version__",
]
