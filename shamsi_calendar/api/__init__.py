"""Server-side helpers exposed by the Shamsi calendar package."""

from . import (
    calendar_date,
    converter,
    date_key,
    errors,
    gregorian,
    jalali,
    leap,
    locale,
    month_grid,
    preferences,
    views,
)
from .calendar_date import CalendarDate, Clock, system_clock
from .errors import CalendarError, InvalidDate, InvalidYear, MalformedKey
from .gregorian import GregorianDate
from .jalali import JalaliDate
from .views import GREGORIAN, JALALI

__all__ = [
    "CalendarDate",
    "CalendarError",
    "Clock",
    "GREGORIAN",
    "GregorianDate",
    "InvalidDate",
    "InvalidYear",
    "JALALI",
    "JalaliDate",
    "MalformedKey",
    "calendar_date",
    "converter",
    "date_key",
    "errors",
    "gregorian",
    "jalali",
    "leap",
    "locale",
    "month_grid",
    "preferences",
    "system_clock",
    "views",
]
