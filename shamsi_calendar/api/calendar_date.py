"""Calendar-neutral date value built on the Julian Day Number."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from functools import cached_property
from typing import Callable, Optional, Tuple, Union

from . import gregorian as gregorian_calendar
from . import jalali as jalali_calendar
from . import locale
from .errors import InvalidYear
from .views import GREGORIAN, JALALI, require_view

__all__ = [
    "CalendarDate",
    "Clock",
    "system_clock",
]

Clock = Callable[[], datetime]

_TOKEN_RE = re.compile(r"\[([^\]]*)\]|YYYY|YY|MMMM|MM|M|DD|D|dddd|ddd|HH|mm|ss")


def system_clock() -> datetime:
    """Return the current local civil time."""

    return datetime.now()


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A single day, viewable in either the Gregorian or the Jalali calendar.

    The Julian Day Number is the only stored state; the per-calendar fields
    are derived on first access.  Every operation that "changes" the date
    returns a new instance.
    """

    jdn: int

    def __post_init__(self) -> None:
        if not (jalali_calendar.EPOCH_JDN <= self.jdn <= jalali_calendar.MAX_JDN):
            raise InvalidYear(
                f"Julian Day Number {self.jdn} is outside the supported range "
                f"{jalali_calendar.EPOCH_JDN}..{jalali_calendar.MAX_JDN}"
            )

    # Construction -----------------------------------------------------

    @classmethod
    def from_jdn(cls, jdn: int) -> "CalendarDate":
        return cls(jdn)

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(gregorian_calendar.to_jdn(year, month, day))

    @classmethod
    def from_jalali(cls, year: int, month: int, day: int) -> "CalendarDate":
        return cls(jalali_calendar.to_jdn(year, month, day))

    @classmethod
    def from_fields(cls, year: int, month: int, day: int, view: str) -> "CalendarDate":
        if require_view(view) == GREGORIAN:
            return cls.from_gregorian(year, month, day)
        return cls.from_jalali(year, month, day)

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> "CalendarDate":
        return cls.from_gregorian(value.year, value.month, value.day)

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> "CalendarDate":
        """Return today's date according to ``clock`` (local time by default)."""

        return cls.from_date((clock or system_clock)())

    # Projections ------------------------------------------------------

    @cached_property
    def gregorian(self) -> gregorian_calendar.GregorianDate:
        return gregorian_calendar.from_jdn(self.jdn)

    @cached_property
    def jalali(self) -> jalali_calendar.JalaliDate:
        return jalali_calendar.from_jdn(self.jdn)

    def fields(self, view: str) -> Tuple[int, int, int]:
        if require_view(view) == GREGORIAN:
            return self.gregorian.as_tuple()
        return self.jalali.as_tuple()

    def to_date(self) -> date:
        return self.gregorian.to_date()

    @property
    def isoweekday(self) -> int:
        """ISO weekday, Monday = 1 … Sunday = 7."""
        return self.jdn % 7 + 1

    @property
    def day_of_week(self) -> int:
        """Day of the Persian week, Saturday = 0 … Friday = 6."""
        return (self.isoweekday + 1) % 7

    def days_in_month(self, view: str) -> int:
        year, month, _ = self.fields(view)
        if require_view(view) == GREGORIAN:
            return gregorian_calendar.days_in_month(year, month)
        return jalali_calendar.days_in_month(year, month)

    def is_leap_year(self, view: str) -> bool:
        year = self.fields(view)[0]
        if require_view(view) == GREGORIAN:
            return gregorian_calendar.is_leap(year)
        return jalali_calendar.is_leap(year)

    # Arithmetic -------------------------------------------------------

    def add_days(self, days: int) -> "CalendarDate":
        return CalendarDate(self.jdn + days)

    def add_months(self, months: int, view: str) -> "CalendarDate":
        """Shift by whole months in ``view``, clamping the day to the new month."""

        year, month, day = self.fields(view)
        year, month = divmod(year * 12 + month - 1 + months, 12)
        month += 1
        if require_view(view) == GREGORIAN:
            day = min(day, gregorian_calendar.days_in_month(year, month))
        else:
            day = min(day, jalali_calendar.days_in_month(year, month))
        return CalendarDate.from_fields(year, month, day, view)

    def add_years(self, years: int, view: str) -> "CalendarDate":
        return self.add_months(12 * years, view)

    # Comparison -------------------------------------------------------

    def compare(self, other: "CalendarDate") -> int:
        """Return -1, 0 or 1 as ``self`` is before, on or after ``other``."""

        return (self.jdn > other.jdn) - (self.jdn < other.jdn)

    def is_same_day(self, other: "CalendarDate") -> bool:
        return self.jdn == other.jdn

    def is_weekend(self, view: str) -> bool:
        """Friday in the Jalali view; Friday and Saturday in the Gregorian view."""

        if require_view(view) == JALALI:
            return self.day_of_week == 6
        return self.day_of_week in (0, 6)

    # Formatting -------------------------------------------------------

    def format(
        self,
        pattern: str = "YYYY-MM-DD",
        view: str = JALALI,
        at: Optional[Union[time, datetime]] = None,
        persian_digits: bool = False,
    ) -> str:
        """Render ``pattern`` with the date's fields in ``view``.

        Supported tokens are ``YYYY YY MMMM MM M DD D dddd ddd HH mm ss``.
        Text in square brackets is copied verbatim, as is anything that is
        not a token.  ``HH``/``mm``/``ss`` are taken from ``at`` and default
        to midnight.
        """

        view = require_view(view)
        year, month, day = self.fields(view)
        clock = at if at is not None else time()
        values = {
            "YYYY": str(year),
            "YY": f"{year % 100:02d}",
            "MMMM": locale.month_name(month, view),
            "MM": f"{month:02d}",
            "M": str(month),
            "DD": f"{day:02d}",
            "D": str(day),
            "dddd": locale.weekday_name(self.day_of_week, view),
            "ddd": locale.weekday_name(self.day_of_week, view, short=True),
            "HH": f"{clock.hour:02d}",
            "mm": f"{clock.minute:02d}",
            "ss": f"{clock.second:02d}",
        }

        def _replace(match: "re.Match[str]") -> str:
            literal = match.group(1)
            if literal is not None:
                return literal
            return values[match.group(0)]

        rendered = _TOKEN_RE.sub(_replace, pattern)
        if persian_digits:
            rendered = locale.to_persian_digits(rendered)
        return rendered

    def isoformat(self, view: str = GREGORIAN) -> str:
        if require_view(view) == GREGORIAN:
            return self.gregorian.isoformat()
        return self.jalali.isoformat()

    def __str__(self) -> str:
        return self.gregorian.isoformat()
