"""Six-week month grids for calendar widgets.

A grid always holds 42 cells and starts on Saturday.  Cells before the
first and after the last day of the month belong to the neighbouring
months and are flagged with ``in_month=False``; cells that would fall outside
the supported range are padding with ``date=None``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from . import jalali, locale
from .calendar_date import CalendarDate, Clock
from .views import require_view

__all__ = [
    "GRID_SIZE",
    "GridCell",
    "MonthGrid",
    "month_grid",
]

GRID_SIZE = 42


@dataclass(frozen=True)
class GridCell:
    date: Optional[CalendarDate]
    in_month: bool
    is_today: bool
    is_weekend: bool


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    view: str
    today: CalendarDate
    cells: Tuple[GridCell, ...]

    @property
    def title(self) -> str:
        return f"{locale.month_name(self.month, self.view)} {self.year}"

    @property
    def weekday_headers(self) -> List[str]:
        return [locale.weekday_name(i, self.view, short=True) for i in range(7)]

    @property
    def weeks(self) -> List[Tuple[GridCell, ...]]:
        return [self.cells[i : i + 7] for i in range(0, GRID_SIZE, 7)]

    def _first_day(self) -> CalendarDate:
        return CalendarDate.from_fields(self.year, self.month, 1, self.view)

    def previous(self) -> "MonthGrid":
        prev = self._first_day().add_months(-1, self.view)
        year, month, _ = prev.fields(self.view)
        return month_grid(year, month, self.view, today=self.today)

    def next(self) -> "MonthGrid":
        nxt = self._first_day().add_months(1, self.view)
        year, month, _ = nxt.fields(self.view)
        return month_grid(year, month, self.view, today=self.today)


def month_grid(
    year: int,
    month: int,
    view: str,
    today: Optional[CalendarDate] = None,
    clock: Optional[Clock] = None,
) -> MonthGrid:
    """Build the grid for ``year``/``month`` in ``view``."""

    view = require_view(view)
    if today is None:
        today = CalendarDate.now(clock)

    first = CalendarDate.from_fields(year, month, 1, view)
    start = first.jdn - first.day_of_week
    cells = []
    for offset in range(GRID_SIZE):
        jdn = start + offset
        if not (jalali.EPOCH_JDN <= jdn <= jalali.MAX_JDN):
            cells.append(GridCell(date=None, in_month=False, is_today=False, is_weekend=False))
            continue
        current = CalendarDate.from_jdn(jdn)
        cell_year, cell_month, _ = current.fields(view)
        cells.append(
            GridCell(
                date=current,
                in_month=(cell_year, cell_month) == (year, month),
                is_today=current.is_same_day(today),
                is_weekend=current.is_weekend(view),
            )
        )
    return MonthGrid(year, month, view, today, tuple(cells))
