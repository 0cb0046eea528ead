"""Names of the two calendar views understood by the engine."""
from __future__ import annotations

from typing import Literal, Optional

__all__ = [
    "CalendarView",
    "DEFAULT_VIEW",
    "GREGORIAN",
    "JALALI",
    "VALID_VIEWS",
    "normalize_view",
    "require_view",
]

CalendarView = Literal["gregorian", "jalali"]

GREGORIAN: CalendarView = "gregorian"
JALALI: CalendarView = "jalali"
VALID_VIEWS = frozenset({GREGORIAN, JALALI})
DEFAULT_VIEW: CalendarView = GREGORIAN

_ALIASES = {
    "shamsi": JALALI,
    "persian": JALALI,
    "solar": JALALI,
    "miladi": GREGORIAN,
}


def normalize_view(value: object) -> Optional[str]:
    """Return the canonical view name for ``value`` or ``None``."""

    if not isinstance(value, str):
        return None
    normalized = value.strip().lower()
    normalized = _ALIASES.get(normalized, normalized)
    if normalized in VALID_VIEWS:
        return normalized
    return None


def require_view(value: object) -> str:
    normalized = normalize_view(value)
    if not normalized:
        raise ValueError(
            "calendar view must be one of: {}".format(", ".join(sorted(VALID_VIEWS)))
        )
    return normalized
