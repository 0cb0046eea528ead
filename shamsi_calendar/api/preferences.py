"""Which calendar view a user sees, and what "today" looks like in it.

The view is stored per user and system-wide (Frappe defaults inside a
bench, an in-process dict elsewhere).  The engine never consults it: callers
resolve it here and pass the view to formatting and arithmetic explicitly.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

from . import date_key
from .calendar_date import CalendarDate, Clock
from .views import DEFAULT_VIEW, GREGORIAN, JALALI, normalize_view, require_view

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - handled via fallback store
    frappe = None  # type: ignore

__all__ = [
    "SCOPES",
    "ViewSelection",
    "get_preference_context",
    "get_view_preference",
    "resolve_view",
    "save_view",
    "set_view_preference",
]

logger = logging.getLogger(__name__)

Scope = Literal["user", "system"]
SCOPES: Tuple[Scope, ...] = ("user", "system")

_PREFERENCE_KEY = "shamsi_calendar_view"

# Long-form label for today, per view.
_TODAY_PATTERNS = {
    JALALI: "dddd D MMMM YYYY",
    GREGORIAN: "dddd, D MMMM YYYY",
}

_FALLBACK_STORE: Dict[Tuple[str, Optional[str]], str] = {}


@dataclass(frozen=True)
class ViewSelection:
    value: str
    source: Literal["default", "system", "user"]


def _owner(scope: str, user: Optional[str]) -> Optional[str]:
    """Return the defaults owner for ``scope``; ``None`` means system-wide."""

    if scope == "system":
        return None
    if not user and frappe:
        user = getattr(getattr(frappe, "session", None), "user", None)  # type: ignore[attr-defined]
    if not user or user == "Guest":
        return ""
    return user


def _read(scope: str, user: Optional[str]) -> Optional[str]:
    owner = _owner(scope, user)
    if owner == "":
        return None
    if frappe:
        kwargs = {"user": owner} if owner else {}
        return normalize_view(frappe.db.get_default(_PREFERENCE_KEY, **kwargs))  # type: ignore[attr-defined]
    return _FALLBACK_STORE.get((scope, owner))


def _write(scope: str, view: str, user: Optional[str]) -> None:
    owner = _owner(scope, user)
    if owner == "":
        raise ValueError("Cannot store a calendar view for an anonymous user")
    if frappe:
        kwargs = {"user": owner} if owner else {}
        frappe.db.set_default(_PREFERENCE_KEY, view, **kwargs)  # type: ignore[attr-defined]
        frappe.clear_cache(**kwargs)  # type: ignore[attr-defined]
        return
    _FALLBACK_STORE[(scope, owner)] = view


def resolve_view(user: Optional[str] = None) -> ViewSelection:
    """User override first, then the system setting, then the default view."""

    for scope in SCOPES:
        stored = _read(scope, user)
        if stored:
            return ViewSelection(stored, scope)
    return ViewSelection(DEFAULT_VIEW, "default")


def save_view(view: str, scope: str = "user", user: Optional[str] = None) -> ViewSelection:
    selected = require_view(view)
    normalized_scope = (scope or "user").strip().lower()
    if normalized_scope not in SCOPES:
        logger.debug("Rejected preference scope %r", scope)
        raise ValueError("scope must be either 'system' or 'user'")
    _write(normalized_scope, selected, user)
    logger.info("Calendar view (%s scope) set to %s", normalized_scope, selected)
    return resolve_view(user)


def _today_context(view: str, clock: Optional[Clock]) -> Dict[str, object]:
    today = CalendarDate.now(clock)
    year, month, day = today.fields(view)
    return {
        "date_key": date_key.encode(today),
        "year": year,
        "month": month,
        "day": day,
        "label": today.format(_TODAY_PATTERNS[view], view),
        "day_of_week": today.day_of_week,
        "is_weekend": today.is_weekend(view),
        "days_in_month": today.days_in_month(view),
    }


def get_preference_context(user: Optional[str] = None, clock: Optional[Clock] = None) -> Dict[str, object]:
    """Serialisable view selection plus today's date rendered in that view."""

    resolved = resolve_view(user)
    return {
        "active_view": resolved.value,
        "source": resolved.source,
        "today": _today_context(resolved.value, clock),
    }


def get_view_preference(user: Optional[str] = None) -> Dict[str, object]:
    return get_preference_context(user)


def set_view_preference(view: str, scope: str = "user", user: Optional[str] = None) -> Dict[str, object]:
    save_view(view, scope, user)
    return get_preference_context(user)


if frappe and hasattr(frappe, "whitelist"):  # pragma: no cover - Frappe runtime only
    get_view_preference = frappe.whitelist()(get_view_preference)  # type: ignore[attr-defined]
    set_view_preference = frappe.whitelist()(set_view_preference)  # type: ignore[attr-defined]
