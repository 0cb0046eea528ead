"""Hook implementations that integrate the Shamsi calendar with Frappe."""
from __future__ import annotations

import logging

from .api import preferences

logger = logging.getLogger(__name__)


def boot_session(bootinfo):
    """Inject the resolved calendar view and today's date into the boot payload."""

    context = preferences.get_preference_context()
    logger.debug("Shamsi calendar boot context: %s", context)
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("shamsi_calendar", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "shamsi_calendar", context)
