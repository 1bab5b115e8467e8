"""Hook implementations that integrate the Bikram Sambat calendar with Frappe."""
from __future__ import annotations

from .api import calendar, preferences


def boot_session(bootinfo):
    """Inject today's BS date, the supported range and the label language."""

    language = preferences.resolve_language()
    context = {
        "label_language": language,
        "supported_range": calendar.get_supported_range(),
        "today": calendar.get_today(language),
    }
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("bikram_sambat", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "bikram_sambat", context)
