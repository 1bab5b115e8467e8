"""Resolve which label language a calendar response is rendered in.

An explicit ``language`` argument wins. Otherwise the
``bikram_sambat_label_language`` Frappe default is read, first for the user
and then site wide; without a site database the package default is used.
"""
from __future__ import annotations

import logging
from typing import Optional

from .formatter import DEFAULT_LANGUAGE, LabelLanguage, parse_label_language
from .whitelist import frappe, site_db_available

__all__ = ["PREFERENCE_KEY", "resolve_language", "stored_language"]

logger = logging.getLogger(__name__)

PREFERENCE_KEY = "bikram_sambat_label_language"


def stored_language(user: Optional[str] = None) -> Optional[LabelLanguage]:
    """Label language saved in Frappe defaults, or ``None`` if unset or invalid."""

    if not site_db_available():
        return None
    if not user:
        user = getattr(getattr(frappe, "session", None), "user", None)
    candidates = []
    if user and user != "Guest":
        candidates.append(frappe.db.get_default(PREFERENCE_KEY, user=user))  # type: ignore[attr-defined]
    candidates.append(frappe.db.get_default(PREFERENCE_KEY))  # type: ignore[attr-defined]
    for value in candidates:
        if value:
            try:
                return parse_label_language(value)
            except ValueError:
                logger.warning("ignoring invalid %s default %r", PREFERENCE_KEY, value)
    return None


def resolve_language(language: Optional[str] = None, user: Optional[str] = None) -> LabelLanguage:
    if language:
        return parse_label_language(language)
    return stored_language(user) or DEFAULT_LANGUAGE
