"""Optional Frappe integration shared by the endpoint modules."""
from __future__ import annotations

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except Exception:  # pragma: no cover - the package works without it
    frappe = None  # type: ignore

__all__ = ["frappe", "maybe_whitelist", "site_db_available"]


def site_db_available() -> bool:
    """True when Frappe is importable and a site database is bound."""

    return bool(frappe) and getattr(getattr(frappe, "local", None), "db", None) is not None


def maybe_whitelist(func):  # pragma: no cover - exercised in Frappe environments
    if frappe and hasattr(frappe, "whitelist"):
        return frappe.whitelist()(func)  # type: ignore[attr-defined]
    return func
