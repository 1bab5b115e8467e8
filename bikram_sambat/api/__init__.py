"""Server-side helpers exposed by the Bikram Sambat calendar package."""

from . import calendar, converter, epoch_table, formatter, grid, preferences, view_state, whitelist

__all__ = [
    "calendar",
    "converter",
    "epoch_table",
    "formatter",
    "grid",
    "preferences",
    "view_state",
    "whitelist",
]
