"""Bikram Sambat ↔ Gregorian conversion and calendar grid helpers."""

__version__ = "0.1.0"
