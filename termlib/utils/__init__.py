"""Shared helpers."""

from .date import add_days, to_date, year_ends

__all__ = ["to_date", "year_ends", "add_days"]
