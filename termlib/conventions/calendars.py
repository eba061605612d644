"""
QuantLib-backed calendars.

A term structure stores its calendar as an opaque handle; the only
calendar arithmetic it needs is rolling the evaluation date forward by the
settlement lag of a moving curve.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from termlib.utils.date import to_date


def _to_ql_date(dt: Union[date, datetime, str]) -> ql.Date:
    """Convert a Python date-like into a QuantLib Date."""
    py_date = to_date(dt)
    return ql.Date(py_date.day, py_date.month, py_date.year)


def _to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


class Calendar:
    """Base calendar class for QuantLib-backed business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def add_business_days(self, start_date: Union[date, datetime, str], days: int) -> date:
        """Add business days to a date.

        Zero days rolls a holiday forward to the next business day, as
        QuantLib's ``advance`` does.
        """
        ql_result = self._ql_calendar.advance(_to_ql_date(start_date), days, ql.Days)
        return _to_py_date(ql_result)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


class TargetCalendar(Calendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar."""

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class WeekendCalendar(Calendar):
    """Only weekends are non-business days."""

    def __init__(self):
        super().__init__("WEEKEND", ql.WeekendsOnly())


class NullCalendar(Calendar):
    """Every day is a business day."""

    def __init__(self):
        super().__init__("NULL", ql.NullCalendar())


# Pre-defined calendar instances
TARGET = TargetCalendar()
WEEKEND_ONLY = WeekendCalendar()
NULL_CALENDAR = NullCalendar()

# Calendar registry
CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "WEEKEND": WEEKEND_ONLY,
    "NULL": NULL_CALENDAR,
}


def get_calendar(name: Union[str, Calendar]) -> Calendar:
    """Get a calendar by name (instances pass through)."""
    if isinstance(name, Calendar):
        return name
    key = name.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
