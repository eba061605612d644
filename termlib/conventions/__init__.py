"""
Market conventions: day counts, calendars, compounding and frequency.
"""

from .calendars import (
    CALENDARS,
    NULL_CALENDAR,
    TARGET,
    WEEKEND_ONLY,
    Calendar,
    get_calendar,
)
from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    ACT_ACT_ISMA,
    DAY_COUNT_CONVENTIONS,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    get_day_count_convention,
)
from .types import Compounding, Frequency

__all__ = [
    # Day counts
    "DayCountConvention",
    "DAY_COUNT_CONVENTIONS",
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "ACT_ACT_ISMA",
    "THIRTY_360E",
    "THIRTY_360U",
    "get_day_count_convention",
    # Calendars
    "Calendar",
    "CALENDARS",
    "TARGET",
    "WEEKEND_ONLY",
    "NULL_CALENDAR",
    "get_calendar",
    # Enums
    "Compounding",
    "Frequency",
]
