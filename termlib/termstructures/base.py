"""
Base term structure: reference date, time basis and range checks.
"""

import logging
import math
from abc import ABC
from datetime import date, datetime
from typing import Optional, Union

from termlib import settings
from termlib.conventions.calendars import Calendar, get_calendar
from termlib.conventions.daycount import (
    DayCountConvention,
    get_day_count_convention,
)
from termlib.errors import OutOfRangeError, UnresolvedReferenceDateError
from termlib.utils.date import to_date

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]


class TermStructure(ABC):
    """Common state of all term structures.

    The reference date is the date at which discount = 1. It is either
    fixed at construction, or *moving*: derived from the global evaluation
    date advanced by ``settlement_days`` business days on ``calendar``.
    A structure with neither has no reference date until
    :meth:`set_reference_date` is called.
    """

    def __init__(
        self,
        reference_date: Optional[DateLike] = None,
        day_counter: Union[str, DayCountConvention] = "ACT/365F",
        calendar: Optional[Union[str, Calendar]] = None,
        settlement_days: Optional[int] = None,
        name: str = "",
    ):
        """
        Initialize base term structure.

        Args:
            reference_date: Fixed reference date; omit for a moving curve
            day_counter: Day-count convention to convert dates to curve times
            calendar: Calendar for reference date calculation
            settlement_days: Business days from evaluation date to reference date
            name: Optional name for identification
        """
        self._reference_date = None if reference_date is None else to_date(reference_date)
        self._day_counter = get_day_count_convention(day_counter)
        self._calendar = None if calendar is None else get_calendar(calendar)
        self._settlement_days = settlement_days
        self._extrapolate = False
        self.name = name

        if self._reference_date is None and settlement_days is not None and calendar is None:
            raise ValueError("A moving term structure needs a calendar")

    # ---- reference date ------------------------------------------------------

    @property
    def is_moving(self) -> bool:
        """True when the reference date follows the evaluation date."""
        return self._reference_date is None and self._settlement_days is not None

    def reference_date(self) -> date:
        """The date at which discount = 1.0."""
        if self._reference_date is not None:
            return self._reference_date
        if self.is_moving:
            return self._calendar.add_business_days(
                settings.evaluation_date(), self._settlement_days
            )
        raise UnresolvedReferenceDateError(
            f"{self} has no reference date: pass one, or settlement days and a calendar"
        )

    def set_reference_date(self, reference_date: DateLike) -> None:
        """Fix the reference date. Not thread-safe against running queries."""
        if self.is_moving:
            logger.warning(
                "%s: fixing reference date %s on a moving term structure",
                self,
                reference_date,
            )
        self._reference_date = to_date(reference_date)

    # ---- conventions ---------------------------------------------------------

    def day_counter(self) -> DayCountConvention:
        return self._day_counter

    def calendar(self) -> Optional[Calendar]:
        return self._calendar

    def settlement_days(self) -> Optional[int]:
        return self._settlement_days

    def time_from_reference(self, dt: DateLike) -> float:
        """Year fraction between the reference date and ``dt``."""
        return self._day_counter.year_fraction(self.reference_date(), to_date(dt))

    # ---- validity range ------------------------------------------------------

    def max_date(self) -> date:
        """The latest date for which the curve can return values."""
        return date.max

    def max_time(self) -> float:
        """The latest time for which the curve can return values."""
        max_date = self.max_date()
        if max_date == date.max:
            return math.inf
        return self.time_from_reference(max_date)

    @property
    def allows_extrapolation(self) -> bool:
        return self._extrapolate

    def enable_extrapolation(self, flag: bool = True) -> None:
        self._extrapolate = flag

    def disable_extrapolation(self) -> None:
        self._extrapolate = False

    def check_range(self, dt: DateLike, extrapolate: bool) -> None:
        """Raise OutOfRangeError unless ``dt`` lies in [reference, max date] and within max time."""
        dt = to_date(dt)
        reference = self.reference_date()
        if dt < reference:
            raise OutOfRangeError(f"date ({dt}) before reference date ({reference})")
        if extrapolate or self._extrapolate:
            return
        if dt > self.max_date():
            raise OutOfRangeError(f"date ({dt}) is past max curve date ({self.max_date()})")
        # a subclass may cap max time below the time of max date
        t = self.time_from_reference(dt)
        if t > self.max_time():
            raise OutOfRangeError(f"date ({dt}) is past max curve time ({self.max_time()})")

    def check_range_with_time(self, t: float, extrapolate: bool) -> None:
        """Raise OutOfRangeError unless ``t`` lies in [0, max time]."""
        if not t >= 0.0:
            raise OutOfRangeError(f"negative or undefined time ({t}) given")
        if not (extrapolate or self._extrapolate) and t > self.max_time():
            raise OutOfRangeError(f"time ({t}) is past max curve time ({self.max_time()})")

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name})"
            if self.name
            else self.__class__.__name__
        )
