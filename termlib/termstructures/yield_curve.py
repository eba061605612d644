"""
Yield term structure with multiplicative jumps.

Discount factors come from a pluggable :class:`DiscountRule`; zero and
forward rates are obtained by inverting discount-factor ratios through
:class:`InterestRate`. Optional jumps multiply the discount factor by the
value of a quote for every jump date strictly between the reference date
and the query time (e.g. year-end funding or tax effects).
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

from termlib import settings
from termlib.conventions.calendars import Calendar
from termlib.conventions.daycount import DayCountConvention
from termlib.conventions.types import Compounding, Frequency
from termlib.errors import DomainError, InvalidQuoteError
from termlib.quotes import Quote
from termlib.rates.interest_rate import InterestRate
from termlib.utils.date import add_days, to_date, year_ends

from .base import TermStructure
from .discount_rules import DiscountRule, as_discount_rule

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, str]


@dataclass(frozen=True, eq=False)
class JumpSchedule:
    """Jump dates and their times from one particular reference date."""

    reference_date: date
    dates: Tuple[date, ...]
    times: np.ndarray


class YieldTermStructure(TermStructure):
    """Interest-rate term structure.

    A curve is either jumped or not for its whole life; the jump times are
    re-derived from the jump dates whenever the reference date changes.
    """

    def __init__(
        self,
        discount_rule: Union[DiscountRule, Callable[[float], float]],
        reference_date: Optional[DateLike] = None,
        day_counter: Union[str, DayCountConvention] = "ACT/365F",
        calendar: Optional[Union[str, Calendar]] = None,
        settlement_days: Optional[int] = None,
        jumps: Sequence[Quote] = (),
        jump_dates: Sequence[DateLike] = (),
        max_date: Optional[DateLike] = None,
        name: str = "",
    ):
        """
        Initialize yield term structure.

        Args:
            discount_rule: Discount factor as a function of curve time
            reference_date: Fixed reference date; omit for a moving curve
            day_counter: Day-count convention to convert dates to curve times
            calendar: Calendar for reference date calculation
            settlement_days: Business days from evaluation date to reference date
            jumps: Quotes whose values multiply the discount factor
            jump_dates: One date per jump; defaults to successive Dec 31st
            max_date: Latest date the curve is valid for (unbounded if None)
            name: Optional curve name
        """
        super().__init__(reference_date, day_counter, calendar, settlement_days, name)
        self._discount_rule = as_discount_rule(discount_rule)
        self._max_date = None if max_date is None else to_date(max_date)

        if self._max_date is not None and self._reference_date is not None:
            if self._max_date < self._reference_date:
                raise ValueError(
                    f"max date ({self._max_date}) before reference date ({self._reference_date})"
                )

        self._jumps: Tuple[Quote, ...] = tuple(jumps)
        dates = tuple(to_date(d) for d in jump_dates)
        if dates and len(dates) != len(self._jumps):
            raise ValueError(
                f"mismatch between number of jumps ({len(self._jumps)}) "
                f"and jump dates ({len(dates)})"
            )
        self._jump_dates: Optional[Tuple[date, ...]] = dates or None
        self._schedule: Optional[JumpSchedule] = None

        if self._jumps and (self._reference_date is not None or self.is_moving):
            self.set_jumps()

    # ---- jumps ---------------------------------------------------------------

    @property
    def has_jumps(self) -> bool:
        return bool(self._jumps)

    def jumps(self) -> Tuple[Quote, ...]:
        return self._jumps

    def set_jumps(self) -> JumpSchedule:
        """Rebuild the jump schedule for the current reference date."""
        reference = self.reference_date()
        if not self._jumps:
            self._jump_dates = ()
        elif self._jump_dates is None:
            self._jump_dates = tuple(year_ends(reference.year, len(self._jumps)))
            logger.info(
                "%s: no jump dates given, using year ends %s..%s",
                self,
                self._jump_dates[0],
                self._jump_dates[-1],
            )
        times = np.array([self.time_from_reference(d) for d in self._jump_dates], dtype=float)
        times.flags.writeable = False
        self._schedule = JumpSchedule(reference, self._jump_dates, times)
        logger.debug("%s: jump schedule rebuilt for reference date %s", self, reference)
        return self._schedule

    def _jump_schedule(self) -> JumpSchedule:
        schedule = self._schedule
        if schedule is None or schedule.reference_date != self.reference_date():
            schedule = self.set_jumps()
        return schedule

    def jump_dates(self) -> List[date]:
        if not self._jumps:
            return []
        return list(self._jump_schedule().dates)

    def jump_times(self) -> List[float]:
        if not self._jumps:
            return []
        return self._jump_schedule().times.tolist()

    # ---- validity range ------------------------------------------------------

    def discount_rule(self) -> DiscountRule:
        return self._discount_rule

    def max_date(self) -> date:
        return date.max if self._max_date is None else self._max_date

    def max_time(self) -> float:
        return min(super().max_time(), self._discount_rule.max_time)

    # ---- discount factors ----------------------------------------------------

    def discount(self, dt: DateLike, extrapolate: bool = False) -> float:
        """Discount factor from the reference date to ``dt``."""
        return self.discount_with_time(self.time_from_reference(dt), extrapolate)

    def discount_with_time(self, t: float, extrapolate: bool = False) -> float:
        """Discount factor at curve time ``t``, jumps included."""
        self.check_range_with_time(t, extrapolate)
        df = self._discount_rule.evaluate(t)
        if not df > 0.0:
            raise DomainError(f"non-positive discount factor ({df}) at t={t}")
        if not self._jumps:
            return df

        times = self._jump_schedule().times
        jump_effect = 1.0
        # jumps on the reference date or at/after t do not apply
        for n in np.flatnonzero((times > 0.0) & (times < t)):
            quote = self._jumps[n]
            if not quote.is_valid():
                raise InvalidQuoteError(f"invalid jump quote #{n}")
            this_jump = quote.value()
            if not this_jump > 0.0:
                raise DomainError(f"non-positive jump #{n} value ({this_jump})")
            jump_effect *= this_jump

        return jump_effect * df

    # ---- zero rates ----------------------------------------------------------

    def zero_rate(
        self,
        dt: DateLike,
        result_day_counter: Union[str, DayCountConvention],
        compounding: Compounding,
        frequency: Frequency = Frequency.ANNUAL,
        extrapolate: bool = False,
    ) -> InterestRate:
        """Zero rate from the reference date to ``dt``.

        At the reference date itself the instantaneous rate is returned,
        estimated over the first ``settings.INSTANTANEOUS_DT`` years.
        """
        dt = to_date(dt)
        reference = self.reference_date()
        if dt == reference:
            step = settings.INSTANTANEOUS_DT
            compound = 1.0 / self.discount_with_time(step, extrapolate)
            # step is a curve time; for so short a period the day counter
            # difference is negligible
            return InterestRate.implied_rate_with_time(
                compound, result_day_counter, compounding, frequency, step
            )
        compound = 1.0 / self.discount(dt, extrapolate)
        return InterestRate.implied_rate(
            compound, result_day_counter, compounding, frequency, reference, dt
        )

    def zero_rate_with_time(
        self,
        t: float,
        compounding: Compounding,
        frequency: Frequency = Frequency.ANNUAL,
        extrapolate: bool = False,
    ) -> InterestRate:
        """Zero rate to curve time ``t`` in the curve's own day count."""
        if t == 0.0:
            t = settings.INSTANTANEOUS_DT
        compound = 1.0 / self.discount_with_time(t, extrapolate)
        return InterestRate.implied_rate_with_time(
            compound, self.day_counter(), compounding, frequency, t
        )

    # ---- forward rates -------------------------------------------------------

    def forward_rate(
        self,
        d1: DateLike,
        d2: DateLike,
        result_day_counter: Union[str, DayCountConvention],
        compounding: Compounding,
        frequency: Frequency = Frequency.ANNUAL,
        extrapolate: bool = False,
    ) -> InterestRate:
        """Forward rate between two dates; instantaneous if they coincide."""
        d1 = to_date(d1)
        d2 = to_date(d2)
        if d1 == d2:
            self.check_range(d1, extrapolate)
            step = settings.INSTANTANEOUS_DT
            t1 = max(self.time_from_reference(d1) - step / 2.0, 0.0)
            t2 = t1 + step
            # the micro-interval may straddle max time
            compound = self.discount_with_time(t1, True) / self.discount_with_time(t2, True)
            return InterestRate.implied_rate_with_time(
                compound, result_day_counter, compounding, frequency, step
            )
        if d2 < d1:
            raise DomainError(f"t2 < t1: d2 ({d2}) before d1 ({d1})")
        compound = self.discount(d1, extrapolate) / self.discount(d2, extrapolate)
        return InterestRate.implied_rate(
            compound, result_day_counter, compounding, frequency, d1, d2
        )

    def forward_rate_with_period(
        self,
        dt: DateLike,
        days: int,
        result_day_counter: Union[str, DayCountConvention],
        compounding: Compounding,
        frequency: Frequency = Frequency.ANNUAL,
        extrapolate: bool = False,
    ) -> InterestRate:
        """Forward rate over ``days`` calendar days starting at ``dt``."""
        start = to_date(dt)
        return self.forward_rate(
            start,
            add_days(start, days),
            result_day_counter,
            compounding,
            frequency,
            extrapolate,
        )

    def forward_rate_with_time(
        self,
        t1: float,
        t2: float,
        compounding: Compounding,
        frequency: Frequency = Frequency.ANNUAL,
        extrapolate: bool = False,
    ) -> InterestRate:
        """Forward rate between curve times; instantaneous if they coincide."""
        if t2 == t1:
            self.check_range_with_time(t1, extrapolate)
            step = settings.INSTANTANEOUS_DT
            t1 = max(t1 - step / 2.0, 0.0)
            t2 = t1 + step
            compound = self.discount_with_time(t1, True) / self.discount_with_time(t2, True)
        else:
            if t2 < t1:
                raise DomainError(f"t2 ({t2}) < t1 ({t1})")
            compound = self.discount_with_time(t1, extrapolate) / self.discount_with_time(t2, extrapolate)
        return InterestRate.implied_rate_with_time(
            compound, self.day_counter(), compounding, frequency, t2 - t1
        )

    def __repr__(self) -> str:
        return (
            f"YieldTermStructure(discount_rule={self._discount_rule!r}, "
            f"reference_date={self._reference_date}, "
            f"day_counter='{self.day_counter()}', "
            f"jumps={len(self._jumps)}, name='{self.name}')"
        )
