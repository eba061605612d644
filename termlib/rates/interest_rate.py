"""Interest rate under a (day count, compounding, frequency) convention.

An :class:`InterestRate` converts between an annualised rate and the
compound factor it accrues over an elapsed time or a pair of dates. The
class methods :meth:`InterestRate.implied_rate` and
:meth:`InterestRate.implied_rate_with_time` invert a compound factor back
into a rate; term structures use them to express discount factors as zero
and forward rates.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from termlib.conventions.daycount import DayCountConvention, get_day_count_convention
from termlib.conventions.types import Compounding, Frequency
from termlib.errors import DomainError


def _periods_per_year(compounding: Compounding, frequency: Frequency) -> float:
    if not compounding.is_discrete():
        return 0.0
    f = frequency.periods_per_year()
    if f <= 0:
        raise DomainError(
            f"{compounding.name} compounding requires a frequency, got {frequency.name}"
        )
    return float(f)


@dataclass(frozen=True)
class InterestRate:
    """Immutable rate with its quoting convention.

    Attributes:
        rate: Annualised rate in decimal (0.05 = 5%)
        day_counter: Convention turning a date pair into a year fraction
        compounding: Compounding rule
        frequency: Compounding frequency; required for discrete compounding
    """

    rate: float
    day_counter: DayCountConvention
    compounding: Compounding = Compounding.CONTINUOUS
    frequency: Frequency = Frequency.ANNUAL

    def __post_init__(self):
        if isinstance(self.day_counter, str):
            object.__setattr__(
                self, "day_counter", get_day_count_convention(self.day_counter)
            )
        # validates the frequency for discrete compounding
        _periods_per_year(self.compounding, self.frequency)

    # ---- forward direction ---------------------------------------------------

    def compound_factor(self, t: float) -> float:
        """Growth of one unit invested at this rate for ``t`` years."""
        if t < 0.0:
            raise DomainError(f"negative time ({t}) not allowed")
        r = self.rate
        comp = self.compounding
        if comp is Compounding.SIMPLE:
            return 1.0 + r * t
        if comp is Compounding.CONTINUOUS:
            return math.exp(r * t)

        f = _periods_per_year(comp, self.frequency)
        if comp is Compounding.COMPOUNDED:
            use_simple = False
        elif comp is Compounding.SIMPLE_THEN_COMPOUNDED:
            use_simple = t <= 1.0 / f
        else:
            use_simple = t > 1.0 / f
        if use_simple:
            return 1.0 + r * t
        base = 1.0 + r / f
        if not base > 0.0:
            raise DomainError(f"compounded rate ({r}) must exceed -{f}")
        return base ** (f * t)

    def compound_factor_between(
        self,
        d1: date,
        d2: date,
        ref_start: Optional[date] = None,
        ref_end: Optional[date] = None,
    ) -> float:
        """Compound factor accrued between two dates."""
        if d2 < d1:
            raise DomainError(f"d1 ({d1}) later than d2 ({d2})")
        t = self.day_counter.year_fraction(d1, d2, ref_start, ref_end)
        return self.compound_factor(t)

    def discount_factor(self, t: float) -> float:
        compound = self.compound_factor(t)
        if not compound > 0.0:
            raise DomainError(f"non-positive compound factor ({compound}) at t={t}")
        return 1.0 / compound

    def discount_factor_between(
        self,
        d1: date,
        d2: date,
        ref_start: Optional[date] = None,
        ref_end: Optional[date] = None,
    ) -> float:
        compound = self.compound_factor_between(d1, d2, ref_start, ref_end)
        if not compound > 0.0:
            raise DomainError(f"non-positive compound factor ({compound}) from {d1} to {d2}")
        return 1.0 / compound

    # ---- inversion -----------------------------------------------------------

    @classmethod
    def implied_rate_with_time(
        cls,
        compound: float,
        day_counter: DayCountConvention,
        compounding: Compounding,
        frequency: Frequency,
        t: float,
    ) -> "InterestRate":
        """Rate that accrues ``compound`` over ``t`` years.

        Raises:
            DomainError: If ``compound <= 0`` or ``t <= 0``
        """
        if compound <= 0.0:
            raise DomainError(f"positive compound factor required, got {compound}")
        if t <= 0.0:
            raise DomainError(f"positive time required, got {t}")

        if compound == 1.0:
            r = 0.0
        elif compounding is Compounding.SIMPLE:
            r = (compound - 1.0) / t
        elif compounding is Compounding.CONTINUOUS:
            r = math.log(compound) / t
        else:
            f = _periods_per_year(compounding, frequency)
            if compounding is Compounding.COMPOUNDED:
                use_simple = False
            elif compounding is Compounding.SIMPLE_THEN_COMPOUNDED:
                use_simple = t <= 1.0 / f
            else:
                use_simple = t > 1.0 / f
            if use_simple:
                r = (compound - 1.0) / t
            else:
                r = (compound ** (1.0 / (f * t)) - 1.0) * f

        return cls(r, get_day_count_convention(day_counter), compounding, frequency)

    @classmethod
    def implied_rate(
        cls,
        compound: float,
        day_counter: DayCountConvention,
        compounding: Compounding,
        frequency: Frequency,
        d1: date,
        d2: date,
        ref_start: Optional[date] = None,
        ref_end: Optional[date] = None,
    ) -> "InterestRate":
        """Rate that accrues ``compound`` between ``d1`` and ``d2``.

        Callers guarantee ``d2 >= d1``; a zero-length period still fails
        because the elapsed time is not positive.
        """
        day_counter = get_day_count_convention(day_counter)
        t = day_counter.year_fraction(d1, d2, ref_start, ref_end)
        return cls.implied_rate_with_time(compound, day_counter, compounding, frequency, t)

    def equivalent_rate(
        self, compounding: Compounding, frequency: Frequency, t: float
    ) -> "InterestRate":
        """Same growth over ``t`` years expressed in another convention."""
        return self.implied_rate_with_time(
            self.compound_factor(t), self.day_counter, compounding, frequency, t
        )

    def equivalent_rate_between(
        self,
        day_counter: DayCountConvention,
        compounding: Compounding,
        frequency: Frequency,
        d1: date,
        d2: date,
        ref_start: Optional[date] = None,
        ref_end: Optional[date] = None,
    ) -> "InterestRate":
        if d2 < d1:
            raise DomainError(f"d1 ({d1}) later than d2 ({d2})")
        t1 = self.day_counter.year_fraction(d1, d2, ref_start, ref_end)
        return self.implied_rate(
            self.compound_factor(t1),
            day_counter,
            compounding,
            frequency,
            d1,
            d2,
            ref_start,
            ref_end,
        )

    def __float__(self) -> float:
        return self.rate

    def __str__(self) -> str:
        text = f"{self.rate * 100:.6f} % {self.day_counter.long_name} "
        comp = self.compounding
        if comp is Compounding.SIMPLE:
            return text + "simple compounding"
        if comp is Compounding.CONTINUOUS:
            return text + "continuous compounding"
        freq = self.frequency.name.lower().replace("_", "-")
        if comp is Compounding.COMPOUNDED:
            return text + f"{freq} compounding"
        if comp is Compounding.SIMPLE_THEN_COMPOUNDED:
            return text + f"simple compounding up to one {freq} period, then {freq} compounding"
        return text + f"{freq} compounding up to one period, then simple compounding"
