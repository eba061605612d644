"""Cash flow and coupon contracts consumed by pricers built on a curve."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from functools import total_ordering
from typing import Union

from termlib.conventions.daycount import DayCountConvention, get_day_count_convention
from termlib.utils.date import to_date


@total_ordering
class CashFlow(ABC):
    """A single payment; flows order by payment date."""

    @abstractmethod
    def date(self) -> date:
        """Payment date."""

    @abstractmethod
    def amount(self) -> float:
        """Amount paid on :meth:`date`."""

    def has_occurred(
        self, ref_date: Union[date, datetime, str], include_ref_date: bool = False
    ) -> bool:
        """True if the flow is paid before ``ref_date``; a flow on ``ref_date`` has
        occurred unless ``include_ref_date`` is set."""
        ref = to_date(ref_date)
        if include_ref_date:
            return self.date() < ref
        return self.date() <= ref

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CashFlow):
            return NotImplemented
        return self.date() == other.date()

    def __lt__(self, other: "CashFlow") -> bool:
        if not isinstance(other, CashFlow):
            return NotImplemented
        return self.date() < other.date()


@dataclass(frozen=True)
class CouponFields:
    """Terms fixed when a coupon is created."""

    nominal: float
    day_counter: DayCountConvention
    payment_date: date
    accrual_start_date: date
    accrual_end_date: date
    reference_period_start: date
    reference_period_end: date

    def __post_init__(self):
        object.__setattr__(self, "day_counter", get_day_count_convention(self.day_counter))
        for name in (
            "payment_date",
            "accrual_start_date",
            "accrual_end_date",
            "reference_period_start",
            "reference_period_end",
        ):
            object.__setattr__(self, name, to_date(getattr(self, name)))
        if self.accrual_end_date < self.accrual_start_date:
            raise ValueError(
                f"accrual end ({self.accrual_end_date}) before start ({self.accrual_start_date})"
            )


class Coupon(CashFlow):
    """Cash flow accruing a rate over a period."""

    def __init__(self, fields: CouponFields):
        self._fields = fields

    @property
    def fields(self) -> CouponFields:
        return self._fields

    @property
    def nominal(self) -> float:
        return self._fields.nominal

    @property
    def day_counter(self) -> DayCountConvention:
        return self._fields.day_counter

    def date(self) -> date:
        return self._fields.payment_date

    @abstractmethod
    def rate(self) -> float:
        """Accrual rate (decimal)."""

    @abstractmethod
    def accrued_amount(self, dt: Union[date, datetime, str]) -> float:
        """Amount accrued up to ``dt``."""

    def accrual_period(self) -> float:
        """Accrual period as a year fraction."""
        f = self._fields
        return f.day_counter.year_fraction(
            f.accrual_start_date,
            f.accrual_end_date,
            f.reference_period_start,
            f.reference_period_end,
        )

    def accrual_days(self) -> int:
        """Accrual period in days under the coupon's day count."""
        f = self._fields
        return f.day_counter.day_count(f.accrual_start_date, f.accrual_end_date)
