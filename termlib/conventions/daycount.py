"""
QuantLib-backed day count conventions.

Term structures only consume ``year_fraction(start, end)``; the day count
itself is delegated to QuantLib so results match the market standard.
"""

from datetime import date, datetime
from typing import Optional, Union

import QuantLib as ql

from termlib.utils.date import to_date

DateLike = Union[date, datetime, str]


def _to_ql_date(dt: DateLike) -> ql.Date:
    """Convert a Python date-like into a QuantLib Date."""
    py_date = to_date(dt)
    return ql.Date(py_date.day, py_date.month, py_date.year)


class DayCountConvention:
    """Base class for QuantLib-backed day count conventions."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(
        self,
        start: DateLike,
        end: DateLike,
        ref_start: Optional[DateLike] = None,
        ref_end: Optional[DateLike] = None,
    ) -> float:
        """Year fraction between two dates.

        The optional reference period is only used by conventions that need
        it (e.g. ACT/ACT ISMA); the others ignore it.
        """
        ql_start = _to_ql_date(start)
        ql_end = _to_ql_date(end)
        if ref_start is None or ref_end is None:
            return self._ql_daycount.yearFraction(ql_start, ql_end)
        return self._ql_daycount.yearFraction(
            ql_start, ql_end, _to_ql_date(ref_start), _to_ql_date(ref_end)
        )

    def day_count(self, start: DateLike, end: DateLike) -> int:
        """Number of days between two dates under this convention."""
        return self._ql_daycount.dayCount(_to_ql_date(start), _to_ql_date(end))

    @property
    def long_name(self) -> str:
        """QuantLib's descriptive name, e.g. ``Actual/365 (Fixed)``."""
        return self._ql_daycount.name()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayCountConvention):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Actual360(DayCountConvention):
    """ACT/360, money-market convention."""

    def __init__(self):
        super().__init__("ACT/360", ql.Actual360())


class Actual365Fixed(DayCountConvention):
    """ACT/365F, the default time basis for curves."""

    def __init__(self):
        super().__init__("ACT/365F", ql.Actual365Fixed())


class Thirty360European(DayCountConvention):
    """30E/360 (30/360 European)."""

    def __init__(self):
        super().__init__("30E/360", ql.Thirty360(ql.Thirty360.European))


class Thirty360US(DayCountConvention):
    """30U/360 (30/360 US bond basis)."""

    def __init__(self):
        super().__init__("30U/360", ql.Thirty360(ql.Thirty360.BondBasis))


class ActualActualISDA(DayCountConvention):
    """ACT/ACT ISDA."""

    def __init__(self):
        super().__init__("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))


class ActualActualISMA(DayCountConvention):
    """ACT/ACT ISMA; honours the reference period of a coupon."""

    def __init__(self):
        super().__init__("ACT/ACT ISMA", ql.ActualActual(ql.ActualActual.ISMA))


# Pre-defined day count convention instances
ACT_360 = Actual360()
ACT_365F = Actual365Fixed()
THIRTY_360E = Thirty360European()
THIRTY_360U = Thirty360US()
ACT_ACT = ActualActualISDA()
ACT_ACT_ISMA = ActualActualISMA()

# Registry
DAY_COUNT_CONVENTIONS = {
    "ACT/360": ACT_360,
    "ACTUAL/360": ACT_360,
    "ACT/365F": ACT_365F,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "ACTUAL/365": ACT_365F,
    "30E/360": THIRTY_360E,
    "30/360E": THIRTY_360E,
    "30/360 EUROPEAN": THIRTY_360E,
    "30U/360": THIRTY_360U,
    "30/360": THIRTY_360U,
    "30/360 US": THIRTY_360U,
    "ACT/ACT": ACT_ACT,
    "ACTUAL/ACTUAL": ACT_ACT,
    "ACT/ACT ISDA": ACT_ACT,
    "ACT/ACT ISMA": ACT_ACT_ISMA,
}


def get_day_count_convention(
    name: Union[str, DayCountConvention]
) -> DayCountConvention:
    """Get a day count convention by name (instances pass through)."""
    if isinstance(name, DayCountConvention):
        return name
    name_upper = name.upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]
