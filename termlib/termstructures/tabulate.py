"""Tabular views of a yield curve."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Union

import pandas as pd

from termlib.conventions.daycount import DayCountConvention
from termlib.conventions.types import Compounding, Frequency
from termlib.utils.date import to_date

from .yield_curve import YieldTermStructure


def curve_table(
    curve: YieldTermStructure,
    dates: Iterable[Union[date, str]],
    day_counter: Optional[Union[str, DayCountConvention]] = None,
    compounding: Compounding = Compounding.CONTINUOUS,
    frequency: Frequency = Frequency.ANNUAL,
    extrapolate: bool = False,
) -> pd.DataFrame:
    """Discount factor, zero rate and instantaneous forward per date.

    Rows keep the order of ``dates``. Rates are decimals quoted in
    ``day_counter`` (the curve's own by default).
    """
    dc = curve.day_counter() if day_counter is None else day_counter
    rows = []
    for d in dates:
        d = to_date(d)
        rows.append(
            {
                "date": d,
                "time": curve.time_from_reference(d),
                "discount": curve.discount(d, extrapolate),
                "zero_rate": curve.zero_rate(d, dc, compounding, frequency, extrapolate).rate,
                "inst_forward": curve.forward_rate(
                    d, d, dc, compounding, frequency, extrapolate
                ).rate,
            }
        )
    return pd.DataFrame(
        rows, columns=["date", "time", "discount", "zero_rate", "inst_forward"]
    )
