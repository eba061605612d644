"""
Term structures package.

Main APIs:
---------
    - TermStructure: reference date, time basis and range checks
    - DiscountRule / FlatForward / FunctionDiscountRule: discount as a function of time
    - YieldTermStructure: discount, zero and forward rates with optional jumps
    - curve_table: pandas view of curve queries over a set of dates
"""

from .base import TermStructure
from .discount_rules import (
    DiscountRule,
    FlatForward,
    FunctionDiscountRule,
    as_discount_rule,
)
from .tabulate import curve_table
from .yield_curve import JumpSchedule, YieldTermStructure

__all__ = [
    "TermStructure",
    "DiscountRule",
    "FlatForward",
    "FunctionDiscountRule",
    "as_discount_rule",
    "YieldTermStructure",
    "JumpSchedule",
    "curve_table",
]
