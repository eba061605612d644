"""Interest Rate Term Structure Engine.

This package models the term structure of interest rates: discount factors,
zero rates and forward rates at arbitrary dates, with optional
multiplicative jumps pinned to calendar dates.

Key modules:
- termstructures: Base term structure, discount rules and the yield curve
- rates: InterestRate conversion between compound factors and rates
- conventions: Day counts, calendars, compounding and frequency
- cashflows: Cash flow and coupon contracts for pricers built on a curve
- quotes: Market quote protocol used by jumps
- settings: Evaluation date and engine-wide tunables
"""

from termlib.conventions import Compounding, Frequency, get_calendar, get_day_count_convention
from termlib.errors import (
    DomainError,
    InvalidQuoteError,
    OutOfRangeError,
    TermStructureError,
    UnresolvedReferenceDateError,
)
from termlib.quotes import Quote, SimpleQuote
from termlib.rates import InterestRate
from termlib.termstructures import (
    DiscountRule,
    FlatForward,
    FunctionDiscountRule,
    YieldTermStructure,
    curve_table,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Compounding",
    "Frequency",
    "get_calendar",
    "get_day_count_convention",
    "InterestRate",
    "Quote",
    "SimpleQuote",
    "DiscountRule",
    "FlatForward",
    "FunctionDiscountRule",
    "YieldTermStructure",
    "curve_table",
    "TermStructureError",
    "OutOfRangeError",
    "InvalidQuoteError",
    "DomainError",
    "UnresolvedReferenceDateError",
]
