"""
Basic rate-convention enums.
"""

from enum import Enum


class Frequency(Enum):
    """Compounding/payment frequency; the value is periods per year."""

    NO_FREQUENCY = -1
    ONCE = 0
    ANNUAL = 1
    SEMIANNUAL = 2
    EVERY_FOURTH_MONTH = 3
    QUARTERLY = 4
    BIMONTHLY = 6
    MONTHLY = 12
    EVERY_FOURTH_WEEK = 13
    BIWEEKLY = 26
    WEEKLY = 52
    DAILY = 365

    def periods_per_year(self) -> int:
        return self.value


class Compounding(Enum):
    """How a compound factor maps to an annualised rate."""

    SIMPLE = "SIMPLE"  # 1 + r t
    COMPOUNDED = "COMPOUNDED"  # (1 + r/f)^(f t)
    CONTINUOUS = "CONTINUOUS"  # exp(r t)
    SIMPLE_THEN_COMPOUNDED = "SIMPLE_THEN_COMPOUNDED"  # simple up to 1/f
    COMPOUNDED_THEN_SIMPLE = "COMPOUNDED_THEN_SIMPLE"  # compounded up to 1/f

    def is_discrete(self) -> bool:
        """True when the convention needs a compounding frequency."""
        return self in (
            Compounding.COMPOUNDED,
            Compounding.SIMPLE_THEN_COMPOUNDED,
            Compounding.COMPOUNDED_THEN_SIMPLE,
        )
