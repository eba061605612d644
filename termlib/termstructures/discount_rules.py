"""
Discount rules: the pluggable function of time behind a yield curve.
"""

import math
from abc import ABC, abstractmethod
from typing import Callable, Union

from termlib.conventions.types import Compounding, Frequency
from termlib.conventions.daycount import ACT_365F
from termlib.rates.interest_rate import InterestRate


class DiscountRule(ABC):
    """Maps a curve time (years from reference) to a discount factor."""

    #: Latest time the rule is defined for; curves refuse to go past it
    #: unless extrapolating.
    max_time: float = math.inf

    @abstractmethod
    def evaluate(self, t: float) -> float:
        """Discount factor at time t."""
        pass

    def __call__(self, t: float) -> float:
        return self.evaluate(t)


class FlatForward(DiscountRule):
    """Constant rate in the given compounding convention."""

    def __init__(
        self,
        rate: Union[float, InterestRate],
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL,
    ):
        if isinstance(rate, InterestRate):
            self.rate = rate
        else:
            # the day counter is irrelevant: the rule works on times
            self.rate = InterestRate(float(rate), ACT_365F, compounding, frequency)

    def evaluate(self, t: float) -> float:
        return self.rate.discount_factor(t)

    def __repr__(self) -> str:
        return f"FlatForward({self.rate})"


class FunctionDiscountRule(DiscountRule):
    """Adapter for any callable ``t -> discount factor``."""

    def __init__(self, func: Callable[[float], float], max_time: float = math.inf):
        if max_time <= 0.0:
            raise ValueError(f"max_time must be positive: {max_time}")
        self._func = func
        self.max_time = max_time

    def evaluate(self, t: float) -> float:
        return float(self._func(t))

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"FunctionDiscountRule({name}, max_time={self.max_time})"


def as_discount_rule(rule: Union[DiscountRule, Callable[[float], float]]) -> DiscountRule:
    """Wrap plain callables; rules pass through."""
    if isinstance(rule, DiscountRule):
        return rule
    if callable(rule):
        return FunctionDiscountRule(rule)
    raise TypeError(f"Unsupported discount rule: {rule!r}")
