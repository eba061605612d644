"""
Market quotes consumed by term structures.

A curve only needs the current value of a quote and whether that value is
usable; anything richer (tenor, instrument, source) belongs to the caller.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from termlib.errors import InvalidQuoteError


@runtime_checkable
class Quote(Protocol):
    """Scalar market observable with a validity flag."""

    def value(self) -> float:
        ...

    def is_valid(self) -> bool:
        ...


@dataclass
class SimpleQuote:
    """Settable quote; ``None`` marks it as not yet valid."""

    current: Optional[float] = None

    def value(self) -> float:
        if self.current is None:
            raise InvalidQuoteError("invalid SimpleQuote")
        return self.current

    def is_valid(self) -> bool:
        return self.current is not None

    def set_value(self, value: Optional[float]) -> None:
        self.current = None if value is None else float(value)

    def reset(self) -> None:
        self.current = None
