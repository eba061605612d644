"""Interest rate conventions and compound-factor inversion."""

from .interest_rate import InterestRate

__all__ = ["InterestRate"]
