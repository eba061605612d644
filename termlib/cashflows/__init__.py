"""Cash flow contracts."""

from .base import CashFlow, Coupon, CouponFields

__all__ = ["CashFlow", "Coupon", "CouponFields"]
