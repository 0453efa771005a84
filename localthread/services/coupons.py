"""Promotional codes"""

import logging
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ..core.errors import CouponError

logger = logging.getLogger(__name__)


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class Coupon(BaseModel):
    """Discount coupon"""
    code: str
    description: str = ""
    discount_type: DiscountType
    value: Decimal = Field(gt=0)
    min_order_amount: Decimal = Decimal("0")
    max_discount: Optional[Decimal] = None  # cap for percentage coupons
    is_active: bool = True
    valid_until: Optional[datetime] = None

    def validate_for(self, order_amount: Decimal, now: Optional[datetime] = None) -> None:
        """Raise CouponError if the coupon cannot be used for this amount"""
        now = now or datetime.utcnow()

        if not self.is_active:
            raise CouponError(self.code, "coupon is not active")
        if self.valid_until and now > self.valid_until:
            raise CouponError(self.code, "coupon has expired")
        if order_amount <= 0:
            raise CouponError(self.code, "cart is empty")
        if order_amount < self.min_order_amount:
            raise CouponError(self.code, f"minimum order amount is {self.min_order_amount}")

    def calculate_discount(self, order_amount: Decimal) -> Decimal:
        """Discount for an order amount"""
        if self.discount_type == DiscountType.PERCENTAGE:
            discount = order_amount * self.value / Decimal("100")
            if self.max_discount is not None:
                discount = min(discount, self.max_discount)
            return discount
        return min(self.value, order_amount)


class CouponBook:
    """In-memory coupon table; codes are case-insensitive"""

    def __init__(self, coupons: Optional[list[Coupon]] = None):
        self.coupons: dict[str, Coupon] = {}
        for coupon in coupons or []:
            self.add(coupon)

    def add(self, coupon: Coupon) -> None:
        self.coupons[coupon.code.upper()] = coupon

    def get(self, code: str) -> Optional[Coupon]:
        return self.coupons.get(code.strip().upper())

    def apply(self, code: str, subtotal: Decimal) -> Decimal:
        """
        Discount that code gives on subtotal.

        Raises:
            CouponError: unknown, inactive, expired, or minimum not met
        """
        coupon = self.get(code)
        if coupon is None:
            raise CouponError(code, "unknown coupon code")

        coupon.validate_for(subtotal)
        discount = coupon.calculate_discount(subtotal)
        logger.info(f"Coupon {coupon.code} applied: {discount} off {subtotal}")
        return discount

    __call__ = apply


DEFAULT_COUPONS = [
    Coupon(
        code="WELCOME10",
        description="10% off your first order, up to 200",
        discount_type=DiscountType.PERCENTAGE,
        value=Decimal("10"),
        max_discount=Decimal("200"),
    ),
    Coupon(
        code="FLAT100",
        description="100 off orders of 500 or more",
        discount_type=DiscountType.FIXED,
        value=Decimal("100"),
        min_order_amount=Decimal("500"),
    ),
]


# Singleton instance
coupon_book = CouponBook(DEFAULT_COUPONS)
