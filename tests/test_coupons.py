from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from localthread.core.errors import CouponError
from localthread.services.coupons import Coupon, CouponBook, DiscountType


@pytest.fixture
def book():
    return CouponBook([
        Coupon(
            code="TEN",
            discount_type=DiscountType.PERCENTAGE,
            value=Decimal("10"),
            max_discount=Decimal("15"),
        ),
        Coupon(
            code="FLAT100",
            discount_type=DiscountType.FIXED,
            value=Decimal("100"),
            min_order_amount=Decimal("60"),
        ),
        Coupon(
            code="OLD",
            discount_type=DiscountType.FIXED,
            value=Decimal("5"),
            valid_until=datetime.utcnow() - timedelta(days=1),
        ),
        Coupon(
            code="OFF",
            discount_type=DiscountType.FIXED,
            value=Decimal("5"),
            is_active=False,
        ),
    ])


def test_percentage_discount(book):
    assert book.apply("TEN", Decimal("58")) == Decimal("5.8")


def test_percentage_discount_is_capped(book):
    assert book.apply("TEN", Decimal("500")) == Decimal("15")


def test_fixed_discount_never_exceeds_subtotal(book):
    assert book.apply("FLAT100", Decimal("80")) == Decimal("80")


def test_codes_are_case_insensitive(book):
    assert book.apply(" ten ", Decimal("100")) == Decimal("10")


@pytest.mark.parametrize("code, subtotal, reason", [
    ("NOPE", Decimal("100"), "unknown coupon code"),
    ("OLD", Decimal("100"), "coupon has expired"),
    ("OFF", Decimal("100"), "coupon is not active"),
    ("TEN", Decimal("0"), "cart is empty"),
    ("FLAT100", Decimal("59"), "minimum order amount is 60"),
])
def test_rejections(book, code, subtotal, reason):
    with pytest.raises(CouponError) as exc_info:
        book.apply(code, subtotal)
    assert exc_info.value.reason == reason


def test_book_is_callable_as_capability(book):
    assert book("TEN", Decimal("100")) == Decimal("10")
