"""
Cart pricing

materialize() joins cart lines with catalog products and calculate_totals()
derives subtotal, shipping, discount and grand total from the result. Both
are pure; amounts stay exact Decimals until format_amount() is applied for
display.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Callable, Iterable, Optional, Union

from ..models.cart import CartLine, DetailedCartItem, OrderTotals, format_amount
from ..models.product import Product

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

ProductLookup = Callable[[str], Optional[Product]]
Catalog = Union[ProductLookup, Mapping[str, Product]]
ApplyCoupon = Callable[[str, Decimal], Decimal]

__all__ = ["materialize", "calculate_totals", "format_amount", "ApplyCoupon", "Catalog"]


def _lookup(catalog: Catalog) -> ProductLookup:
    if isinstance(catalog, Mapping):
        return catalog.get
    return catalog


def materialize(lines: Iterable[CartLine], catalog: Catalog) -> list[DetailedCartItem]:
    """
    Join cart lines with their products.

    Order is preserved. A line whose product is not in the catalog is left
    out of the result.
    """
    get_product = _lookup(catalog)
    items = []

    for line in lines:
        product = get_product(line.product_id)
        if product is None:
            logger.debug(f"Dropping cart line for unknown product {line.product_id}")
            continue

        items.append(
            DetailedCartItem(
                **product.model_dump(),
                quantity=line.quantity,
                size=line.size,
                color=line.color,
            )
        )

    return items


def calculate_totals(
    items: Iterable[DetailedCartItem],
    flat_shipping_fee: Decimal,
    coupon_code: Optional[str] = None,
    apply_coupon: Optional[ApplyCoupon] = None,
    currency: str = "INR",
) -> OrderTotals:
    """
    Compute order totals for detailed cart items.

    The discount comes from apply_coupon(code, subtotal) when both a code and
    the capability are given; CouponError propagates to the caller. The
    discount never exceeds subtotal plus shipping, so the grand total is
    never negative.
    """
    subtotal = ZERO
    for item in items:
        subtotal += item.price * item.quantity

    shipping_fee = Decimal(flat_shipping_fee) if subtotal > 0 else ZERO

    discount = ZERO
    applied_code = None
    if coupon_code and apply_coupon is not None:
        discount = Decimal(apply_coupon(coupon_code, subtotal))
        discount = max(ZERO, min(discount, subtotal + shipping_fee))
        applied_code = coupon_code

    return OrderTotals(
        subtotal=subtotal,
        shipping_fee=shipping_fee,
        discount=discount,
        grand_total=subtotal + shipping_fee - discount,
        currency=currency,
        coupon_code=applied_code,
    )
