# Storefront services

from .cart import CartStore, AddLine, RemoveLine, SetLineQuantity, ClearCart, reduce
from .pricing import materialize, calculate_totals
from .coupons import Coupon, CouponBook, DiscountType, coupon_book
from .wishlist import WishlistStore

__all__ = [
    "CartStore",
    "AddLine",
    "RemoveLine",
    "SetLineQuantity",
    "ClearCart",
    "reduce",
    "materialize",
    "calculate_totals",
    "Coupon",
    "CouponBook",
    "DiscountType",
    "coupon_book",
    "WishlistStore",
]
