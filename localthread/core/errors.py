"""Storefront exceptions"""


class LocalThreadError(Exception):
    """Base exception for storefront domain errors"""
    pass


class CouponError(LocalThreadError):
    """A promotional code could not be applied"""

    def __init__(self, code: str, reason: str):
        super().__init__(f"Coupon {code!r} rejected: {reason}")
        self.code = code
        self.reason = reason


class OrderError(LocalThreadError):
    """An order cannot make the requested change"""

    def __init__(self, order_id: str, reason: str):
        super().__init__(f"Order {order_id}: {reason}")
        self.order_id = order_id
        self.reason = reason
