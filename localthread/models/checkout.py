"""Checkout models for the storefront"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .cart import OrderTotals


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentMethod(str, Enum):
    CARD = "card"
    UPI = "upi"
    COD = "cod"


class ShippingAddress(BaseModel):
    """Shipping address for order"""
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: str
    country: str = "India"


class CheckoutRequest(BaseModel):
    """Request to place an order for a cart"""
    cart_id: str
    shipping_address: ShippingAddress
    payment_method: PaymentMethod = PaymentMethod.CARD
    coupon_code: Optional[str] = None


class OrderItem(BaseModel):
    """Product snapshot at time of order"""
    product_id: str
    product_name: str
    category: str
    vendor_id: str
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: int = Field(gt=0)
    unit_price: Decimal
    total_price: Decimal


class Order(BaseModel):
    """Placed order"""
    order_id: str
    status: OrderStatus
    items: list[OrderItem]
    totals: OrderTotals
    shipping_address: ShippingAddress
    payment_method: PaymentMethod
    coupon_code: Optional[str] = None
    tracking_number: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    estimated_delivery: datetime

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)


class UpdateOrderStatusRequest(BaseModel):
    """Move an order to another lifecycle status"""
    status: OrderStatus
    tracking_number: Optional[str] = None


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    error_message: Optional[str] = None
