# Storefront Models

from .product import Product, ProductFilter, ProductSearchResponse, SortOption
from .cart import (
    LineKey,
    CartLine,
    CartState,
    CartLineView,
    DetailedCartItem,
    OrderTotals,
    AddToCartRequest,
    UpdateCartItemRequest,
    ApplyCouponRequest,
    CartResponse,
    format_amount,
)
from .checkout import (
    Order,
    OrderItem,
    OrderStatus,
    CheckoutRequest,
    CheckoutResponse,
    UpdateOrderStatusRequest,
    ShippingAddress,
    PaymentMethod,
)
from .wishlist import WishlistResponse

__all__ = [
    "Product",
    "ProductFilter",
    "ProductSearchResponse",
    "SortOption",
    "LineKey",
    "CartLine",
    "CartState",
    "CartLineView",
    "DetailedCartItem",
    "OrderTotals",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "ApplyCouponRequest",
    "CartResponse",
    "format_amount",
    "Order",
    "OrderItem",
    "OrderStatus",
    "CheckoutRequest",
    "CheckoutResponse",
    "UpdateOrderStatusRequest",
    "ShippingAddress",
    "PaymentMethod",
    "WishlistResponse",
]
