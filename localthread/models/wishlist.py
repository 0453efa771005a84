"""Wishlist models for the storefront"""

from typing import Optional

from pydantic import BaseModel

from .product import Product


class WishlistResponse(BaseModel):
    """Wishlist API response"""
    wishlist_id: str
    product_ids: list[str]
    products: list[Product]
    total_items: int
    message: Optional[str] = None
