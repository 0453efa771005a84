"""Wishlist storage for the storefront"""

import uuid
from typing import Optional

from ..services.wishlist import WishlistStore


class WishlistDatabase:
    """In-memory wishlist storage"""

    def __init__(self):
        self.wishlists: dict[str, WishlistStore] = {}

    def create_wishlist(self) -> tuple[str, WishlistStore]:
        """Create a new wishlist"""
        wishlist_id = str(uuid.uuid4())
        store = WishlistStore()
        self.wishlists[wishlist_id] = store
        return wishlist_id, store

    def get_wishlist(self, wishlist_id: str) -> Optional[WishlistStore]:
        """Get a wishlist by ID"""
        return self.wishlists.get(wishlist_id)


# Singleton instance
wishlist_db = WishlistDatabase()
