"""Cart storage for the storefront"""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..models.cart import CartState
from ..services.cart import CartStore

logger = logging.getLogger(__name__)


@dataclass
class CartSession:
    """One shopper's cart plus the coupon they applied"""
    cart_id: str
    created_at: datetime
    updated_at: datetime
    store: CartStore = field(default_factory=CartStore)
    coupon_code: Optional[str] = None

    def __post_init__(self):
        self.store.subscribe(self._touch)

    def _touch(self, state: CartState) -> None:
        self.updated_at = datetime.utcnow()
        if state.is_empty():
            self.coupon_code = None


class CartDatabase:
    """
    In-memory cart storage.

    All mutation of a session should happen inside `with cart_db.lock:` so
    that one writer at a time touches a cart.
    """

    def __init__(self):
        self.carts: dict[str, CartSession] = {}
        self.lock = threading.RLock()

    def create_cart(self) -> CartSession:
        """Create a new cart"""
        now = datetime.utcnow()
        session = CartSession(
            cart_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
        )
        with self.lock:
            self.carts[session.cart_id] = session
        logger.info(f"Cart created: {session.cart_id}")
        return session

    def get_cart(self, cart_id: str) -> Optional[CartSession]:
        """Get a cart by ID"""
        return self.carts.get(cart_id)

    def apply_coupon(self, cart_id: str, code: str) -> Optional[CartSession]:
        """Remember a coupon code on the cart"""
        session = self.get_cart(cart_id)
        if not session:
            return None

        with self.lock:
            session.coupon_code = code.strip().upper()
            session.updated_at = datetime.utcnow()
        return session

    def remove_coupon(self, cart_id: str) -> Optional[CartSession]:
        """Forget the cart's coupon code"""
        session = self.get_cart(cart_id)
        if not session:
            return None

        with self.lock:
            session.coupon_code = None
            session.updated_at = datetime.utcnow()
        return session


# Singleton instance
cart_db = CartDatabase()
