# API Routes

from .products import router as products_router
from .cart import router as cart_router
from .wishlist import router as wishlist_router
from .checkout import router as checkout_router

__all__ = ["products_router", "cart_router", "wishlist_router", "checkout_router"]
