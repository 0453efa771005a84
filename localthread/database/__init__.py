# Database modules

from .products import product_db, ProductDatabase
from .carts import cart_db, CartDatabase, CartSession
from .orders import order_db, OrderDatabase
from .wishlists import wishlist_db, WishlistDatabase

__all__ = [
    "product_db",
    "ProductDatabase",
    "cart_db",
    "CartDatabase",
    "CartSession",
    "order_db",
    "OrderDatabase",
    "wishlist_db",
    "WishlistDatabase",
]
