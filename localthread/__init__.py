"""LocalThread storefront: cart, wishlist, pricing and checkout API"""

__version__ = "1.0.0"
