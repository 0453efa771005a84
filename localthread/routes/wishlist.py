"""Wishlist API routes for the storefront"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..models.cart import CartResponse
from ..models.wishlist import WishlistResponse
from ..database.carts import cart_db
from ..database.products import product_db
from ..database.wishlists import wishlist_db
from ..services.wishlist import WishlistStore
from .cart import build_cart_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wishlist", tags=["Wishlist"])


def build_wishlist_response(
    wishlist_id: str,
    store: WishlistStore,
    message: Optional[str] = None,
) -> WishlistResponse:
    products = [
        product for product in map(product_db.get_product, store.product_ids)
        if product is not None
    ]
    return WishlistResponse(
        wishlist_id=wishlist_id,
        product_ids=list(store.product_ids),
        products=products,
        total_items=store.total_items,
        message=message,
    )


def get_wishlist_or_404(wishlist_id: str) -> WishlistStore:
    store = wishlist_db.get_wishlist(wishlist_id)
    if store is None:
        raise HTTPException(status_code=404, detail="Wishlist not found")
    return store


def require_product(product_id: str) -> None:
    if not product_db.get_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")


@router.post("", response_model=WishlistResponse)
async def create_wishlist():
    """Create a new wishlist"""
    wishlist_id, store = wishlist_db.create_wishlist()
    return build_wishlist_response(wishlist_id, store, message="Wishlist created")


@router.get("/{wishlist_id}", response_model=WishlistResponse)
async def get_wishlist(wishlist_id: str):
    """Get wishlist by ID"""
    store = get_wishlist_or_404(wishlist_id)
    return build_wishlist_response(wishlist_id, store)


@router.post("/{wishlist_id}/items/{product_id}", response_model=WishlistResponse)
async def add_to_wishlist(wishlist_id: str, product_id: str):
    """Save a product; saving it twice keeps one entry"""
    store = get_wishlist_or_404(wishlist_id)
    require_product(product_id)
    store.add(product_id)
    return build_wishlist_response(wishlist_id, store, message="Added to wishlist")


@router.delete("/{wishlist_id}/items/{product_id}", response_model=WishlistResponse)
async def remove_from_wishlist(wishlist_id: str, product_id: str):
    """Remove a saved product"""
    store = get_wishlist_or_404(wishlist_id)
    store.remove(product_id)
    return build_wishlist_response(wishlist_id, store, message="Removed from wishlist")


@router.post("/{wishlist_id}/items/{product_id}/toggle", response_model=WishlistResponse)
async def toggle_wishlist(wishlist_id: str, product_id: str):
    """Save the product if absent, remove it if present"""
    store = get_wishlist_or_404(wishlist_id)
    require_product(product_id)
    saved = store.toggle(product_id)
    return build_wishlist_response(
        wishlist_id,
        store,
        message="Added to wishlist" if saved else "Removed from wishlist",
    )


@router.delete("/{wishlist_id}", response_model=WishlistResponse)
async def clear_wishlist(wishlist_id: str):
    """Remove every saved product"""
    store = get_wishlist_or_404(wishlist_id)
    store.clear()
    return build_wishlist_response(wishlist_id, store, message="Wishlist cleared")


@router.post("/{wishlist_id}/items/{product_id}/move-to-cart", response_model=CartResponse)
async def move_to_cart(wishlist_id: str, product_id: str, cart_id: str):
    """Add a saved product to a cart as a plain line and unsave it"""
    store = get_wishlist_or_404(wishlist_id)
    session = cart_db.get_cart(cart_id)
    if not session:
        raise HTTPException(status_code=404, detail="Cart not found")
    if not store.contains(product_id):
        raise HTTPException(status_code=404, detail="Item not in wishlist")
    require_product(product_id)

    with cart_db.lock:
        session.store.add_line(product_id)
    store.remove(product_id)

    logger.info(f"Moved {product_id} from wishlist {wishlist_id} to cart {cart_id}")
    return build_cart_response(session, message="Moved to cart")
