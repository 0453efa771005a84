"""Cart API routes for the storefront"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..core.config import settings
from ..core.errors import CouponError
from ..models.cart import (
    AddToCartRequest,
    ApplyCouponRequest,
    CartLineView,
    CartResponse,
    DetailedCartItem,
    LineKey,
    OrderTotals,
    UpdateCartItemRequest,
)
from ..database.carts import CartSession, cart_db
from ..database.products import product_db
from ..services.coupons import coupon_book
from ..services.pricing import calculate_totals, materialize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def price_items(items: list[DetailedCartItem], coupon_code: Optional[str] = None) -> OrderTotals:
    """Totals for detailed items using configured shipping and the coupon book"""
    return calculate_totals(
        items,
        flat_shipping_fee=settings.flat_shipping_fee,
        coupon_code=coupon_code,
        apply_coupon=coupon_book.apply,
        currency=settings.currency,
    )


def build_cart_response(session: CartSession, message: Optional[str] = None) -> CartResponse:
    """Materialize the cart and price it with its applied coupon"""
    items = materialize(session.store.lines, product_db.get_product)

    try:
        totals = price_items(items, session.coupon_code)
    except CouponError as e:
        # The cart changed since the coupon was applied
        logger.warning(f"Dropping coupon from cart {session.cart_id}: {e.reason}")
        cart_db.remove_coupon(session.cart_id)
        totals = price_items(items)
        message = f"Coupon removed: {e.reason}"

    return CartResponse(
        cart_id=session.cart_id,
        lines=[CartLineView.from_line(line) for line in session.store.lines],
        items=items,
        total_items=session.store.total_items,
        totals=totals,
        message=message,
    )


def get_session_or_404(cart_id: str) -> CartSession:
    session = cart_db.get_cart(cart_id)
    if not session:
        raise HTTPException(status_code=404, detail="Cart not found")
    return session


@router.post("", response_model=CartResponse)
async def create_cart():
    """Create a new shopping cart"""
    session = cart_db.create_cart()
    return build_cart_response(session, message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str):
    """Get cart by ID with detailed items and totals"""
    session = get_session_or_404(cart_id)
    return build_cart_response(session)


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(cart_id: str, request: AddToCartRequest):
    """Add an item to the cart"""
    session = get_session_or_404(cart_id)

    product = product_db.get_product(request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")

    if request.size and product.sizes and request.size not in product.sizes:
        raise HTTPException(
            status_code=400,
            detail=f"Size {request.size} not available. Available: {', '.join(product.sizes)}",
        )
    if request.color and product.colors and request.color not in product.colors:
        raise HTTPException(
            status_code=400,
            detail=f"Color {request.color} not available. Available: {', '.join(product.colors)}",
        )

    with cart_db.lock:
        session.store.add_line(
            request.product_id,
            size=request.size,
            color=request.color,
            quantity=request.quantity,
        )

    logger.info(
        f"Cart {cart_id}: added {request.quantity}x {product.id} "
        f"(size={request.size}, color={request.color})"
    )
    return build_cart_response(
        session,
        message=f"Added {request.quantity}x {product.name} to cart",
    )


@router.put("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def update_cart_item(cart_id: str, product_id: str, request: UpdateCartItemRequest):
    """Replace a line's quantity; zero or less removes the line"""
    session = get_session_or_404(cart_id)

    with cart_db.lock:
        if session.store.state.find(LineKey(product_id, request.size, request.color)) is None:
            raise HTTPException(status_code=404, detail="Item not in cart")

        session.store.set_line_quantity(
            product_id,
            request.quantity,
            size=request.size,
            color=request.color,
        )

    logger.info(f"Cart {cart_id}: set {product_id} quantity to {request.quantity}")
    return build_cart_response(session, message="Cart updated")


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    cart_id: str,
    product_id: str,
    size: Optional[str] = None,
    color: Optional[str] = None,
):
    """Remove a line from the cart; removing an absent line is a no-op"""
    session = get_session_or_404(cart_id)

    with cart_db.lock:
        session.store.remove_line(product_id, size=size, color=color)

    logger.info(f"Cart {cart_id}: removed {product_id} (size={size}, color={color})")
    return build_cart_response(session, message="Item removed")


@router.delete("/{cart_id}", response_model=CartResponse)
async def clear_cart(cart_id: str):
    """Clear all items from cart"""
    session = get_session_or_404(cart_id)

    with cart_db.lock:
        session.store.clear()

    logger.info(f"Cart {cart_id}: cleared")
    return build_cart_response(session, message="Cart cleared")


@router.post("/{cart_id}/coupon", response_model=CartResponse)
async def apply_coupon(cart_id: str, request: ApplyCouponRequest):
    """Apply a promotional code to the cart"""
    session = get_session_or_404(cart_id)

    items = materialize(session.store.lines, product_db.get_product)
    try:
        price_items(items, request.code)
    except CouponError as e:
        logger.warning(f"Cart {cart_id}: {e}")
        raise HTTPException(status_code=400, detail=e.reason)

    cart_db.apply_coupon(cart_id, request.code)
    return build_cart_response(session, message=f"Coupon {session.coupon_code} applied")


@router.delete("/{cart_id}/coupon", response_model=CartResponse)
async def remove_coupon(cart_id: str):
    """Remove the cart's promotional code"""
    session = get_session_or_404(cart_id)
    cart_db.remove_coupon(cart_id)
    return build_cart_response(session, message="Coupon removed")
