"""Checkout API routes for the storefront"""

import logging

from fastapi import APIRouter, HTTPException, Depends, Query

from ..core.errors import CouponError, OrderError
from ..models.checkout import CheckoutRequest, CheckoutResponse, Order, UpdateOrderStatusRequest
from ..models.cart import format_amount
from ..database.carts import cart_db
from ..database.orders import order_db
from ..database.products import product_db
from ..security.auth import AuthContext, require_auth
from ..services.pricing import materialize
from .cart import price_items

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


def get_order_or_404(order_id: str) -> Order:
    order = order_db.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    auth: AuthContext = Depends(require_auth),
):
    """
    Place an order for a cart.

    The order is recorded with the final totals before the cart is
    cleared. Address and payment fields are taken as given.
    """
    session = cart_db.get_cart(request.cart_id)
    if not session:
        raise HTTPException(status_code=404, detail="Cart not found")

    with cart_db.lock:
        items = materialize(session.store.lines, product_db.get_product)
        if not items:
            raise HTTPException(status_code=400, detail="Cart is empty")

        coupon_code = request.coupon_code or session.coupon_code
        if coupon_code:
            coupon_code = coupon_code.strip().upper()
        try:
            totals = price_items(items, coupon_code)
        except CouponError as e:
            logger.warning(f"Checkout for cart {request.cart_id} rejected: {e}")
            raise HTTPException(status_code=400, detail=e.reason)

        order = order_db.create_order(
            items=items,
            totals=totals,
            shipping_address=request.shipping_address,
            payment_method=request.payment_method,
            coupon_code=totals.coupon_code,
        )

        # Clear the cart only once the order exists
        session.store.clear()
        cart_db.remove_coupon(request.cart_id)

    logger.info(
        f"Order {order.order_id} created: {format_amount(totals.grand_total)} "
        f"{totals.currency} for {order.total_items} items via {request.payment_method.value}"
    )

    return CheckoutResponse(
        success=True,
        order=order,
    )


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(
    order_id: str,
    auth: AuthContext = Depends(require_auth),
):
    """Get order details"""
    return get_order_or_404(order_id)


@router.get("/orders", response_model=list[Order])
async def list_orders(
    limit: int = Query(50, ge=1, le=100),
    auth: AuthContext = Depends(require_auth),
):
    """List recent orders"""
    return order_db.list_orders(limit=limit)


@router.patch("/orders/{order_id}/status", response_model=Order)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    auth: AuthContext = Depends(require_auth),
):
    """Move an order through its lifecycle, optionally recording tracking"""
    get_order_or_404(order_id)

    try:
        order = order_db.update_status(order_id, request.status, request.tracking_number)
    except OrderError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=e.reason)

    logger.info(f"Order {order_id} status set to {order.status.value}")
    return order


@router.patch("/orders/{order_id}/cancel", response_model=Order)
async def cancel_order(
    order_id: str,
    auth: AuthContext = Depends(require_auth),
):
    """Cancel an order that has not been processed yet"""
    get_order_or_404(order_id)

    try:
        order = order_db.cancel_order(order_id)
    except OrderError as e:
        logger.warning(str(e))
        raise HTTPException(status_code=400, detail=e.reason)

    logger.info(f"Order {order_id} cancelled")
    return order
