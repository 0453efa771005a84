"""Order storage for the storefront"""

import uuid
from datetime import datetime, timedelta
from typing import Optional

from ..core.errors import OrderError
from ..models.cart import DetailedCartItem, OrderTotals
from ..models.checkout import Order, OrderItem, OrderStatus, PaymentMethod, ShippingAddress

DELIVERY_DAYS = 7
CANCEL_WINDOW = timedelta(hours=1)

# Orders are confirmed at checkout, so a confirmed order is still unprocessed
CANCELLABLE_STATUSES = {OrderStatus.PENDING, OrderStatus.CONFIRMED}
FINAL_STATUSES = {OrderStatus.CANCELLED, OrderStatus.REFUNDED}


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def create_order(
        self,
        items: list[DetailedCartItem],
        totals: OrderTotals,
        shipping_address: ShippingAddress,
        payment_method: PaymentMethod,
        coupon_code: Optional[str] = None,
    ) -> Order:
        """Create an order from materialized cart items"""
        now = datetime.utcnow()

        order_items = [
            OrderItem(
                product_id=item.id,
                product_name=item.name,
                category=item.category,
                vendor_id=item.vendor_id,
                size=item.size,
                color=item.color,
                quantity=item.quantity,
                unit_price=item.price,
                total_price=item.line_total,
            )
            for item in items
        ]

        order = Order(
            order_id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            status=OrderStatus.CONFIRMED,
            items=order_items,
            totals=totals,
            shipping_address=shipping_address,
            payment_method=payment_method,
            coupon_code=coupon_code,
            created_at=now,
            updated_at=now,
            estimated_delivery=now + timedelta(days=DELIVERY_DAYS),
        )

        self.orders[order.order_id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def update_status(
        self,
        order_id: str,
        status: OrderStatus,
        tracking_number: Optional[str] = None,
    ) -> Optional[Order]:
        """
        Move an order to a new status.

        Cancelled and refunded orders are final; changing them raises
        OrderError.
        """
        order = self.get_order(order_id)
        if not order:
            return None

        if order.status in FINAL_STATUSES and status != order.status:
            raise OrderError(order_id, f"order is already {order.status.value}")

        order.status = status
        if tracking_number:
            order.tracking_number = tracking_number
        order.updated_at = datetime.utcnow()
        return order

    def cancel_order(self, order_id: str, now: Optional[datetime] = None) -> Optional[Order]:
        """Cancel an unprocessed order within CANCEL_WINDOW of placing it"""
        order = self.get_order(order_id)
        if not order:
            return None

        now = now or datetime.utcnow()
        if now - order.created_at > CANCEL_WINDOW:
            raise OrderError(order_id, "order cannot be cancelled after 1 hour")
        if order.status not in CANCELLABLE_STATUSES:
            raise OrderError(order_id, f"order is already {order.status.value}")

        order.status = OrderStatus.CANCELLED
        order.updated_at = now
        return order

    def list_orders(self, limit: int = 50) -> list[Order]:
        """List recent orders"""
        orders = list(self.orders.values())
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]


# Singleton instance
order_db = OrderDatabase()
