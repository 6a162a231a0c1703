"""Order storage"""

import threading
from datetime import datetime
from typing import Optional

from ..models.checkout import Order, OrderStatus


class OrderDatabase:
    """In-memory order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}
        self._lock = threading.Lock()

    def save_order(self, order: Order) -> Order:
        """Store a new order"""
        with self._lock:
            self.orders[order.id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def update_status(
        self,
        order_id: str,
        status: OrderStatus,
        now: datetime,
        expected: Optional[OrderStatus] = None,
    ) -> Optional[Order]:
        """
        Update order status.

        Args:
            order_id: Order to update
            status: New status
            now: Timestamp for updated_at
            expected: If given, only update when the current status matches

        Returns:
            The updated order, or None if the order doesn't exist or its
            status didn't match `expected`
        """
        with self._lock:
            order = self.orders.get(order_id)
            if not order:
                return None
            if expected is not None and order.status != expected:
                return None

            updated = order.model_copy(
                update={"status": status, "updated_at": now}
            )
            self.orders[order_id] = updated
            return updated

    def list_orders(self, cart_id: Optional[str] = None, limit: int = 50) -> list[Order]:
        """List recent orders, optionally for a single cart"""
        orders = list(self.orders.values())
        if cart_id is not None:
            orders = [o for o in orders if o.cart_id == cart_id]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]
