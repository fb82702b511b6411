"""Order storage for the storefront"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from ..models.order import CustomerInfo, Order, OrderItem, OrderStatus


class OrderDatabase:
    """In-memory, append-only order storage"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def create_order(
        self,
        customer_info: CustomerInfo,
        items: list[OrderItem],
        total_amount: float,
    ) -> Order:
        """Record a new pending order"""
        order = Order(
            order_id=f"ORD-{uuid.uuid4().hex.upper()}",
            customer_info=customer_info.model_copy(),
            items=items,
            total_amount=total_amount,
            order_date=datetime.now(timezone.utc),
            status=OrderStatus.PENDING,
        )

        self.orders[order.order_id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def list_orders(self, limit: int = 50) -> list[Order]:
        """List recent orders, newest first"""
        # dict keeps insertion order, which is also creation order
        orders = list(reversed(self.orders.values()))
        return orders[:limit]

    def __len__(self) -> int:
        return len(self.orders)


# Singleton instance
order_db = OrderDatabase()
