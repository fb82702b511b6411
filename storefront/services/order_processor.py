"""
Order Processing

Validates a submitted cart against the catalog, reserves stock and
records the resulting order.

Stock is only deducted once every line has been validated, so a
rejected order never leaves the catalog partially updated.
"""

import logging
from typing import Optional

from ..database.orders import OrderDatabase
from ..database.products import ProductDatabase
from ..models.order import CustomerInfo, Order, OrderItem, OrderLineRequest

logger = logging.getLogger(__name__)


class OrderError(Exception):
    """Base class for order rejections, carries the HTTP status to report"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyCartError(OrderError):
    def __init__(self):
        super().__init__("Cart is empty. Cannot process order.")


class IncompleteCustomerInfoError(OrderError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing customer information: {', '.join(missing)}.")


class ProductNotFoundError(OrderError):
    status_code = 404

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found.")


class InsufficientStockError(OrderError):
    def __init__(self, product_name: str, available: int):
        self.product_name = product_name
        self.available = available
        super().__init__(f"Not enough stock for {product_name}. Available: {available}.")


class OrderProcessor:
    """Turns carts into orders against a given catalog and order list"""

    def __init__(self, products: ProductDatabase, orders: OrderDatabase):
        self.products = products
        self.orders = orders

    def place_order(
        self,
        cart_items: Optional[list[OrderLineRequest]],
        customer_info: Optional[CustomerInfo],
    ) -> Order:
        """
        Place an order.

        Checks run in a fixed order and the first failure wins:
        empty cart, unknown products (line by line), stock (line by line),
        then incomplete customer info. Lines naming the same product share
        its stock.

        Raises:
            OrderError: a subclass describing why the order was rejected
        """
        if not cart_items:
            raise EmptyCartError()

        products = []
        for line in cart_items:
            product = self.products.get_product(line.id)
            if not product:
                raise ProductNotFoundError(line.id)
            products.append(product)

        claimed: dict[str, int] = {}
        for line, product in zip(cart_items, products):
            available = product.stock - claimed.get(product.id, 0)
            if available < line.quantity:
                raise InsufficientStockError(product.name, available)
            claimed[product.id] = claimed.get(product.id, 0) + line.quantity

        customer_info = customer_info or CustomerInfo()
        missing = customer_info.missing_fields()
        if missing:
            raise IncompleteCustomerInfoError(missing)

        total_amount = 0.0
        order_items = []
        for line, product in zip(cart_items, products):
            self.products.update_stock(product.id, -line.quantity)
            total_amount += product.price * line.quantity
            order_items.append(
                OrderItem(
                    product_id=product.id,
                    name=product.name,
                    quantity=line.quantity,
                    price=product.price,
                )
            )

        order = self.orders.create_order(
            customer_info=customer_info,
            items=order_items,
            total_amount=round(total_amount, 2),
        )

        logger.info(
            f"Order {order.order_id} placed: {len(order_items)} line(s), "
            f"${order.total_amount:.2f}"
        )
        return order
