"""Checkout flow driving the cart and the storefront API"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..models.order import CustomerInfo, Order
from ..models.product import Product
from .api import StorefrontClient, StorefrontClientError
from .cart import CartManager

logger = logging.getLogger(__name__)

EMPTY_CART_MESSAGE = "Your cart is empty! Please add items before placing an order."
MISSING_INFO_MESSAGE = "Please fill in all required customer information fields."
DEFAULT_SUCCESS_MESSAGE = "Order placed successfully! Thank you for your purchase."


@dataclass
class CheckoutResult:
    """Outcome of one order submission"""
    success: bool
    message: str
    order: Optional[Order] = None


class CheckoutSession:
    """
    One shopper's session: a cart plus the client used to load the
    catalog and submit orders.

    Failed submissions are final. Nothing is retried; the caller can
    submit again.
    """

    def __init__(self, client: StorefrontClient, cart: Optional[CartManager] = None):
        self.client = client
        self.cart = cart or CartManager()

    async def load_products(self) -> list[Product]:
        """Fetch the catalog and use it as the cart's stock snapshot"""
        products = await self.client.get_products()
        self.cart.load_catalog(products)
        logger.info(f"Loaded {len(products)} products")
        return products

    async def submit_order(self, customer_info: CustomerInfo) -> CheckoutResult:
        """Submit the current cart. The cart is cleared only on success."""
        if self.cart.is_empty:
            return CheckoutResult(success=False, message=EMPTY_CART_MESSAGE)
        if customer_info.missing_fields():
            return CheckoutResult(success=False, message=MISSING_INFO_MESSAGE)

        try:
            message, order = await self.client.place_order(
                cart_items=self.cart.to_order_items(),
                customer_info=customer_info.model_dump(),
            )
        except StorefrontClientError as e:
            logger.warning(f"Order submission failed: {e.message}")
            return CheckoutResult(success=False, message=e.message)

        self.cart.clear()
        logger.info(f"Order {order.order_id} confirmed")
        return CheckoutResult(
            success=True,
            message=message or DEFAULT_SUCCESS_MESSAGE,
            order=order,
        )
