# Storefront Models

from .product import Product
from .order import (
    CustomerInfo,
    ErrorResponse,
    Order,
    OrderItem,
    OrderLineRequest,
    OrderRequest,
    OrderResponse,
    OrderStatus,
)

__all__ = [
    "Product",
    "CustomerInfo",
    "ErrorResponse",
    "Order",
    "OrderItem",
    "OrderLineRequest",
    "OrderRequest",
    "OrderResponse",
    "OrderStatus",
]
