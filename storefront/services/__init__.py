# Service modules

from .order_processor import (
    OrderProcessor,
    OrderError,
    EmptyCartError,
    IncompleteCustomerInfoError,
    ProductNotFoundError,
    InsufficientStockError,
)

__all__ = [
    "OrderProcessor",
    "OrderError",
    "EmptyCartError",
    "IncompleteCustomerInfoError",
    "ProductNotFoundError",
    "InsufficientStockError",
]
