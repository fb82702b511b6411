# Client-side cart and API access

from .api import (
    StorefrontClient,
    StorefrontClientError,
    StorefrontUnavailableError,
    OrderRejectedError,
)
from .cart import (
    CartManager,
    CartLine,
    CartError,
    LineNotFoundError,
    UnknownProductError,
    OutOfStockError,
    StockLimitError,
)
from .checkout import CheckoutSession, CheckoutResult

__all__ = [
    "StorefrontClient",
    "StorefrontClientError",
    "StorefrontUnavailableError",
    "OrderRejectedError",
    "CartManager",
    "CartLine",
    "CartError",
    "LineNotFoundError",
    "UnknownProductError",
    "OutOfStockError",
    "StockLimitError",
    "CheckoutSession",
    "CheckoutResult",
]
