# Database modules

from .products import product_db, ProductDatabase, PRODUCTS
from .orders import order_db, OrderDatabase

__all__ = [
    "product_db",
    "ProductDatabase",
    "PRODUCTS",
    "order_db",
    "OrderDatabase",
]
