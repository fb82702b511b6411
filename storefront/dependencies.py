"""FastAPI dependency providers for the in-memory stores"""

from fastapi import Depends

from .database.orders import OrderDatabase, order_db
from .database.products import ProductDatabase, product_db
from .services.order_processor import OrderProcessor


def get_product_db() -> ProductDatabase:
    """Catalog store used by request handlers"""
    return product_db


def get_order_db() -> OrderDatabase:
    """Order list used by request handlers"""
    return order_db


def get_order_processor(
    products: ProductDatabase = Depends(get_product_db),
    orders: OrderDatabase = Depends(get_order_db),
) -> OrderProcessor:
    return OrderProcessor(products, orders)
