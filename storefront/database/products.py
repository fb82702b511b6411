"""In-memory product catalog"""

import logging
from typing import Optional

from ..models.product import Product

logger = logging.getLogger(__name__)

# Seed catalog, copied into every ProductDatabase instance
PRODUCTS: list[Product] = [
    Product(
        id="prod1",
        name="Wireless Headphones",
        description="High-quality sound with noise cancellation.",
        price=59.99,
        image_url="https://placehold.co/300x200/AEC6CF/333333?text=Headphones",
        category="Electronics",
        stock=10,
    ),
    Product(
        id="prod2",
        name="Smartwatch",
        description="Track your fitness and receive notifications.",
        price=129.99,
        image_url="https://placehold.co/300x200/FFD1DC/333333?text=Smartwatch",
        category="Wearables",
        stock=5,
    ),
    Product(
        id="prod3",
        name="Portable Bluetooth Speaker",
        description="Compact design with powerful audio.",
        price=39.99,
        image_url="https://placehold.co/300x200/B3E0FF/333333?text=Speaker",
        category="Audio",
        stock=15,
    ),
    Product(
        id="prod4",
        name="Ergonomic Office Chair",
        description="Comfortable and supportive for long working hours.",
        price=199.99,
        image_url="https://placehold.co/300x200/D0F0C0/333333?text=Chair",
        category="Home Office",
        stock=3,
    ),
    Product(
        id="prod5",
        name="USB-C Hub",
        description="Expand your laptop's connectivity with multiple ports.",
        price=24.99,
        image_url="https://placehold.co/300x200/FAD02E/333333?text=USB+Hub",
        category="Accessories",
        stock=20,
    ),
]


class ProductDatabase:
    """In-memory product catalog, the source of truth for stock levels"""

    def __init__(self, products: Optional[list[Product]] = None):
        seed = PRODUCTS if products is None else products
        # dict keeps seed order for listings
        self.products: dict[str, Product] = {
            p.id: p.model_copy(deep=True) for p in seed
        }

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())

    def update_stock(self, product_id: str, quantity_change: int) -> bool:
        """
        Update product stock.

        Args:
            product_id: Product to update
            quantity_change: Positive to add, negative to remove

        Returns:
            True if successful, False for unknown products or when the
            change would take stock below zero
        """
        product = self.products.get(product_id)
        if not product:
            return False

        new_stock = product.stock + quantity_change
        if new_stock < 0:
            return False

        product.stock = new_stock
        logger.debug(f"Stock for {product_id} is now {new_stock}")
        return True


# Singleton instance
product_db = ProductDatabase()
