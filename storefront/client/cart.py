"""
Client-side shopping cart.

Mirrors the catalog snapshot fetched at load time and keeps the lines the
shopper intends to buy. Stock limits are checked against that snapshot
only; the server re-checks everything when the order is submitted.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from ..models.product import Product

logger = logging.getLogger(__name__)


class CartError(Exception):
    """Base class for refused cart mutations"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownProductError(CartError):
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} is not in the catalog.")


class LineNotFoundError(CartError):
    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} is not in the cart.")


class OutOfStockError(CartError):
    def __init__(self, product: Product):
        self.product_id = product.id
        super().__init__(f"Sorry, {product.name} is out of stock!")


class StockLimitError(CartError):
    def __init__(self, product: Product):
        self.product_id = product.id
        self.available = product.stock
        super().__init__(f"Cannot add more. Only {product.stock} of {product.name} available.")


@dataclass
class CartLine:
    """Product snapshot plus the requested quantity"""
    id: str
    name: str
    price: float
    image_url: str
    quantity: int = 1

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    @classmethod
    def from_product(cls, product: Product) -> "CartLine":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            image_url=product.image_url,
        )


class CartManager:
    """Local cart backed by a catalog snapshot"""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self.catalog: dict[str, Product] = {}
        self.lines: list[CartLine] = []
        if products is not None:
            self.load_catalog(products)

    def load_catalog(self, products: Iterable[Product]) -> None:
        """Replace the catalog snapshot. Existing lines are kept as they are."""
        self.catalog = {p.id: p for p in products}

    def get_line(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self.lines if line.id == product_id), None)

    def add_product(self, product_id: str) -> CartLine:
        """
        Add one unit of a product.

        A new line starts at quantity 1. An existing line is incremented
        unless that would exceed the snapshot stock, in which case it is
        returned unchanged.

        Raises:
            UnknownProductError: product is not in the snapshot
            OutOfStockError: product has no stock left
        """
        product = self._get_product(product_id)
        if not product.in_stock:
            raise OutOfStockError(product)

        line = self.get_line(product_id)
        if line is None:
            line = CartLine.from_product(product)
            self.lines.append(line)
        elif line.quantity < product.stock:
            line.quantity += 1
        else:
            logger.debug(f"{product.name} already at stock limit ({product.stock})")
        return line

    def remove_line(self, product_id: str) -> None:
        """Remove a product's line; unknown ids are ignored"""
        self.lines = [line for line in self.lines if line.id != product_id]

    def set_quantity(self, product_id: str, quantity: int) -> Optional[CartLine]:
        """
        Set a line's quantity.

        Quantities below 1 remove the line and return None; that is
        the only case that returns None.

        Raises:
            StockLimitError: quantity exceeds the snapshot stock
            LineNotFoundError: the product has no line in the cart
        """
        if quantity < 1:
            self.remove_line(product_id)
            return None

        product = self.catalog.get(product_id)
        if product and quantity > product.stock:
            raise StockLimitError(product)

        line = self.get_line(product_id)
        if line is None:
            raise LineNotFoundError(product_id)
        line.quantity = quantity
        return line

    def total(self) -> float:
        """Sum of price x quantity across all lines"""
        return sum(line.line_total for line in self.lines)

    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def clear(self) -> None:
        self.lines = []

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_order_items(self) -> list[dict]:
        """Cart lines in the shape POST /api/order expects"""
        return [
            {
                "id": line.id,
                "name": line.name,
                "price": line.price,
                "imageUrl": line.image_url,
                "quantity": line.quantity,
            }
            for line in self.lines
        ]

    def _get_product(self, product_id: str) -> Product:
        product = self.catalog.get(product_id)
        if product is None:
            raise UnknownProductError(product_id)
        return product
