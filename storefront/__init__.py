"""Demo storefront: in-memory catalog API plus a Python cart/checkout client."""

__version__ = "1.0.0"
