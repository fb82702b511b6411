"""Pytest configuration for storefront tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.database.orders import OrderDatabase
from storefront.database.products import ProductDatabase
from storefront.dependencies import get_order_db, get_product_db
from storefront.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def product_db():
    """Fresh catalog seeded with the demo products"""
    return ProductDatabase()


@pytest.fixture
def order_db():
    return OrderDatabase()


@pytest.fixture
def storefront_app(product_db, order_db):
    """The app wired to per-test stores"""
    app.dependency_overrides[get_product_db] = lambda: product_db
    app.dependency_overrides[get_order_db] = lambda: order_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(storefront_app):
    return TestClient(storefront_app)


@pytest.fixture
def customer_info():
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "address": "12 Analytical Way",
        "phone": "555-0100",
    }
