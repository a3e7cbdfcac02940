"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import AsyncMock

# Set test environment variables
os.environ.setdefault("SESSION_SECRET", "test_session_secret")
os.environ.setdefault("CATALOG_BASE_URL", "https://catalog.test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.pop("CORS_ORIGINS", None)

from storefront.cart.storage import CartStore
from storefront.catalog.models import Product
from storefront.config import CatalogConfig, SessionConfig, Settings


@pytest.fixture
def session_config():
    """Session config with a fixed test secret"""
    return SessionConfig(secrets=("test_session_secret",))


@pytest.fixture
def cart_store(session_config):
    """CartStore signing with the test secret"""
    return CartStore(session_config)


@pytest.fixture
def settings(session_config):
    """Settings pointing at a fake catalog"""
    return Settings(session=session_config, catalog=CatalogConfig(base_url="https://catalog.test"))


@pytest.fixture
def sample_product():
    """Sample catalog product (dummyjson shape)"""
    return {
        "id": 1,
        "title": "Essence Mascara Lash Princess",
        "description": "Popular mascara known for its volumizing effects.",
        "category": "beauty",
        "price": 9.99,
        "rating": 4.94,
        "stock": 5,
        "brand": "Essence",
        "thumbnail": "https://cdn.catalog.test/products/1/thumbnail.png",
        "tags": ["beauty", "mascara"],
    }


@pytest.fixture
def sample_products():
    """Small mixed catalog for listing tests"""
    return [
        Product(id=1, title="Mascara", price=9.99, category="beauty", rating=4.9, brand="Essence", stock=5),
        Product(id=2, title="eyeshadow palette", price=19.99, category="beauty", rating=3.3, brand=None, stock=44),
        Product(id=3, title="Calvin Klein CK One", price=49.99, category="fragrances", rating=4.8, brand="Calvin Klein", stock=17),
        Product(id=4, title="Annibale Colombo Bed", price=1899.99, category="furniture", rating=4.1, brand="Annibale Colombo", stock=47),
        Product(id=5, title="Apple", price=1.99, category="groceries", rating=4.2, stock=9),
    ]


@pytest.fixture
def mock_catalog(sample_product):
    """Mock CatalogClient"""
    catalog = AsyncMock()
    catalog.get_product = AsyncMock(return_value=Product.model_validate(sample_product))
    return catalog
