"""Catalog package: external product API client and listing helpers."""
from .client import CatalogClient
from .models import Product, ProductPage

__all__ = [
    "CatalogClient",
    "Product",
    "ProductPage",
]
