"""
Shared Dependencies for Routers

Lazy-loaded singletons built from one Settings value. Tests swap them out
with app.dependency_overrides.
"""
from typing import Optional

from storefront.cart.storage import CartStore
from storefront.catalog.client import CatalogClient
from storefront.config import Settings, load_settings

_settings: Optional[Settings] = None
_cart_store: Optional[CartStore] = None
_catalog_client: Optional[CatalogClient] = None


def get_settings() -> Settings:
    """Get or load Settings from the environment."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def get_cart_store() -> CartStore:
    """Get or create the CartStore for the configured session cookie."""
    global _cart_store
    if _cart_store is None:
        _cart_store = CartStore(get_settings().session)
    return _cart_store


def get_catalog_client() -> CatalogClient:
    """Get or create the CatalogClient (its httpx client is opened on first request)."""
    global _catalog_client
    if _catalog_client is None:
        _catalog_client = CatalogClient(get_settings().catalog)
    return _catalog_client


# ==================== SHUTDOWN HELPERS ====================
async def shutdown_services():
    """Close the catalog http client and forget cached singletons."""
    global _catalog_client, _cart_store, _settings
    if _catalog_client is not None:
        try:
            await _catalog_client.aclose()
        finally:
            _catalog_client = None
    _cart_store = None
    _settings = None
