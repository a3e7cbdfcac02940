"""
Storefront Core Package

- config: environment-driven settings
- cart: cookie-session cart store and cart operations
- catalog: external product catalog client and listing helpers
- routers: FastAPI routers mounted by api/index.py

Note: Imports are lazy so that importing a submodule does not pull in FastAPI.
"""

__all__ = [
    "CartStore",
    "CatalogClient",
    "load_settings",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "CartStore":
        from storefront.cart.storage import CartStore
        return CartStore
    elif name == "CatalogClient":
        from storefront.catalog.client import CatalogClient
        return CatalogClient
    elif name == "load_settings":
        from storefront.config import load_settings
        return load_settings
    raise AttributeError(f"module 'storefront' has no attribute '{name}'")
