"""HTTP routers mounted under /api."""
from .cart import router as cart_router
from .shop import router as shop_router

__all__ = ["cart_router", "shop_router"]
