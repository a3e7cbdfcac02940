"""
Storefront - Main FastAPI Application

Single entry point for the shop and cart API routes.
"""
import sys
from pathlib import Path
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Serverless runtimes start in api/; make the project root importable
_base_path = Path(__file__).parent.parent
if str(_base_path) not in sys.path:
    sys.path.insert(0, str(_base_path))

from storefront.config import load_cors_origins
from storefront.logging import get_logger
from storefront.routers import cart_router, shop_router
from storefront.routers.deps import get_settings, shutdown_services

logger = get_logger(__name__)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    settings = get_settings()
    logger.info(
        "Storefront starting (environment=%s, catalog=%s)",
        settings.environment,
        settings.catalog.base_url,
    )
    yield
    await shutdown_services()


app = FastAPI(
    title="Storefront",
    description="Product catalog proxy with a cookie-session shopping cart",
    version="1.0.0",
    lifespan=lifespan,
)

# Cross-origin frontends must be listed in CORS_ORIGINS to send the session cookie
cors_origins = load_cors_origins()
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

app.include_router(shop_router, prefix="/api")
app.include_router(cart_router, prefix="/api")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "storefront"}
