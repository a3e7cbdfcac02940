"""Catalog Client - read-only access to the external product API."""
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from storefront.config import CatalogConfig
from storefront.errors import ERROR_PRODUCTS_FETCH_FAILED, FetchError, ProductNotFoundError
from storefront.logging import get_logger
from .models import Product, ProductPage

logger = get_logger(__name__)


class CatalogClient:
    """
    Thin async client for a dummyjson-style catalog.

    No retries and no caching: every call is one GET, and a failure is
    reported to the caller as FetchError (or ProductNotFoundError).
    """

    def __init__(self, config: CatalogConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazy creation of the shared httpx client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=httpx.Timeout(self.config.timeout),
                transport=self._transport,
            )
        return self._http_client

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        client = await self._get_http_client()
        try:
            response = await client.get(path, params=params)
        except httpx.HTTPError as e:
            logger.error("Catalog request %s failed: %s", path, e)
            raise FetchError(ERROR_PRODUCTS_FETCH_FAILED) from e

        if not response.is_success:
            logger.warning("Catalog request %s returned %s", path, response.status_code)
            raise FetchError(ERROR_PRODUCTS_FETCH_FAILED, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise FetchError(ERROR_PRODUCTS_FETCH_FAILED, status_code=response.status_code) from e

    def _parse_page(self, data: Any) -> ProductPage:
        try:
            return ProductPage.model_validate(data)
        except ValidationError as e:
            raise FetchError(ERROR_PRODUCTS_FETCH_FAILED) from e

    async def list_products(self, limit: int, skip: int = 0) -> ProductPage:
        """GET /products?limit=&skip="""
        data = await self._get_json("/products", params={"limit": limit, "skip": skip})
        return self._parse_page(data)

    async def search_products(self, query: str, limit: int, skip: int = 0) -> ProductPage:
        """GET /products/search?q=&limit=&skip="""
        data = await self._get_json("/products/search", params={"q": query, "limit": limit, "skip": skip})
        return self._parse_page(data)

    async def get_product(self, product_id: int) -> Product:
        """
        GET /products/{id}

        Raises:
            ProductNotFoundError: On any non-success answer for this id
            FetchError: If the catalog could not be reached
        """
        try:
            data = await self._get_json(f"/products/{product_id}")
        except FetchError as e:
            if e.status_code is not None:
                raise ProductNotFoundError(product_id, status_code=e.status_code) from e
            raise

        try:
            return Product.model_validate(data)
        except ValidationError as e:
            raise ProductNotFoundError(product_id) from e
