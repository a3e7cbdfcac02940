"""
Shop Router

Product listing and detail pages, plus the add-to-cart intent posted from a
product page.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from storefront.cart.service import add_to_cart
from storefront.cart.storage import CartStore
from storefront.catalog.browse import CATEGORIES, FETCH_LIMIT, ProductQuery, apply_query, format_category_name
from storefront.catalog.client import CatalogClient
from storefront.errors import (
    ERROR_CART_UPDATE_FAILED,
    ERROR_PRODUCT_NOT_FOUND,
    ERROR_PRODUCTS_FETCH_FAILED,
    FetchError,
    InvalidCartInput,
    ProductNotFoundError,
)
from storefront.logging import get_logger, sanitize_for_logging
from .deps import get_cart_store, get_catalog_client
from .forms import INTENT_ADD_TO_CART, intent_response

logger = get_logger(__name__)

router = APIRouter(tags=["shop"])


@router.get("/shop")
async def list_shop_products(
    page: int = Query(1),
    search: str = Query(""),
    category: str = Query(""),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    sort: str = Query(""),
    order: str = Query("asc"),
    catalog: CatalogClient = Depends(get_catalog_client),
):
    """Products page: one catalog fetch, then filter/sort/paginate in memory."""
    query = ProductQuery(
        page=page,
        search=search.strip(),
        category=category,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
        order=order,
    )

    try:
        if query.search:
            data = await catalog.search_products(query.search, limit=FETCH_LIMIT)
        else:
            data = await catalog.list_products(limit=FETCH_LIMIT)
    except FetchError as e:
        logger.error("Product listing failed (search=%s): %s", sanitize_for_logging(query.search), e)
        raise HTTPException(status_code=502, detail=ERROR_PRODUCTS_FETCH_FAILED)

    listing = apply_query(data.products, query)
    return {
        "products": [p.model_dump() for p in listing.products],
        "total": data.total,
        "filtered": listing.filtered,
        "page": listing.page,
        "total_pages": listing.total_pages,
        "categories": [{"value": c, "label": format_category_name(c)} for c in CATEGORIES],
    }


@router.get("/shop/{product_id}")
async def get_shop_product(product_id: int, catalog: CatalogClient = Depends(get_catalog_client)):
    """Product detail page."""
    try:
        product = await catalog.get_product(product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    except FetchError as e:
        logger.error("Product %s fetch failed: %s", product_id, e)
        raise HTTPException(status_code=502, detail=ERROR_PRODUCTS_FETCH_FAILED)

    return {"product": product.model_dump()}


@router.post("/shop/{product_id}")
async def product_action(
    product_id: int,
    request: Request,
    store: CartStore = Depends(get_cart_store),
):
    """Form post from the product page. Only intent=add-to-cart is handled."""
    form = await request.form()
    intent = form.get("intent")

    if intent != INTENT_ADD_TO_CART:
        return intent_response(False)

    try:
        update = add_to_cart(store, request.headers.get("cookie"), product_id, 1)
    except InvalidCartInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Failed to add product %s to cart: %s", product_id, e, exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CART_UPDATE_FAILED)

    return intent_response(True, update.cookie)
