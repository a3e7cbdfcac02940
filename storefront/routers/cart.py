"""
Cart Router

Cart page data, cart badge count, and the quantity/remove intents posted
from the cart page. Every mutation answers with the new session Set-Cookie.
"""
from fastapi import APIRouter, Depends, HTTPException, Request

from storefront.cart.service import (
    get_cart_items,
    get_total_quantity,
    remove_from_cart,
    step_cart_quantity,
    update_cart_quantity,
)
from storefront.cart.storage import CartStore
from storefront.cart.view import build_cart_view
from storefront.catalog.client import CatalogClient
from storefront.config import Settings
from storefront.errors import (
    ERROR_CART_LOAD_FAILED,
    ERROR_CART_UPDATE_FAILED,
    ERROR_INVALID_PRODUCT_ID,
    ERROR_INVALID_QUANTITY,
    InvalidCartInput,
)
from storefront.logging import get_logger, sanitize_for_logging
from .deps import get_cart_store, get_catalog_client, get_settings
from .forms import (
    INTENT_DECREMENT_QUANTITY,
    INTENT_INCREMENT_QUANTITY,
    INTENT_REMOVE_ITEM,
    INTENT_UPDATE_QUANTITY,
    intent_response,
    parse_form_int,
)

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])

CART_INTENTS = (
    INTENT_UPDATE_QUANTITY,
    INTENT_INCREMENT_QUANTITY,
    INTENT_DECREMENT_QUANTITY,
    INTENT_REMOVE_ITEM,
)


@router.get("/cart")
async def get_cart(
    request: Request,
    store: CartStore = Depends(get_cart_store),
    catalog: CatalogClient = Depends(get_catalog_client),
    settings: Settings = Depends(get_settings),
):
    """Cart lines with product details and totals."""
    cart = get_cart_items(store, request.headers.get("cookie"))
    try:
        return await build_cart_view(catalog, cart, shipping=settings.shipping)
    except Exception as e:
        logger.error("Failed to build cart view: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CART_LOAD_FAILED)


@router.get("/cart/count")
async def get_cart_count(request: Request, store: CartStore = Depends(get_cart_store)):
    """Units in the cart, for the header badge."""
    cart = get_cart_items(store, request.headers.get("cookie"))
    return {"cartCount": get_total_quantity(cart)}


@router.post("/cart")
async def cart_action(request: Request, store: CartStore = Depends(get_cart_store)):
    """Handle update-quantity, increment/decrement-quantity and remove-item form posts."""
    form = await request.form()
    intent = form.get("intent")
    cookie_header = request.headers.get("cookie")

    if intent not in CART_INTENTS:
        logger.debug("Ignoring cart intent %s", sanitize_for_logging(intent))
        return intent_response(False)

    try:
        product_id = parse_form_int(form.get("productId"), ERROR_INVALID_PRODUCT_ID)
        if intent == INTENT_UPDATE_QUANTITY:
            quantity = parse_form_int(form.get("quantity"), ERROR_INVALID_QUANTITY)
            update = update_cart_quantity(store, cookie_header, product_id, quantity)
        elif intent == INTENT_INCREMENT_QUANTITY:
            update = step_cart_quantity(store, cookie_header, product_id, 1)
        elif intent == INTENT_DECREMENT_QUANTITY:
            update = step_cart_quantity(store, cookie_header, product_id, -1)
        else:
            update = remove_from_cart(store, cookie_header, product_id)
    except InvalidCartInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Cart intent %s failed: %s", intent, e, exc_info=True)
        raise HTTPException(status_code=500, detail=ERROR_CART_UPDATE_FAILED)

    return intent_response(True, update.cookie)
