"""
Cart view: cart lines joined with live catalog data.

Prices are never stored in the cookie; every view re-reads them from the
catalog. A line whose product cannot be fetched is left out of the view
(it stays in the cookie).
"""
import asyncio
from decimal import Decimal
from typing import Optional

from storefront.catalog.client import CatalogClient
from storefront.errors import FetchError
from storefront.logging import get_logger
from storefront.money import format_amount, multiply, round_money, to_decimal
from .models import Cart, CartItem

logger = get_logger(__name__)


async def _load_line(catalog: CatalogClient, item: CartItem) -> Optional[dict]:
    try:
        product = await catalog.get_product(item.product_id)
    except Exception as e:
        logger.warning("Dropping product %s from cart view: %s", item.product_id, e, exc_info=not isinstance(e, FetchError))
        return None

    return {
        "productId": item.product_id,
        "quantity": item.quantity,
        "product": product.model_dump(),
        "total": round_money(multiply(product.price, item.quantity)),
    }


async def build_cart_view(catalog: CatalogClient, cart: Cart, shipping: Decimal = Decimal("20.00")) -> dict:
    """
    Build the cart page payload.

    Returns:
        {"cartItems": [...], "subtotal": "x.xx", "shipping": "x.xx", "total": "x.xx"}
    """
    lines = await asyncio.gather(*[_load_line(catalog, item) for item in cart])
    valid_lines = [line for line in lines if line is not None]

    subtotal = sum((line["total"] for line in valid_lines), Decimal("0"))
    shipping = to_decimal(shipping)

    for line in valid_lines:
        line["total"] = format_amount(line["total"])

    return {
        "cartItems": valid_lines,
        "subtotal": format_amount(subtotal),
        "shipping": format_amount(shipping),
        "total": format_amount(subtotal + shipping),
    }
