"""
Cart operations.

The first group are pure functions over a Cart value; they never mutate the
list or items they are given. The second group reads the cart from the inbound
Cookie header, applies one of them and commits the result through CartStore.
"""
from typing import Optional

from storefront.errors import (
    ERROR_INVALID_ADD_QUANTITY,
    ERROR_INVALID_PRODUCT_ID,
    ERROR_INVALID_QUANTITY,
    InvalidCartInput,
)
from storefront.logging import get_logger
from .models import Cart, CartItem, CartUpdate
from .storage import CartStore

logger = get_logger(__name__)


def _require_int(value, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCartInput(message)
    return value


def _validate_product_id(product_id) -> int:
    product_id = _require_int(product_id, ERROR_INVALID_PRODUCT_ID)
    if product_id <= 0:
        raise InvalidCartInput(ERROR_INVALID_PRODUCT_ID)
    return product_id


def _find(cart: Cart, product_id: int) -> Optional[CartItem]:
    return next((item for item in cart if item.product_id == product_id), None)


# ==================== PURE OPERATIONS ====================

def add_item(cart: Cart, product_id: int, quantity: int = 1) -> Cart:
    """
    Add a product, or increase its quantity if it is already in the cart.

    Raises:
        InvalidCartInput: If product_id or quantity is not a positive integer
    """
    product_id = _validate_product_id(product_id)
    quantity = _require_int(quantity, ERROR_INVALID_ADD_QUANTITY)
    if quantity <= 0:
        raise InvalidCartInput(ERROR_INVALID_ADD_QUANTITY)

    if _find(cart, product_id) is None:
        return [CartItem(item.product_id, item.quantity) for item in cart] + [CartItem(product_id, quantity)]

    return [
        CartItem(item.product_id, item.quantity + quantity if item.product_id == product_id else item.quantity)
        for item in cart
    ]


def remove_item(cart: Cart, product_id: int) -> Cart:
    """New cart without product_id. Removing an absent product is a no-op."""
    product_id = _validate_product_id(product_id)
    return [CartItem(item.product_id, item.quantity) for item in cart if item.product_id != product_id]


def set_quantity(cart: Cart, product_id: int, quantity: int) -> Cart:
    """
    Replace the quantity of a product already in the cart.

    quantity <= 0 removes the line. A product that is not in the cart is
    left out: the cart comes back unchanged.
    """
    product_id = _validate_product_id(product_id)
    quantity = _require_int(quantity, ERROR_INVALID_QUANTITY)

    if _find(cart, product_id) is None:
        return [CartItem(item.product_id, item.quantity) for item in cart]
    if quantity <= 0:
        return remove_item(cart, product_id)
    return [
        CartItem(item.product_id, quantity if item.product_id == product_id else item.quantity)
        for item in cart
    ]


def increment_quantity(cart: Cart, product_id: int) -> Cart:
    item = _find(cart, _validate_product_id(product_id))
    if item is None:
        return [CartItem(i.product_id, i.quantity) for i in cart]
    return set_quantity(cart, product_id, item.quantity + 1)


def decrement_quantity(cart: Cart, product_id: int) -> Cart:
    """Lower quantity by one; the line disappears when it reaches zero."""
    item = _find(cart, _validate_product_id(product_id))
    if item is None:
        return [CartItem(i.product_id, i.quantity) for i in cart]
    return set_quantity(cart, product_id, item.quantity - 1)


def get_total_quantity(cart: Cart) -> int:
    """Number of units in the cart (cart badge)."""
    return sum(item.quantity for item in cart)


# ==================== REQUEST-LEVEL OPERATIONS ====================

def get_cart_items(store: CartStore, cookie_header: Optional[str]) -> Cart:
    return store.read_cart(cookie_header)


def add_to_cart(store: CartStore, cookie_header: Optional[str], product_id: int, quantity: int = 1) -> CartUpdate:
    """Add to the request's cart and commit it."""
    cart = add_item(store.read_cart(cookie_header), product_id, quantity)
    cookie = store.write_cart(cookie_header, cart)
    logger.info("Added product %s x%s to cart (%s lines)", product_id, quantity, len(cart))
    return CartUpdate(cart=cart, cookie=cookie)


def remove_from_cart(store: CartStore, cookie_header: Optional[str], product_id: int) -> CartUpdate:
    """Remove from the request's cart. The session is re-committed even if nothing changed."""
    cart = remove_item(store.read_cart(cookie_header), product_id)
    cookie = store.write_cart(cookie_header, cart)
    logger.info("Removed product %s from cart (%s lines)", product_id, len(cart))
    return CartUpdate(cart=cart, cookie=cookie)


def update_cart_quantity(
    store: CartStore,
    cookie_header: Optional[str],
    product_id: int,
    quantity: int,
) -> CartUpdate:
    """
    Set an absolute quantity on the request's cart.

    quantity <= 0 behaves like remove_from_cart. When the product is not in the
    cart nothing is re-signed: the returned cookie is the inbound Cookie header
    as received ("" when the request had none).
    """
    product_id = _validate_product_id(product_id)
    quantity = _require_int(quantity, ERROR_INVALID_QUANTITY)

    cart = store.read_cart(cookie_header)
    if _find(cart, product_id) is None:
        logger.debug("Quantity update for product %s ignored, not in cart", product_id)
        return CartUpdate(cart=cart, cookie=cookie_header or "")

    if quantity <= 0:
        return remove_from_cart(store, cookie_header, product_id)

    cart = set_quantity(cart, product_id, quantity)
    cookie = store.write_cart(cookie_header, cart)
    logger.info("Set product %s quantity to %s", product_id, quantity)
    return CartUpdate(cart=cart, cookie=cookie)


def step_cart_quantity(store: CartStore, cookie_header: Optional[str], product_id: int, step: int) -> CartUpdate:
    """
    Move a line's quantity one unit up (step > 0) or down (step < 0).

    Stepping down from 1 removes the line. Absent products leave the session
    untouched, as in update_cart_quantity.
    """
    product_id = _validate_product_id(product_id)
    cart = store.read_cart(cookie_header)
    if _find(cart, product_id) is None:
        logger.debug("Quantity step for product %s ignored, not in cart", product_id)
        return CartUpdate(cart=cart, cookie=cookie_header or "")

    cart = increment_quantity(cart, product_id) if step > 0 else decrement_quantity(cart, product_id)
    cookie = store.write_cart(cookie_header, cart)
    logger.info("Stepped product %s quantity by %s (%s lines)", product_id, 1 if step > 0 else -1, len(cart))
    return CartUpdate(cart=cart, cookie=cookie)
