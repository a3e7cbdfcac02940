"""Cart package: models, cookie storage, and cart operations."""
from .models import Cart, CartItem, CartUpdate
from .storage import CartStore, Session
from .service import (
    add_item,
    add_to_cart,
    decrement_quantity,
    get_cart_items,
    get_total_quantity,
    increment_quantity,
    remove_from_cart,
    remove_item,
    set_quantity,
    step_cart_quantity,
    update_cart_quantity,
)

__all__ = [
    "Cart",
    "CartItem",
    "CartUpdate",
    "CartStore",
    "Session",
    "add_item",
    "add_to_cart",
    "decrement_quantity",
    "get_cart_items",
    "get_total_quantity",
    "increment_quantity",
    "remove_from_cart",
    "remove_item",
    "set_quantity",
    "step_cart_quantity",
    "update_cart_quantity",
]
