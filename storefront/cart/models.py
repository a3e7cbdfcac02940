"""Cart models stored in the session cookie."""
from dataclasses import dataclass, field
from typing import List


def _is_int(value) -> bool:
    # bool is an int subclass; True must not pass as productId 1
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class CartItem:
    """Single line in the cart. Quantity is always > 0 while the line exists."""
    product_id: int
    quantity: int

    def to_dict(self) -> dict:
        """Wire format kept in the session cookie."""
        return {"productId": self.product_id, "quantity": self.quantity}

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """
        Create from the session cookie representation.

        Raises:
            ValueError: If the entry is not a positive productId/quantity pair
        """
        if not isinstance(data, dict):
            raise ValueError(f"cart entry must be an object, got {type(data).__name__}")
        product_id = data.get("productId")
        quantity = data.get("quantity")
        if not _is_int(product_id) or product_id <= 0:
            raise ValueError(f"invalid productId: {product_id!r}")
        if not _is_int(quantity) or quantity <= 0:
            raise ValueError(f"invalid quantity: {quantity!r}")
        return cls(product_id=product_id, quantity=quantity)


# Ordered, unique by product_id
Cart = List[CartItem]


@dataclass
class CartUpdate:
    """Result of a cart operation: the new cart and the Set-Cookie value to send back."""
    cart: Cart = field(default_factory=list)
    cookie: str = ""


def cart_to_list(cart: Cart) -> list[dict]:
    return [item.to_dict() for item in cart]
