"""Form field coercion for cart intents."""
import re
from typing import Any, Optional

from fastapi.responses import JSONResponse

from storefront.errors import InvalidCartInput

INTENT_ADD_TO_CART = "add-to-cart"
INTENT_UPDATE_QUANTITY = "update-quantity"
INTENT_REMOVE_ITEM = "remove-item"
INTENT_INCREMENT_QUANTITY = "increment-quantity"
INTENT_DECREMENT_QUANTITY = "decrement-quantity"

_INT_RE = re.compile(r"^[+-]?[0-9]+(\.0*)?$", re.ASCII)


def parse_form_int(value: Any, message: str) -> int:
    """
    Coerce a submitted form value to int.

    "3" and "3.0" are accepted. Empty, fractional and non-finite values raise
    InvalidCartInput, as do digit separators ("1_0") and non-ASCII digits.
    """
    if value is None or not isinstance(value, str):
        raise InvalidCartInput(message)
    text = value.strip()
    if not _INT_RE.match(text):
        raise InvalidCartInput(message)
    return int(text.split(".", 1)[0])


def intent_response(success: bool, cookie: Optional[str] = None) -> JSONResponse:
    """{"success": ...} with the session Set-Cookie header when there is one."""
    headers = {"set-cookie": cookie} if cookie else None
    return JSONResponse(content={"success": success}, headers=headers)
