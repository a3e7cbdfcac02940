"""
Cookie session storage for the cart.

The whole session lives client-side: a JSON object signed with itsdangerous
and carried in a single cookie. Nothing is kept on the server, so every
mutation has to be committed into a fresh Set-Cookie value or it is lost.
"""
import http.cookies
from typing import Any, Optional

from itsdangerous import BadData, URLSafeTimedSerializer
from starlette.requests import cookie_parser

from storefront.config import SessionConfig
from storefront.logging import get_logger
from .models import Cart, CartItem, cart_to_list

logger = get_logger(__name__)

CART_FIELD = "cart"


class Session:
    """Decoded session fields. Only the cart field is used by the storefront."""

    def __init__(self, data: Optional[dict] = None):
        self.data: dict[str, Any] = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def __repr__(self) -> str:
        return f"Session({self.data!r})"


class CartStore:
    """
    Translates between the session cookie and an in-memory Cart.

    Usage:
        store = CartStore(settings.session)
        cart = store.read_cart(request.headers.get("cookie"))
        set_cookie = store.write_cart(request.headers.get("cookie"), cart)
    """

    def __init__(self, config: SessionConfig):
        self.config = config
        # itsdangerous signs with the last key and verifies with all of them;
        # config lists the signing secret first.
        self._serializer = URLSafeTimedSerializer(
            secret_key=list(reversed(config.secrets)),
            salt=config.salt,
        )

    # ==================== SESSION ====================

    def get_session(self, cookie_header: Optional[str]) -> Session:
        """Decode the session from a request Cookie header; empty session on any failure."""
        if not cookie_header:
            return Session()

        token = cookie_parser(cookie_header).get(self.config.cookie_name)
        if not token:
            return Session()

        try:
            data = self._serializer.loads(token, max_age=self.config.max_age)
        except BadData as e:
            # Tampered, foreign-secret or expired cookie: start over with an empty session
            logger.debug("Discarding unreadable session cookie: %s", type(e).__name__)
            return Session()

        if not isinstance(data, dict):
            logger.debug("Discarding session cookie with non-object payload")
            return Session()
        return Session(data)

    def commit_session(self, session: Session) -> str:
        """Sign the session and return a Set-Cookie header value."""
        token = self._serializer.dumps(session.data)
        return self._build_cookie(token, max_age=self.config.max_age)

    def _build_cookie(self, value: str, max_age: Optional[int] = None) -> str:
        cookie: http.cookies.SimpleCookie = http.cookies.SimpleCookie()
        name = self.config.cookie_name
        cookie[name] = value
        cookie[name]["path"] = self.config.path
        if max_age is not None:
            cookie[name]["max-age"] = max_age
        if self.config.http_only:
            cookie[name]["httponly"] = True
        if self.config.secure:
            cookie[name]["secure"] = True
        if self.config.same_site:
            cookie[name]["samesite"] = self.config.same_site.capitalize()
        return cookie.output(header="").strip()

    # ==================== CART ====================

    def read_cart(self, cookie_header: Optional[str]) -> Cart:
        """
        Get the cart carried by a request Cookie header.

        Never raises: a missing, unsigned or corrupted cookie reads as an empty
        cart, and entries that are not valid line items are dropped.
        """
        raw = self.get_session(cookie_header).get(CART_FIELD)
        if not isinstance(raw, list):
            return []

        cart: Cart = []
        seen: set[int] = set()
        for entry in raw:
            try:
                item = CartItem.from_dict(entry)
            except ValueError as e:
                logger.debug("Dropping cart entry from session: %s", e)
                continue
            if item.product_id in seen:
                continue
            seen.add(item.product_id)
            cart.append(item)
        return cart

    def write_cart(self, cookie_header: Optional[str], cart: Cart) -> str:
        """
        Store the cart in the session and return the Set-Cookie header value.

        Other session fields from the inbound cookie are preserved. Lines with a
        non-positive quantity are never written.
        """
        session = self.get_session(cookie_header)
        session.set(CART_FIELD, cart_to_list([item for item in cart if item.quantity > 0]))
        return self.commit_session(session)
