"""Tests for the cookie session cart store"""
import pytest
from itsdangerous import URLSafeTimedSerializer

from storefront.cart.models import CartItem
from storefront.cart.storage import CartStore, Session
from storefront.config import SessionConfig


def request_cookie(set_cookie: str) -> str:
    return set_cookie.split(";", 1)[0]


def test_no_cookie_reads_empty_cart(cart_store):
    """Request without a Cookie header starts with an empty cart"""
    assert cart_store.read_cart(None) == []
    assert cart_store.read_cart("") == []


def test_unrelated_cookies_read_empty_cart(cart_store):
    assert cart_store.read_cart("theme=dark; _ga=GA1.1.123") == []


@pytest.mark.parametrize("cookie", [
    "__session=garbage",
    "__session=eyJjYXJ0IjpbXX0",  # unsigned JSON
    "__session=",
    "__session=a.b.c.d",
])
def test_malformed_cookie_reads_empty_cart(cart_store, cookie):
    """Unreadable cookies are treated as an empty cart, never an error"""
    assert cart_store.read_cart(cookie) == []


def test_round_trip(cart_store):
    cart = [CartItem(3, 1), CartItem(1, 2), CartItem(99, 40)]
    set_cookie = cart_store.write_cart(None, cart)

    assert cart_store.read_cart(request_cookie(set_cookie)) == cart


def test_round_trip_empty_cart(cart_store):
    set_cookie = cart_store.write_cart(None, [])
    assert cart_store.read_cart(request_cookie(set_cookie)) == []


def test_full_set_cookie_value_is_readable(cart_store):
    """Parsing ignores the attribute pairs of a Set-Cookie value"""
    set_cookie = cart_store.write_cart(None, [CartItem(1, 2)])
    assert cart_store.read_cart(set_cookie) == [CartItem(1, 2)]


def test_cookie_attributes(cart_store):
    set_cookie = cart_store.write_cart(None, [CartItem(1, 1)])

    assert set_cookie.startswith("__session=")
    assert "Path=/" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "SameSite=Lax" in set_cookie
    assert "Secure" not in set_cookie
    assert "Max-Age" not in set_cookie


def test_secure_cookie_in_production():
    store = CartStore(SessionConfig(secrets=("s",), secure=True))
    assert "Secure" in store.write_cart(None, [])


def test_cookie_is_opaque(cart_store):
    """Cart contents are not readable as plain JSON in the cookie"""
    set_cookie = cart_store.write_cart(None, [CartItem(1234, 5)])
    assert "productId" not in set_cookie


def test_tampered_cookie_reads_empty_cart(cart_store):
    token = request_cookie(cart_store.write_cart(None, [CartItem(1, 2)]))
    payload, rest = token.split(".", 1)
    tampered = payload[:-1] + ("A" if payload[-1] != "A" else "B") + "." + rest

    assert cart_store.read_cart(tampered) == []


def test_cookie_signed_with_other_secret_reads_empty_cart(cart_store):
    other = CartStore(SessionConfig(secrets=("another_secret",)))
    set_cookie = other.write_cart(None, [CartItem(1, 2)])

    assert cart_store.read_cart(request_cookie(set_cookie)) == []


def test_secret_rotation():
    """Cookies signed with an older secret still verify after rotation"""
    old = CartStore(SessionConfig(secrets=("old",)))
    rotated = CartStore(SessionConfig(secrets=("new", "old")))

    old_cookie = request_cookie(old.write_cart(None, [CartItem(1, 2)]))
    assert rotated.read_cart(old_cookie) == [CartItem(1, 2)]

    # New cookies are signed with the first secret only
    new_cookie = request_cookie(rotated.write_cart(None, [CartItem(3, 1)]))
    assert old.read_cart(new_cookie) == []
    assert CartStore(SessionConfig(secrets=("new",))).read_cart(new_cookie) == [CartItem(3, 1)]


def test_write_preserves_other_session_fields(cart_store, session_config):
    session = Session({"theme": "dark", "cart": []})
    inbound = request_cookie(cart_store.commit_session(session))

    outbound = request_cookie(cart_store.write_cart(inbound, [CartItem(1, 1)]))
    decoded = cart_store.get_session(outbound)

    assert decoded.get("theme") == "dark"
    assert decoded.get("cart") == [{"productId": 1, "quantity": 1}]


def test_write_never_persists_non_positive_quantities(cart_store):
    cart = [CartItem(1, 0), CartItem(2, -1), CartItem(3, 2)]
    set_cookie = cart_store.write_cart(None, cart)

    assert cart_store.read_cart(request_cookie(set_cookie)) == [CartItem(3, 2)]


def _signed(session_config, data):
    serializer = URLSafeTimedSerializer(list(session_config.secrets), salt=session_config.salt)
    return f"__session={serializer.dumps(data)}"


def test_missing_cart_field_reads_empty(cart_store, session_config):
    assert cart_store.read_cart(_signed(session_config, {"theme": "dark"})) == []


def test_non_list_cart_field_reads_empty(cart_store, session_config):
    assert cart_store.read_cart(_signed(session_config, {"cart": {"1": 2}})) == []


def test_non_object_payload_reads_empty(cart_store, session_config):
    assert cart_store.read_cart(_signed(session_config, ["cart"])) == []


def test_invalid_entries_are_dropped(cart_store, session_config):
    cookie = _signed(session_config, {"cart": [
        {"productId": 1, "quantity": 2},
        {"productId": 2, "quantity": 0},
        {"productId": "x", "quantity": 1},
        "junk",
        {"productId": 1, "quantity": 9},
        {"productId": 3, "quantity": 1},
    ]})

    assert cart_store.read_cart(cookie) == [CartItem(1, 2), CartItem(3, 1)]


def test_expired_cookie_reads_empty(session_config):
    store = CartStore(SessionConfig(secrets=session_config.secrets, max_age=-1))
    set_cookie = store.write_cart(None, [CartItem(1, 1)])

    assert "Max-Age=-1" in set_cookie
    assert store.read_cart(request_cookie(set_cookie)) == []
