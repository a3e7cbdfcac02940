"""Tests for form field coercion"""
import pytest

from storefront.errors import InvalidCartInput
from storefront.routers.forms import parse_form_int


@pytest.mark.parametrize("value,expected", [
    ("3", 3),
    (" 12 ", 12),
    ("3.0", 3),
    ("+2", 2),
    ("-1", -1),
])
def test_parse_form_int_accepts_integers(value, expected):
    assert parse_form_int(value, "bad") == expected


@pytest.mark.parametrize("value", [None, "", "  ", "abc", "1.5", "NaN", "Infinity", "1e3", "1_0", "٣", "１"])
def test_parse_form_int_rejects_non_integers(value):
    with pytest.raises(InvalidCartInput, match="bad"):
        parse_form_int(value, "bad")
