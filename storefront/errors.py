"""
Common Error Constants and Exceptions

Centralized error messages to avoid string duplication.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCTS_FETCH_FAILED = "Failed to fetch products"

# Cart errors
ERROR_INVALID_PRODUCT_ID = "productId must be a positive integer"
ERROR_INVALID_QUANTITY = "quantity must be an integer"
ERROR_INVALID_ADD_QUANTITY = "quantity must be a positive integer"
ERROR_CART_UPDATE_FAILED = "Failed to update cart"
ERROR_CART_LOAD_FAILED = "Failed to load cart"


class StorefrontError(Exception):
    """Base class for storefront errors scoped to a single request."""


class FetchError(StorefrontError):
    """The catalog API was unreachable or answered with a non-success status."""

    def __init__(self, message: str = ERROR_PRODUCTS_FETCH_FAILED, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ProductNotFoundError(FetchError):
    """The catalog had no product for the requested id."""

    def __init__(self, product_id: int | str, status_code: int | None = None):
        super().__init__(ERROR_PRODUCT_NOT_FOUND, status_code=status_code)
        self.product_id = product_id


class InvalidCartInput(StorefrontError, ValueError):
    """A product id or quantity could not be used for a cart operation."""
