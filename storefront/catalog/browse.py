"""
Shop listing: filter, sort and paginate a fetched product list.

The catalog returns up to FETCH_LIMIT products in one call; everything below
runs over that list in memory.
"""
import math
from dataclasses import dataclass
from typing import Optional

from .models import Product

FETCH_LIMIT = 100
ITEMS_PER_PAGE = 10

# Fixed list, the catalog's category endpoint is not used
CATEGORIES = [
    "beauty", "fragrances", "furniture", "groceries", "home-decoration", "kitchen-accessories",
    "laptops", "mens-shirts", "mens-shoes", "mens-watches", "mobile-accessories", "motorcycle",
    "skin-care", "smartphones", "sports-accessories", "sunglasses", "tablets", "tops", "vehicle",
    "womens-bags", "womens-dresses", "womens-jewellery", "womens-shoes", "womens-watches",
]

SORT_FIELDS = ("title", "price", "rating", "stock", "brand", "category")


@dataclass
class ProductQuery:
    page: int = 1
    search: str = ""
    category: str = ""
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    sort: str = ""
    order: str = "asc"

    def __post_init__(self):
        self.page = max(1, self.page)
        if self.order not in ("asc", "desc"):
            self.order = "asc"


@dataclass
class ProductListing:
    products: list[Product]
    filtered: int
    page: int
    total_pages: int


def format_category_name(category: str) -> str:
    """'home-decoration' -> 'Home Decoration'"""
    return " ".join(word[:1].upper() + word[1:] for word in str(category).split("-"))


def filter_products(products: list[Product], query: ProductQuery) -> list[Product]:
    result = list(products)
    if query.category:
        result = [p for p in result if p.category == query.category]
    if query.min_price is not None:
        result = [p for p in result if p.price >= query.min_price]
    if query.max_price is not None:
        result = [p for p in result if p.price <= query.max_price]
    return result


def sort_products(products: list[Product], sort: str, order: str = "asc") -> list[Product]:
    """Sort by a product field; strings compare case-insensitively, missing values go last."""
    if sort not in SORT_FIELDS:
        return list(products)

    present = [p for p in products if getattr(p, sort) is not None]
    missing = [p for p in products if getattr(p, sort) is None]

    def sort_key(product: Product):
        value = getattr(product, sort)
        return value.lower() if isinstance(value, str) else value

    return sorted(present, key=sort_key, reverse=order == "desc") + missing


def paginate(products: list[Product], page: int, per_page: int = ITEMS_PER_PAGE) -> list[Product]:
    start = (page - 1) * per_page
    return products[start:start + per_page]


def apply_query(products: list[Product], query: ProductQuery) -> ProductListing:
    filtered = sort_products(filter_products(products, query), query.sort, query.order)
    return ProductListing(
        products=paginate(filtered, query.page),
        filtered=len(filtered),
        page=query.page,
        total_pages=math.ceil(len(filtered) / ITEMS_PER_PAGE),
    )
