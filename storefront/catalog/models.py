"""
Catalog API Pydantic Models

Only the fields the storefront reads are declared; everything else the
catalog returns is kept as extra data and passed through untouched.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int
    title: str
    price: float
    thumbnail: Optional[str] = None
    rating: Optional[float] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    stock: Optional[int] = None
    description: Optional[str] = None


class ProductPage(BaseModel):
    model_config = ConfigDict(extra="allow")

    products: list[Product] = []
    total: int = 0
    skip: int = 0
    limit: int = 0
