"""Product models for the storefront catalog"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SortOption(str, Enum):
    PRICE_LOW_HIGH = "price-low-high"
    PRICE_HIGH_LOW = "price-high-low"
    NEWEST_FIRST = "newest-first"
    POPULARITY = "popularity"
    DISCOUNT = "discount"


class Product(BaseModel):
    """Product in the catalog"""
    id: str
    name: str
    description: str = ""
    price: Decimal = Field(ge=0)
    original_price: Optional[Decimal] = None
    category: str
    sizes: list[str] = []
    colors: list[str] = []
    rating: float = Field(ge=0, le=5, default=0)
    vendor_id: str
    is_new: bool = False
    is_sale: bool = False
    image_url: Optional[str] = None
    created_at: date

    class Config:
        from_attributes = True

    @property
    def discount_amount(self) -> Decimal:
        """Markdown from the original price, zero when there is none"""
        if self.original_price is None:
            return Decimal("0")
        return self.original_price - self.price


class ProductFilter(BaseModel):
    """Filter and sort state for product listings"""
    category: list[str] = []
    size: list[str] = []
    price_range: tuple[Decimal, Decimal] = (Decimal("0"), Decimal("1000"))
    colors: list[str] = []
    vendors: list[str] = []
    sort_by: SortOption = SortOption.NEWEST_FIRST
    search_query: str = ""
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=12, ge=1, le=100)


class ProductSearchResponse(BaseModel):
    """Response from product search"""
    products: list[Product]
    total: int
    page: int
    page_size: int
    total_pages: int
