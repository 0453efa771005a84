"""LocalThread product catalog"""

import math
from datetime import date
from decimal import Decimal
from typing import Optional

from ..models.product import Product, ProductFilter, SortOption

IMAGE_BASE = "https://images.unsplash.com"

# Bundled catalog
PRODUCTS: dict[str, Product] = {
    "1": Product(
        id="1",
        name="Organic Cotton T-Shirt",
        description="Comfortable organic cotton t-shirt perfect for everyday wear.",
        price=Decimal("29"),
        original_price=Decimal("39"),
        category="t-shirts",
        colors=["black", "white", "red", "blue"],
        sizes=["S", "M", "L", "XL"],
        rating=4.5,
        vendor_id="vendor1",
        is_new=True,
        image_url=f"{IMAGE_BASE}/photo-1521572163474-6864f9cf17ab",
        created_at=date(2024, 1, 15),
    ),
    "2": Product(
        id="2",
        name="Sustainable Denim Jacket",
        description="Eco-friendly denim jacket with a modern fit.",
        price=Decimal("89"),
        category="hoodies",
        colors=["blue", "gray"],
        sizes=["S", "M", "L", "XL", "XXL"],
        rating=4.8,
        vendor_id="vendor2",
        image_url=f"{IMAGE_BASE}/photo-1551028719-00167b16eac5",
        created_at=date(2024, 1, 10),
    ),
    "3": Product(
        id="3",
        name="Merino Wool Sweater",
        description="Premium merino wool sweater for ultimate comfort.",
        price=Decimal("79"),
        original_price=Decimal("99"),
        category="hoodies",
        colors=["purple", "yellow", "red"],
        sizes=["S", "M", "L"],
        rating=4.6,
        vendor_id="vendor3",
        is_sale=True,
        image_url=f"{IMAGE_BASE}/photo-1434389677669-e08b4cac3105",
        created_at=date(2024, 1, 5),
    ),
    "4": Product(
        id="4",
        name="Classic White Shirt",
        description="Timeless white shirt for any occasion.",
        price=Decimal("45"),
        category="shirts",
        colors=["white", "gray"],
        sizes=["S", "M", "L", "XL"],
        rating=4.3,
        vendor_id="vendor4",
        image_url=f"{IMAGE_BASE}/photo-1596755094514-f87e34085b2c",
        created_at=date(2024, 1, 20),
    ),
    "5": Product(
        id="5",
        name="Casual Chino Pants",
        description="Comfortable chino pants for casual and formal wear.",
        price=Decimal("55"),
        category="jeans",
        colors=["brown", "green", "black"],
        sizes=["S", "M", "L", "XL"],
        rating=4.4,
        vendor_id="vendor5",
        image_url=f"{IMAGE_BASE}/photo-1473966968600-fa801b869a1a",
        created_at=date(2024, 1, 12),
    ),
    "6": Product(
        id="6",
        name="Summer Floral Dress",
        description="Beautiful floral dress perfect for summer occasions.",
        price=Decimal("65"),
        category="dresses",
        colors=["pink", "purple", "green"],
        sizes=["S", "M", "L"],
        rating=4.7,
        vendor_id="vendor1",
        is_new=True,
        image_url=f"{IMAGE_BASE}/photo-1572804013309-59a88b7e92f1",
        created_at=date(2024, 1, 18),
    ),
    "7": Product(
        id="7",
        name="Leather Crossbody Bag",
        description="Stylish leather crossbody bag with multiple compartments.",
        price=Decimal("129"),
        category="accessories",
        colors=["brown", "black", "purple"],
        sizes=["One Size"],
        rating=4.9,
        vendor_id="vendor2",
        created_at=date(2024, 1, 8),
    ),
    "8": Product(
        id="8",
        name="Running Sneakers",
        description="Comfortable running sneakers for your active lifestyle.",
        price=Decimal("95"),
        original_price=Decimal("120"),
        category="footwear",
        colors=["white", "black", "blue"],
        sizes=["S", "M", "L", "XL"],
        rating=4.5,
        vendor_id="vendor3",
        is_sale=True,
        created_at=date(2024, 1, 14),
    ),
    "9": Product(
        id="9",
        name="Ethnic Kurta Set",
        description="Traditional ethnic kurta set for special occasions.",
        price=Decimal("85"),
        category="ethnic",
        colors=["red", "blue", "green"],
        sizes=["S", "M", "L", "XL"],
        rating=4.6,
        vendor_id="vendor4",
        created_at=date(2024, 1, 16),
    ),
    "10": Product(
        id="10",
        name="Casual Hoodie",
        description="Comfortable casual hoodie for everyday wear.",
        price=Decimal("49"),
        original_price=Decimal("69"),
        category="hoodies",
        colors=["black", "gray", "blue"],
        sizes=["S", "M", "L", "XL", "XXL"],
        rating=4.4,
        vendor_id="vendor5",
        is_sale=True,
        created_at=date(2024, 1, 11),
    ),
    "11": Product(
        id="11",
        name="Formal Business Shirt",
        description="Professional business shirt for formal occasions.",
        price=Decimal("75"),
        category="shirts",
        colors=["white", "blue", "pink"],
        sizes=["S", "M", "L", "XL"],
        rating=4.7,
        vendor_id="vendor1",
        created_at=date(2024, 1, 13),
    ),
    "12": Product(
        id="12",
        name="Skinny Jeans",
        description="Stylish skinny jeans with perfect fit.",
        price=Decimal("69"),
        original_price=Decimal("89"),
        category="jeans",
        colors=["blue", "black"],
        sizes=["S", "M", "L", "XL"],
        rating=4.3,
        vendor_id="vendor2",
        is_sale=True,
        created_at=date(2024, 1, 9),
    ),
}


SORT_KEYS = {
    SortOption.PRICE_LOW_HIGH: (lambda p: p.price, False),
    SortOption.PRICE_HIGH_LOW: (lambda p: p.price, True),
    SortOption.NEWEST_FIRST: (lambda p: p.created_at, True),
    SortOption.POPULARITY: (lambda p: p.rating, True),
    SortOption.DISCOUNT: (lambda p: p.discount_amount, True),
}


class ProductDatabase:
    """In-memory product catalog"""

    def __init__(self, products: Optional[dict[str, Product]] = None):
        self.products = (products if products is not None else PRODUCTS).copy()

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return list(self.products.values())

    def list_categories(self) -> list[str]:
        """Distinct categories in catalog order"""
        return list(dict.fromkeys(p.category for p in self.products.values()))

    def search_products(self, filters: ProductFilter) -> tuple[list[Product], int]:
        """
        Filter, sort and paginate the catalog.

        Returns:
            Tuple of (products on the requested page, total matching count)
        """
        results = list(self.products.values())

        # Filter by search query
        if filters.search_query:
            query = filters.search_query.lower()
            results = [
                p for p in results
                if query in p.name.lower()
                or query in p.category.lower()
                or query in p.description.lower()
            ]

        if filters.category:
            results = [p for p in results if p.category in filters.category]

        if filters.size:
            results = [p for p in results if any(s in filters.size for s in p.sizes)]

        # Price range is inclusive on both ends
        min_price, max_price = filters.price_range
        results = [p for p in results if min_price <= p.price <= max_price]

        if filters.colors:
            results = [p for p in results if any(c in filters.colors for c in p.colors)]

        if filters.vendors:
            results = [p for p in results if p.vendor_id in filters.vendors]

        sort_key, descending = SORT_KEYS[filters.sort_by]
        results.sort(key=sort_key, reverse=descending)

        # Get total before pagination
        total = len(results)

        start = (filters.page - 1) * filters.page_size
        return results[start : start + filters.page_size], total

    @staticmethod
    def total_pages(total: int, page_size: int) -> int:
        return math.ceil(total / page_size) if page_size else 0


# Singleton instance
product_db = ProductDatabase()
