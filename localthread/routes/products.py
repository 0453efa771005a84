"""Product API routes for the storefront"""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..core.config import settings
from ..models.product import Product, ProductFilter, ProductSearchResponse, SortOption
from ..database.products import product_db

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductSearchResponse)
async def search_products(
    q: str = Query("", description="Search name, category and description"),
    category: Optional[list[str]] = Query(None, description="Any of these categories"),
    size: Optional[list[str]] = Query(None, description="Any of these sizes"),
    color: Optional[list[str]] = Query(None, description="Any of these colours"),
    vendor: Optional[list[str]] = Query(None, description="Any of these vendor ids"),
    min_price: Decimal = Query(Decimal("0"), ge=0, description="Minimum price"),
    max_price: Decimal = Query(Decimal("1000"), ge=0, description="Maximum price"),
    sort_by: SortOption = Query(SortOption.NEWEST_FIRST, description="Sort order"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: Optional[int] = Query(None, ge=1, le=100, description="Results per page"),
):
    """Search, filter and sort the catalog"""
    filters = ProductFilter(
        search_query=q,
        category=category or [],
        size=size or [],
        colors=color or [],
        vendors=vendor or [],
        price_range=(min_price, max_price),
        sort_by=sort_by,
        page=page,
        page_size=page_size or settings.page_size,
    )
    products, total = product_db.search_products(filters)

    return ProductSearchResponse(
        products=products,
        total=total,
        page=filters.page,
        page_size=filters.page_size,
        total_pages=product_db.total_pages(total, filters.page_size),
    )


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List all product categories"""
    return product_db.list_categories()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str):
    """Get a product by ID"""
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
