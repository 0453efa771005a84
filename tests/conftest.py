from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from localthread.main import app
from localthread.models.product import Product


def make_product(product_id: str, price: str, **overrides) -> Product:
    fields = dict(
        id=product_id,
        name=f"Product {product_id}",
        description="",
        price=Decimal(price),
        category="shirts",
        sizes=["S", "M", "L"],
        colors=["red", "blue"],
        rating=4.0,
        vendor_id="vendor1",
        created_at=date(2024, 1, 1),
    )
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture
def catalog() -> dict[str, Product]:
    return {
        "A": make_product("A", "100"),
        "B": make_product("B", "50"),
    }


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": "Bearer test-token"}


@pytest.fixture
def cart_id(client) -> str:
    response = client.post("/api/cart")
    assert response.status_code == 200
    return response.json()["cart_id"]


@pytest.fixture
def shipping_address() -> dict[str, str]:
    return {
        "first_name": "Asha",
        "last_name": "Rao",
        "email": "asha@example.com",
        "phone": "9876543210",
        "address": "12 MG Road",
        "city": "Bengaluru",
        "state": "KA",
        "zip_code": "560001",
    }
