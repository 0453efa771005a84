from datetime import datetime, timedelta
from decimal import Decimal

from localthread.database.carts import cart_db
from localthread.database.orders import order_db


def fill_cart(client, cart_id):
    client.post(f"/api/cart/{cart_id}/items", json={"product_id": "1", "size": "M", "color": "black", "quantity": 2})
    client.post(f"/api/cart/{cart_id}/items", json={"product_id": "8", "size": "L"})


def test_checkout_requires_bearer_token(client, cart_id, shipping_address):
    fill_cart(client, cart_id)

    response = client.post(
        "/api/checkout",
        json={"cart_id": cart_id, "shipping_address": shipping_address},
    )

    assert response.status_code == 401
    assert cart_db.get_cart(cart_id).store.total_items == 3


def test_checkout_creates_order_then_clears_cart(client, cart_id, shipping_address, auth_headers):
    fill_cart(client, cart_id)

    response = client.post(
        "/api/checkout",
        json={"cart_id": cart_id, "shipping_address": shipping_address, "payment_method": "upi"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    order = data["order"]
    assert order["order_id"].startswith("ORD-")
    assert order["status"] == "confirmed"
    assert order["payment_method"] == "upi"
    assert [(i["product_id"], i["size"], i["color"], i["quantity"]) for i in order["items"]] == [
        ("1", "M", "black", 2),
        ("8", "L", None, 1),
    ]
    assert Decimal(order["totals"]["subtotal"]) == Decimal("153")
    assert Decimal(order["totals"]["grand_total"]) == Decimal("202")

    assert order_db.get_order(order["order_id"]) is not None
    assert client.get(f"/api/cart/{cart_id}").json()["lines"] == []


def test_checkout_with_coupon(client, cart_id, shipping_address, auth_headers):
    fill_cart(client, cart_id)

    response = client.post(
        "/api/checkout",
        json={"cart_id": cart_id, "shipping_address": shipping_address, "coupon_code": "WELCOME10"},
        headers=auth_headers,
    )

    totals = response.json()["order"]["totals"]
    assert Decimal(totals["discount"]) == Decimal("15.3")
    assert Decimal(totals["grand_total"]) == Decimal("186.7")
    assert totals["coupon_code"] == "WELCOME10"


def test_checkout_rejects_invalid_coupon_and_keeps_cart(client, cart_id, shipping_address, auth_headers):
    fill_cart(client, cart_id)

    response = client.post(
        "/api/checkout",
        json={"cart_id": cart_id, "shipping_address": shipping_address, "coupon_code": "BOGUS"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert cart_db.get_cart(cart_id).store.total_items == 3


def test_checkout_empty_cart(client, cart_id, shipping_address, auth_headers):
    response = client.post(
        "/api/checkout",
        json={"cart_id": cart_id, "shipping_address": shipping_address},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Cart is empty"


def test_checkout_unknown_cart(client, shipping_address, auth_headers):
    response = client.post(
        "/api/checkout",
        json={"cart_id": "missing", "shipping_address": shipping_address},
        headers=auth_headers,
    )

    assert response.status_code == 404


def test_get_and_list_orders(client, cart_id, shipping_address, auth_headers):
    fill_cart(client, cart_id)
    order_id = client.post(
        "/api/checkout",
        json={"cart_id": cart_id, "shipping_address": shipping_address},
        headers=auth_headers,
    ).json()["order"]["order_id"]

    assert client.get(f"/api/checkout/orders/{order_id}", headers=auth_headers).json()["order_id"] == order_id
    assert client.get("/api/checkout/orders/ORD-NOPE", headers=auth_headers).status_code == 404
    assert client.get("/api/checkout/orders").status_code == 401

    listed = client.get("/api/checkout/orders", headers=auth_headers).json()
    assert order_id in [o["order_id"] for o in listed]


def place_order(client, cart_id, shipping_address, auth_headers, **extra) -> str:
    fill_cart(client, cart_id)
    response = client.post(
        "/api/checkout",
        json={"cart_id": cart_id, "shipping_address": shipping_address, **extra},
        headers=auth_headers,
    )
    assert response.status_code == 200
    return response.json()["order"]["order_id"]


def test_order_details_require_bearer_token(client, cart_id, shipping_address, auth_headers):
    order_id = place_order(client, cart_id, shipping_address, auth_headers)

    response = client.get(f"/api/checkout/orders/{order_id}")

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_list_orders_rejects_out_of_range_limit(client, cart_id, shipping_address, auth_headers):
    place_order(client, cart_id, shipping_address, auth_headers)

    assert client.get("/api/checkout/orders", params={"limit": -1}, headers=auth_headers).status_code == 422
    assert client.get("/api/checkout/orders", params={"limit": 0}, headers=auth_headers).status_code == 422
    assert client.get("/api/checkout/orders", params={"limit": 101}, headers=auth_headers).status_code == 422

    listed = client.get("/api/checkout/orders", params={"limit": 1}, headers=auth_headers).json()
    assert len(listed) == 1


def test_order_records_normalised_coupon_code(client, cart_id, shipping_address, auth_headers):
    order_id = place_order(
        client, cart_id, shipping_address, auth_headers, coupon_code=" welcome10 "
    )

    order = order_db.get_order(order_id)
    assert order.coupon_code == "WELCOME10"
    assert order.totals.coupon_code == "WELCOME10"
    assert order.totals.discount == Decimal("15.3")


def test_order_records_cart_coupon(client, cart_id, shipping_address, auth_headers):
    fill_cart(client, cart_id)
    client.post(f"/api/cart/{cart_id}/coupon", json={"code": "welcome10"})

    order = client.post(
        "/api/checkout",
        json={"cart_id": cart_id, "shipping_address": shipping_address},
        headers=auth_headers,
    ).json()["order"]

    assert order["coupon_code"] == "WELCOME10"
    assert Decimal(order["totals"]["discount"]) == Decimal("15.3")


def test_update_order_status(client, cart_id, shipping_address, auth_headers):
    order_id = place_order(client, cart_id, shipping_address, auth_headers)

    response = client.patch(
        f"/api/checkout/orders/{order_id}/status",
        json={"status": "shipped", "tracking_number": "TRK123"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["status"] == "shipped"
    assert response.json()["tracking_number"] == "TRK123"
    assert order_db.get_order(order_id).status == "shipped"


def test_update_order_status_validation(client, cart_id, shipping_address, auth_headers):
    order_id = place_order(client, cart_id, shipping_address, auth_headers)
    url = f"/api/checkout/orders/{order_id}/status"

    assert client.patch(url, json={"status": "shipped"}).status_code == 401
    assert client.patch(url, json={"status": "lost"}, headers=auth_headers).status_code == 422
    assert client.patch(
        "/api/checkout/orders/ORD-NOPE/status", json={"status": "shipped"}, headers=auth_headers
    ).status_code == 404


def test_cancel_order(client, cart_id, shipping_address, auth_headers):
    order_id = place_order(client, cart_id, shipping_address, auth_headers)

    response = client.patch(f"/api/checkout/orders/{order_id}/cancel", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"

    # Cancelled orders are final
    again = client.patch(f"/api/checkout/orders/{order_id}/cancel", headers=auth_headers)
    assert again.status_code == 400
    reopen = client.patch(
        f"/api/checkout/orders/{order_id}/status", json={"status": "processing"}, headers=auth_headers
    )
    assert reopen.status_code == 400


def test_cancel_rejects_processed_order(client, cart_id, shipping_address, auth_headers):
    order_id = place_order(client, cart_id, shipping_address, auth_headers)
    client.patch(f"/api/checkout/orders/{order_id}/status", json={"status": "shipped"}, headers=auth_headers)

    response = client.patch(f"/api/checkout/orders/{order_id}/cancel", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "order is already shipped"


def test_cancel_rejects_order_older_than_an_hour(client, cart_id, shipping_address, auth_headers):
    order_id = place_order(client, cart_id, shipping_address, auth_headers)
    order_db.get_order(order_id).created_at = datetime.utcnow() - timedelta(hours=2)

    response = client.patch(f"/api/checkout/orders/{order_id}/cancel", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "order cannot be cancelled after 1 hour"
    assert order_db.get_order(order_id).status == "confirmed"


def test_cancel_requires_bearer_token_and_known_order(client, auth_headers):
    assert client.patch("/api/checkout/orders/ORD-NOPE/cancel").status_code == 401
    assert client.patch("/api/checkout/orders/ORD-NOPE/cancel", headers=auth_headers).status_code == 404
