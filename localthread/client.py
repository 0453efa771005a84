"""
Storefront API Client

Async HTTP client for the LocalThread storefront API.
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class StorefrontClient:
    """
    Client for the storefront REST API.

    Usage:
        client = StorefrontClient("http://localhost:8001", token="...")
        cart = await client.create_cart()
        cart = await client.add_to_cart(cart["cart_id"], "1", size="M", color="black")
        result = await client.checkout(cart["cart_id"], shipping_address={...})
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize storefront client.

        Args:
            base_url: Base URL of the storefront API
            token: Bearer token sent with every request, if any
            timeout: Request timeout in seconds
            transport: Custom httpx transport (e.g. ASGITransport in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close HTTP client"""
        await self._http_client.aclose()

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        body: Optional[dict] = None,
        params: Optional[dict] = None,
    ) -> Any:
        """Make an HTTP request and return the decoded JSON body"""
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        response = await self._http_client.request(
            method=method,
            url=path,
            headers=self._headers(),
            json=body,
            params=params,
        )

        if response.status_code >= 400:
            logger.error(f"Request failed: {method} {path} {response.status_code} - {response.text}")
            response.raise_for_status()

        return response.json()

    # ==================== Product APIs ====================

    async def search_products(
        self,
        query: Optional[str] = None,
        category: Optional[list[str]] = None,
        sort_by: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        page: int = 1,
    ) -> dict:
        """Search products in the catalog"""
        params = {
            "q": query,
            "category": category,
            "sort_by": sort_by,
            "min_price": min_price,
            "max_price": max_price,
            "page": page,
        }
        return await self._request("GET", "/api/products", params=params)

    async def get_product(self, product_id: str) -> dict:
        """Get product details"""
        return await self._request("GET", f"/api/products/{product_id}")

    async def get_categories(self) -> list[str]:
        """Get available product categories"""
        return await self._request("GET", "/api/products/categories")

    # ==================== Cart APIs ====================

    async def create_cart(self) -> dict:
        """Create a new shopping cart"""
        return await self._request("POST", "/api/cart")

    async def get_cart(self, cart_id: str) -> dict:
        """Get cart by ID"""
        return await self._request("GET", f"/api/cart/{cart_id}")

    async def add_to_cart(
        self,
        cart_id: str,
        product_id: str,
        quantity: int = 1,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> dict:
        """Add item to cart"""
        return await self._request(
            "POST",
            f"/api/cart/{cart_id}/items",
            body={"product_id": product_id, "quantity": quantity, "size": size, "color": color},
        )

    async def update_cart_item(
        self,
        cart_id: str,
        product_id: str,
        quantity: int,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> dict:
        """Replace a line's quantity"""
        return await self._request(
            "PUT",
            f"/api/cart/{cart_id}/items/{product_id}",
            body={"quantity": quantity, "size": size, "color": color},
        )

    async def remove_from_cart(
        self,
        cart_id: str,
        product_id: str,
        size: Optional[str] = None,
        color: Optional[str] = None,
    ) -> dict:
        """Remove a line from the cart"""
        return await self._request(
            "DELETE",
            f"/api/cart/{cart_id}/items/{product_id}",
            params={"size": size, "color": color},
        )

    async def clear_cart(self, cart_id: str) -> dict:
        """Remove every line from the cart"""
        return await self._request("DELETE", f"/api/cart/{cart_id}")

    async def apply_coupon(self, cart_id: str, code: str) -> dict:
        """Apply a promotional code"""
        return await self._request("POST", f"/api/cart/{cart_id}/coupon", body={"code": code})

    # ==================== Wishlist APIs ====================

    async def create_wishlist(self) -> dict:
        """Create a new wishlist"""
        return await self._request("POST", "/api/wishlist")

    async def toggle_wishlist(self, wishlist_id: str, product_id: str) -> dict:
        """Save or unsave a product"""
        return await self._request("POST", f"/api/wishlist/{wishlist_id}/items/{product_id}/toggle")

    async def move_to_cart(self, wishlist_id: str, product_id: str, cart_id: str) -> dict:
        """Move a saved product into a cart"""
        return await self._request(
            "POST",
            f"/api/wishlist/{wishlist_id}/items/{product_id}/move-to-cart",
            params={"cart_id": cart_id},
        )

    # ==================== Checkout APIs ====================

    async def checkout(
        self,
        cart_id: str,
        shipping_address: dict,
        payment_method: str = "card",
        coupon_code: Optional[str] = None,
    ) -> dict:
        """Place an order for a cart; requires a bearer token"""
        body = {
            "cart_id": cart_id,
            "shipping_address": shipping_address,
            "payment_method": payment_method,
        }

        if coupon_code:
            body["coupon_code"] = coupon_code

        return await self._request("POST", "/api/checkout", body=body)

    async def get_order(self, order_id: str) -> dict:
        """Get order details"""
        return await self._request("GET", f"/api/checkout/orders/{order_id}")

    async def list_orders(self, limit: int = 50) -> list[dict]:
        """List recent orders"""
        return await self._request("GET", "/api/checkout/orders", params={"limit": limit})

    async def update_order_status(
        self,
        order_id: str,
        status: str,
        tracking_number: Optional[str] = None,
    ) -> dict:
        """Move an order to another status"""
        body = {"status": status}

        if tracking_number:
            body["tracking_number"] = tracking_number

        return await self._request("PATCH", f"/api/checkout/orders/{order_id}/status", body=body)

    async def cancel_order(self, order_id: str) -> dict:
        """Cancel an order that has not been processed yet"""
        return await self._request("PATCH", f"/api/checkout/orders/{order_id}/cancel")
