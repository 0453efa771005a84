"""Cart models for the storefront"""

from dataclasses import dataclass, field, replace
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from pydantic import BaseModel, Field

from .product import Product


CENTS = Decimal("0.01")


def format_amount(amount: Decimal) -> str:
    """Round a money amount to two places for display"""
    return str(Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP))


def _normalize_variant(value: Optional[str]) -> Optional[str]:
    # "" and None both mean "no size/colour chosen"
    return value or None


@dataclass(frozen=True)
class LineKey:
    """Identity of a cart line: product plus chosen size and colour"""
    product_id: str
    size: Optional[str] = None
    color: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "size", _normalize_variant(self.size))
        object.__setattr__(self, "color", _normalize_variant(self.color))


@dataclass(frozen=True)
class CartLine:
    """One (product, size, colour) entry with its quantity"""
    key: LineKey
    quantity: int

    @property
    def product_id(self) -> str:
        return self.key.product_id

    @property
    def size(self) -> Optional[str]:
        return self.key.size

    @property
    def color(self) -> Optional[str]:
        return self.key.color

    def with_quantity(self, quantity: int) -> "CartLine":
        return replace(self, quantity=quantity)


@dataclass(frozen=True)
class CartState:
    """Ordered cart lines; insertion order is display order"""
    lines: tuple[CartLine, ...] = field(default_factory=tuple)

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self.lines)

    def find(self, key: LineKey) -> Optional[CartLine]:
        return next((line for line in self.lines if line.key == key), None)

    def is_empty(self) -> bool:
        return not self.lines


class DetailedCartItem(Product):
    """A cart line joined with its product"""
    quantity: int = Field(gt=0)
    size: Optional[str] = None
    color: Optional[str] = None

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class OrderTotals(BaseModel):
    """Derived money amounts for a set of cart items"""
    subtotal: Decimal = Decimal("0")
    shipping_fee: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")
    grand_total: Decimal = Decimal("0")
    currency: str = "INR"
    coupon_code: Optional[str] = None

    def formatted(self) -> dict[str, str]:
        """Display strings with two decimal places"""
        return {
            "subtotal": format_amount(self.subtotal),
            "shipping_fee": format_amount(self.shipping_fee),
            "discount": format_amount(self.discount),
            "grand_total": format_amount(self.grand_total),
        }


class CartLineView(BaseModel):
    """Cart line as exposed by the API"""
    product_id: str
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: int

    @classmethod
    def from_line(cls, line: CartLine) -> "CartLineView":
        return cls(
            product_id=line.product_id,
            size=line.size,
            color=line.color,
            quantity=line.quantity,
        )


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: str
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: int = Field(default=1, gt=0)


class UpdateCartItemRequest(BaseModel):
    """Request to replace a line's quantity; zero or less removes it"""
    quantity: int
    size: Optional[str] = None
    color: Optional[str] = None


class ApplyCouponRequest(BaseModel):
    """Request to apply a promotional code"""
    code: str = Field(min_length=1)


class CartResponse(BaseModel):
    """Cart API response"""
    cart_id: str
    lines: list[CartLineView]
    items: list[DetailedCartItem]
    total_items: int
    totals: OrderTotals
    message: Optional[str] = None
