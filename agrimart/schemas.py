from typing import List, Optional
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, computed_field, field_validator
from agrimart.core.config import settings
from agrimart.models.product import Product, ProductCategory
from agrimart.models.order import OrderStatus, PaymentMethod


def format_amount(amount: Decimal) -> str:
    """Render an amount with thousands separators, e.g. ``₹1,250`` or ``₹99.50``."""
    if amount == amount.to_integral_value():
        return f"{settings.CURRENCY_SYMBOL}{amount:,.0f}"
    return f"{settings.CURRENCY_SYMBOL}{amount:,.2f}"


class ProductSnapshot(BaseModel):
    """Copy of the product fields a cart line needs, taken when the cart is read."""
    id: int
    name: str
    description: str = ""
    category: ProductCategory
    price: Decimal
    unit: str
    stock: int
    image_url: Optional[str] = None

    @classmethod
    def from_product(cls, product: Product) -> "ProductSnapshot":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            category=product.category,
            price=product.price,
            unit=product.unit,
            stock=product.stock,
            image_url=product.image_url,
        )


class CartLine(BaseModel):
    id: int
    session_id: Optional[str] = None
    user_id: Optional[str] = None
    product_id: int
    quantity: int
    created_at: datetime
    product: ProductSnapshot

    @computed_field
    @property
    def line_total(self) -> Decimal:
        return self.product.price * self.quantity


class CartSummary(BaseModel):
    lines: List[CartLine]

    @computed_field
    @property
    def item_count(self) -> int:
        return len(self.lines)

    @computed_field
    @property
    def total(self) -> Decimal:
        return sum((line.line_total for line in self.lines), Decimal("0"))

    @computed_field
    @property
    def display_total(self) -> str:
        return format_amount(self.total)


class CartItemCreate(BaseModel):
    product_id: int
    quantity: int = Field(default=1, ge=1, le=settings.MAX_CART_QUANTITY)


class CartItemUpdate(BaseModel):
    quantity: int = Field(le=settings.MAX_CART_QUANTITY)


class CheckoutRequest(BaseModel):
    customer_name: str = Field(min_length=1)
    customer_email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    shipping_address: str = Field(min_length=1)
    phone: str = Field(pattern=r"^[0-9]{10}$")

    @field_validator("customer_name", "customer_email", "shipping_address", "phone", mode="before")
    @classmethod
    def strip_whitespace(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value


class OrderReceipt(BaseModel):
    order_id: int
    customer_name: str
    customer_email: str
    total_amount: Decimal
    status: OrderStatus
    message: str


class OrderLineDetail(BaseModel):
    product_id: int
    product_name: Optional[str] = None
    quantity: int
    price: Decimal

    @computed_field
    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class OrderDetail(BaseModel):
    id: int
    customer_name: str
    customer_email: str
    phone: str
    shipping_address: str
    total_amount: Decimal
    status: OrderStatus
    payment_method: PaymentMethod
    created_at: datetime
    items: List[OrderLineDetail]

    @computed_field
    @property
    def display_total(self) -> str:
        return format_amount(self.total_amount)
