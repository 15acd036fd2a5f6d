from typing import List, Optional
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, Relationship, SQLModel

class PaymentMethod(str, Enum):
    CASH_ON_DELIVERY = "cash_on_delivery"

class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class OrderItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="order.id", index=True)
    product_id: int = Field(foreign_key="product.id")
    quantity: int
    # Unit price at checkout, independent of later product price changes
    price: Decimal = Field(max_digits=12, decimal_places=2)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class Order(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: Optional[str] = Field(default=None, index=True)

    # Customer
    customer_name: str
    customer_email: str
    phone: str

    # Order Details
    total_amount: Decimal = Field(max_digits=12, decimal_places=2)

    # Payment is collected on delivery; recorded here, never processed
    payment_method: PaymentMethod = Field(default=PaymentMethod.CASH_ON_DELIVERY)

    # Status transitions belong to fulfillment, this service only creates orders
    status: OrderStatus = Field(default=OrderStatus.PENDING)

    # Shipping
    shipping_address: str

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    # Relationships
    items: List["OrderItem"] = Relationship(sa_relationship_kwargs={"cascade": "all, delete-orphan"})
