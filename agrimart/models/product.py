from typing import Optional
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import Enum as SAEnum

class ProductCategory(str, Enum):
    CROPS = "crops"
    FERTILIZERS = "fertilizers"

class Product(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)

    # Basic Info
    name: str = Field(index=True)
    description: str = ""
    # Stored by value ("crops"), so ordering by category is alphabetical by value
    category: ProductCategory = Field(
        sa_column=Column(
            SAEnum(ProductCategory, values_callable=lambda x: [e.value for e in x]),
            index=True,
            nullable=False
        )
    )

    # Pricing
    price: Decimal = Field(max_digits=12, decimal_places=2)
    unit: str = "per kg"

    # Inventory
    stock: int = Field(default=0, ge=0)

    image_url: Optional[str] = None

    # Timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
