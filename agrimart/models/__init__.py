# Import all models to register them with SQLModel
from agrimart.models.product import Product, ProductCategory
from agrimart.models.cart import CartItem
from agrimart.models.order import Order, OrderItem, OrderStatus, PaymentMethod

__all__ = [
    "Product",
    "ProductCategory",
    "CartItem",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentMethod",
]
