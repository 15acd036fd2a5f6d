import logging
from typing import List, Optional
from sqlmodel import Session, select
from agrimart.core.errors import TransientStoreError
from agrimart.db.session import store_operation
from agrimart.models.product import Product

logger = logging.getLogger(__name__)

class CatalogService:
    def __init__(self, session: Session):
        self.session = session

    def list_products(self) -> List[Product]:
        """All products, crops before fertilizers, alphabetical within a category"""
        try:
            with store_operation(self.session, "list products"):
                return list(self.session.exec(
                    select(Product).order_by(Product.category, Product.name)
                ).all())
        except TransientStoreError:
            return []

    def get_product(self, product_id: int) -> Optional[Product]:
        try:
            with store_operation(self.session, f"get product {product_id}"):
                return self.session.get(Product, product_id)
        except TransientStoreError:
            return None
