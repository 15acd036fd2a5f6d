import logging
from decimal import Decimal
from typing import List, Optional, Sequence
from sqlmodel import Session, select, delete
from agrimart.core.errors import TransientStoreError
from agrimart.db.session import store_operation
from agrimart.models.cart import CartItem
from agrimart.models.product import Product
from agrimart.schemas import CartLine, CartSummary, ProductSnapshot

logger = logging.getLogger(__name__)


def cart_total(lines: Sequence[CartLine]) -> Decimal:
    """Sum of price x quantity using each line's product snapshot"""
    return sum((line.product.price * line.quantity for line in lines), Decimal("0"))


class CartService:
    """Cart lines scoped to an anonymous session id.

    Reads always go to the database; callers re-list the cart after a
    mutation instead of patching their own copy. Failed mutations are logged
    and reported as ``False``, i.e. nothing changed.
    """

    def __init__(self, session: Session):
        self.session = session

    def list_cart_lines(self, session_id: str) -> List[CartLine]:
        """Get all cart lines for a session with product details"""
        try:
            with store_operation(self.session, "list cart lines"):
                rows = self.session.exec(
                    select(CartItem, Product)
                    .join(Product, CartItem.product_id == Product.id)
                    .where(CartItem.session_id == session_id)
                    .order_by(CartItem.created_at, CartItem.id)
                ).all()
        except TransientStoreError:
            return []

        return [
            CartLine(
                id=item.id,
                session_id=item.session_id,
                user_id=item.user_id,
                product_id=item.product_id,
                quantity=item.quantity,
                created_at=item.created_at,
                product=ProductSnapshot.from_product(product),
            )
            for item, product in rows
        ]

    def get_summary(self, session_id: str) -> CartSummary:
        return CartSummary(lines=self.list_cart_lines(session_id))

    def add_or_increment(self, session_id: str, product_id: int, quantity: int = 1) -> bool:
        """Add product to the cart or bump the quantity of its existing line"""
        try:
            with store_operation(self.session, "add to cart"):
                product = self.session.get(Product, product_id)
                if not product:
                    logger.warning("Ignoring add to cart for unknown product %s", product_id)
                    return False

                # Not atomic: two racing adds may create duplicate lines
                existing_item = self.session.exec(
                    select(CartItem).where(
                        CartItem.session_id == session_id,
                        CartItem.product_id == product_id
                    )
                ).first()

                if existing_item:
                    existing_item.quantity = existing_item.quantity + quantity
                    self.session.add(existing_item)
                else:
                    self.session.add(CartItem(
                        session_id=session_id,
                        product_id=product_id,
                        quantity=quantity
                    ))

                self.session.commit()
                return True
        except TransientStoreError:
            return False

    def _get_line(self, session_id: str, line_id: int) -> Optional[CartItem]:
        # A line belonging to another session is treated as missing
        return self.session.exec(
            select(CartItem).where(
                CartItem.id == line_id,
                CartItem.session_id == session_id
            )
        ).first()

    def set_quantity(self, session_id: str, line_id: int, quantity: int) -> bool:
        """Overwrite a line's quantity. Clamping to >= 1 is up to the caller."""
        try:
            with store_operation(self.session, "update cart line"):
                item = self._get_line(session_id, line_id)
                if not item:
                    return False

                item.quantity = quantity
                self.session.add(item)
                self.session.commit()
                return True
        except TransientStoreError:
            return False

    def remove_line(self, session_id: str, line_id: int) -> bool:
        try:
            with store_operation(self.session, "remove cart line"):
                item = self._get_line(session_id, line_id)
                if not item:
                    return False

                self.session.delete(item)
                self.session.commit()
                return True
        except TransientStoreError:
            return False

    def clear_session(self, session_id: str, commit: bool = True) -> int:
        """Delete every line of a session's cart, returning how many were removed.

        The order workflow passes ``commit=False`` so the delete joins its
        transaction, and handles failures itself.
        """
        result = self.session.exec(delete(CartItem).where(CartItem.session_id == session_id))
        if commit:
            self.session.commit()
        return result.rowcount
