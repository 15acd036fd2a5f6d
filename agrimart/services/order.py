import logging
from typing import Optional, Sequence
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from agrimart.core.errors import EmptyCartError, OrderCreationError
from agrimart.models.order import Order, OrderItem, OrderStatus, PaymentMethod
from agrimart.models.product import Product
from agrimart.schemas import CartLine, OrderDetail, OrderLineDetail
from agrimart.services.cart import CartService, cart_total

logger = logging.getLogger(__name__)

class OrderService:
    def __init__(self, session: Session):
        self.session = session

    def place_order(
        self,
        session_id: str,
        cart_lines: Sequence[CartLine],
        customer_name: str,
        customer_email: str,
        shipping_address: str,
        phone: str,
    ) -> int:
        """Turn the given cart lines into a pending cash-on-delivery order.

        Prices come from the lines' product snapshots, not from a fresh read.
        The order, its items and the cart clear-out are committed together;
        any failure rolls everything back and raises OrderCreationError, so an
        order id is only returned when the whole checkout went through.
        """
        if not cart_lines:
            raise EmptyCartError()

        total = cart_total(cart_lines)

        order = Order(
            customer_name=customer_name,
            customer_email=customer_email,
            phone=phone,
            shipping_address=shipping_address,
            total_amount=total,
            status=OrderStatus.PENDING,
            payment_method=PaymentMethod.CASH_ON_DELIVERY,
        )
        try:
            self.session.add(order)
            self.session.flush()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Failed to create order for session %s", session_id)
            raise OrderCreationError(f"Failed to place order: {e}") from e

        try:
            for line in cart_lines:
                self.session.add(OrderItem(
                    order_id=order.id,
                    product_id=line.product_id,
                    quantity=line.quantity,
                    price=line.product.price
                ))
            self.session.flush()

            CartService(self.session).clear_session(session_id, commit=False)
            self.session.commit()
        except SQLAlchemyError as e:
            # Nothing was committed yet, so this also drops the order row
            self.session.rollback()
            logger.exception("Failed to record order lines for session %s", session_id)
            raise OrderCreationError(f"Failed to place order: {e}") from e

        logger.info("Placed order %s for session %s, total %s", order.id, session_id, total)
        return order.id

    def get_order(self, order_id: int) -> Optional[OrderDetail]:
        order = self.session.get(Order, order_id)
        if not order:
            return None

        items = self.session.exec(
            select(OrderItem, Product)
            .join(Product, OrderItem.product_id == Product.id, isouter=True)
            .where(OrderItem.order_id == order.id)
            .order_by(OrderItem.id)
        ).all()

        return OrderDetail(
            id=order.id,
            customer_name=order.customer_name,
            customer_email=order.customer_email,
            phone=order.phone,
            shipping_address=order.shipping_address,
            total_amount=order.total_amount,
            status=order.status,
            payment_method=order.payment_method,
            created_at=order.created_at,
            items=[
                OrderLineDetail(
                    product_id=item.product_id,
                    product_name=product.name if product else None,
                    quantity=item.quantity,
                    price=item.price
                )
                for item, product in items
            ]
        )
