from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from agrimart.core.session_id import get_session_id
from agrimart.db.session import get_session
from agrimart.models.order import OrderStatus
from agrimart.schemas import CheckoutRequest, OrderDetail, OrderReceipt
from agrimart.services.cart import CartService, cart_total
from agrimart.services.order import OrderService

router = APIRouter()

def get_order_service(session: Session = Depends(get_session)) -> OrderService:
    return OrderService(session)

@router.post("/", response_model=OrderReceipt, status_code=status.HTTP_201_CREATED)
def create_order(
    checkout: CheckoutRequest,
    session_id: str = Depends(get_session_id),
    session: Session = Depends(get_session),
    service: OrderService = Depends(get_order_service)
):
    """Place a cash-on-delivery order for everything in the session's cart.

    EmptyCartError and OrderCreationError are turned into 400/502 responses
    by the handlers registered in main.
    """
    cart_lines = CartService(session).list_cart_lines(session_id)
    order_id = service.place_order(
        session_id=session_id,
        cart_lines=cart_lines,
        customer_name=checkout.customer_name,
        customer_email=checkout.customer_email,
        shipping_address=checkout.shipping_address,
        phone=checkout.phone
    )
    return OrderReceipt(
        order_id=order_id,
        customer_name=checkout.customer_name,
        customer_email=checkout.customer_email,
        total_amount=cart_total(cart_lines),
        status=OrderStatus.PENDING,
        message=(
            f"Thank you for your order, {checkout.customer_name}! Your order has been placed "
            f"successfully. We'll contact you at {checkout.customer_email} for confirmation."
        )
    )

@router.get("/{order_id}", response_model=OrderDetail)
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    order = service.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
