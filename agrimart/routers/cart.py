from fastapi import APIRouter, Depends
from sqlmodel import Session
from agrimart.core.session_id import get_session_id
from agrimart.db.session import get_session
from agrimart.schemas import CartItemCreate, CartItemUpdate, CartSummary
from agrimart.services.cart import CartService

router = APIRouter()

# Every mutation answers with a fresh read of the cart rather than a patched copy.

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

@router.get("/", response_model=CartSummary)
def get_cart(
    session_id: str = Depends(get_session_id),
    service: CartService = Depends(get_cart_service)
):
    """Get the session's cart lines and total"""
    return service.get_summary(session_id)

@router.post("/add", response_model=CartSummary)
def add_to_cart(
    cart_item: CartItemCreate,
    session_id: str = Depends(get_session_id),
    service: CartService = Depends(get_cart_service)
):
    """Add item to cart"""
    service.add_or_increment(session_id, cart_item.product_id, cart_item.quantity)
    return service.get_summary(session_id)

@router.put("/lines/{line_id}", response_model=CartSummary)
def update_cart_line(
    line_id: int,
    cart_update: CartItemUpdate,
    session_id: str = Depends(get_session_id),
    service: CartService = Depends(get_cart_service)
):
    """Update cart line quantity, never below 1. Use DELETE to remove a line."""
    service.set_quantity(session_id, line_id, max(1, cart_update.quantity))
    return service.get_summary(session_id)

@router.delete("/lines/{line_id}", response_model=CartSummary)
def remove_cart_line(
    line_id: int,
    session_id: str = Depends(get_session_id),
    service: CartService = Depends(get_cart_service)
):
    """Remove item from cart"""
    service.remove_line(session_id, line_id)
    return service.get_summary(session_id)
