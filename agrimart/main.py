from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from agrimart.core.config import settings
from agrimart.core.errors import EmptyCartError, OrderCreationError
from agrimart.core.logging import configure_logging
from agrimart.db.session import create_db_and_tables

# Import models to ensure they are registered with SQLModel metadata
from agrimart.models.product import Product
from agrimart.models.cart import CartItem
from agrimart.models.order import Order, OrderItem

configure_logging(settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
    description="API for the AgriMart crops & fertilizers store"
)

@app.get("/")
def read_root():
    return {"message": "Welcome to AgriMart API. Visit /docs for Swagger UI."}

@app.exception_handler(EmptyCartError)
async def empty_cart_handler(request: Request, exc: EmptyCartError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

@app.exception_handler(OrderCreationError)
async def order_creation_handler(request: Request, exc: OrderCreationError):
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)})

from agrimart.routers import products, cart, orders

app.include_router(products.router, prefix="/api/v1/products", tags=["products"])
app.include_router(cart.router, prefix="/api/v1/cart", tags=["cart"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["orders"])

# Add CORS
from fastapi.middleware.cors import CORSMiddleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
