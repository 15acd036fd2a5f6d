from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from agrimart.db.session import get_session
from agrimart.models.product import Product, ProductCategory
from agrimart.services.catalog import CatalogService

router = APIRouter()

def get_catalog_service(session: Session = Depends(get_session)) -> CatalogService:
    return CatalogService(session)

@router.get("/", response_model=List[Product])
def read_products(
    category: Optional[ProductCategory] = None,
    service: CatalogService = Depends(get_catalog_service)
):
    """List the catalog, optionally narrowed to one category"""
    products = service.list_products()
    if category:
        products = [p for p in products if p.category == category]
    return products

@router.get("/{product_id}", response_model=Product)
def read_product(product_id: int, service: CatalogService = Depends(get_catalog_service)):
    product = service.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
