"""Shared pytest fixtures: in-memory database, seeded catalog and API client."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from agrimart.db.session import get_session
from agrimart.main import app
from agrimart.models.product import Product, ProductCategory


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def products(session):
    """Wheat (100), Rice (50) and Urea (266.50), inserted out of display order."""
    items = [
        Product(
            name="Urea",
            category=ProductCategory.FERTILIZERS,
            price=Decimal("266.50"),
            unit="per 45 kg bag",
            stock=40,
        ),
        Product(
            name="Wheat",
            category=ProductCategory.CROPS,
            price=Decimal("100.00"),
            unit="per kg",
            stock=500,
        ),
        Product(
            name="Rice",
            category=ProductCategory.CROPS,
            price=Decimal("50.00"),
            unit="per kg",
            stock=300,
        ),
    ]
    for item in items:
        session.add(item)
    session.commit()
    for item in items:
        session.refresh(item)
    return {item.name: item for item in items}


@pytest.fixture
def client(session):
    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()
