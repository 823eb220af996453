"""
Pytest configuration and fixtures for ProdCats tests.
"""

import os

# Settings are read at import time, so the test environment goes in first
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_DATA", "false")

import pytest
from datetime import datetime, timezone, timedelta
from decimal import Decimal
from typing import Callable, Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi import FastAPI
from fastapi.testclient import TestClient

from prodcats.core.database import Base, get_db
from prodcats.core.errors import register_error_handlers
from prodcats.models.category import Category
from prodcats.models.product import Product


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_engine():
    """Create a test database engine."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def test_app(db_session) -> FastAPI:
    """Create a FastAPI test app without lifespan events or middleware."""
    from prodcats.api.endpoints import products, categories

    test_app = FastAPI(title="ProdCats - Test", version="1.0.0")
    register_error_handlers(test_app)

    test_app.include_router(products.router, prefix="/api/products", tags=["products"])
    test_app.include_router(
        categories.router, prefix="/api/categories", tags=["categories"]
    )

    # Override database dependency
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db

    return test_app


@pytest.fixture(scope="function")
def client(test_app) -> TestClient:
    """Create a test client without entering context manager."""
    return TestClient(test_app, raise_server_exceptions=False)


@pytest.fixture(scope="function")
def test_category(db_session) -> Category:
    """Create an active category."""
    category = Category(
        name="Electronics",
        description="Electronic devices and gadgets",
        is_active=True,
    )
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture(scope="function")
def inactive_category(db_session) -> Category:
    """Create a soft-deleted category."""
    category = Category(name="Toys - Inactive", description="Toys and games", is_active=False)
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture(scope="function")
def make_product(db_session, test_category) -> Callable[..., Product]:
    """Factory that inserts a product, defaulting to the test category."""

    def _make_product(**overrides) -> Product:
        values = {
            "name": "Test Product",
            "description": "A product used in tests",
            "price": Decimal("10.00"),
            "category_id": test_category.id,
            "stock_quantity": 5,
            "is_active": True,
        }
        values.update(overrides)
        product = Product(**values)
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)
        return product

    return _make_product


@pytest.fixture(scope="function")
def test_product(make_product) -> Product:
    """Create a single active product."""
    return make_product(
        name="Wireless Bluetooth Headphones",
        description="Premium noise-cancelling headphones with 30-hour battery life",
        price=Decimal("199.99"),
        stock_quantity=45,
    )


@pytest.fixture(scope="function")
def catalog(db_session, make_product, test_category) -> dict:
    """
    Create a small mixed catalog.

    Two categories, one soft-deleted product, one out-of-stock product and
    distinct created dates so every sort key is unambiguous.
    """
    books = Category(name="Books", description="Books and reading materials")
    db_session.add(books)
    db_session.commit()
    db_session.refresh(books)

    now = datetime.now(timezone.utc)
    products = {
        "headphones": make_product(
            name="Wireless Bluetooth Headphones",
            description="Premium noise-cancelling headphones with 30-hour battery life",
            price=Decimal("199.99"),
            stock_quantity=45,
            created_date=now - timedelta(days=30),
        ),
        "earbuds": make_product(
            name="Wireless Earbuds",
            description="Compact earbuds with charging case",
            price=Decimal("89.50"),
            stock_quantity=0,
            created_date=now - timedelta(days=3),
        ),
        "studio": make_product(
            name="Studio Headphones",
            description="Wired reference headphones",
            price=Decimal("149.00"),
            stock_quantity=7,
            created_date=now - timedelta(days=10),
        ),
        "watch": make_product(
            name="Smart Watch",
            description=None,
            price=Decimal("249.99"),
            stock_quantity=0,
            created_date=now - timedelta(days=5),
        ),
        "novel": make_product(
            name="Mystery Novel",
            description="Bestselling mystery thriller about WIRELESS spies",
            price=Decimal("14.99"),
            category_id=books.id,
            stock_quantity=78,
            created_date=now - timedelta(days=9),
        ),
        "retired": make_product(
            name="Wireless Headphones Classic",
            description="Discontinued wireless headphones",
            price=Decimal("59.99"),
            stock_quantity=3,
            is_active=False,
            created_date=now - timedelta(days=60),
        ),
    }
    return {"products": products, "electronics": test_category, "books": books}
