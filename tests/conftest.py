"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides isolated databases, repositories and services for each test.

==============================================================================
"""

import pytest
from typing import Generator, List
from sqlalchemy.orm import Session

from product_catalog.catalog.models import Product
from product_catalog.db.database import DatabaseManager
from product_catalog.db.init_db import init_db
from product_catalog.repositories import (
    InMemoryProductRepository,
    ProductRepository,
    SqlAlchemyProductRepository,
)
from product_catalog.services.product_service import ProductService


# In-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def db_manager() -> Generator[DatabaseManager, None, None]:
    """Create a fresh in-memory database for each test."""
    manager = DatabaseManager(SQLALCHEMY_TEST_DATABASE_URL, echo=False)
    init_db(manager)
    try:
        yield manager
    finally:
        manager.drop_tables()
        manager.dispose()


@pytest.fixture(scope="function")
def db(db_manager: DatabaseManager) -> Generator[Session, None, None]:
    """Open a session on the test database."""
    session = db_manager.get_session()
    try:
        yield session
    finally:
        session.close()


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================

@pytest.fixture
def sql_repository(db: Session) -> SqlAlchemyProductRepository:
    """SQLAlchemy repository bound to the test session."""
    return SqlAlchemyProductRepository(db)


@pytest.fixture
def memory_repository() -> InMemoryProductRepository:
    """Empty in-memory repository."""
    return InMemoryProductRepository()


@pytest.fixture(params=["sql", "memory"])
def repository(request) -> ProductRepository:
    """Run a test once against each repository implementation."""
    if request.param == "sql":
        return request.getfixturevalue("sql_repository")
    return request.getfixturevalue("memory_repository")


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def service(repository: ProductRepository) -> ProductService:
    """Product service on top of the parametrized repository."""
    return ProductService(repository)


@pytest.fixture
def seeded_products(service: ProductService) -> List[Product]:
    """Laptop, Mobile and Tablet added in that order."""
    return [
        service.add_product("Laptop", 50000.0),
        service.add_product("Mobile", 20000.0),
        service.add_product("Tablet", 30000.0),
    ]
