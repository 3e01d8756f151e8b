"""
==============================================================================
Catalog Integration Tests
==============================================================================

Full add → get → update → filter → delete flow, and application wiring.

==============================================================================
"""

from decimal import Decimal

import pytest

from product_catalog.config import Settings
from product_catalog.core.exceptions import StorageError
from product_catalog.db import DatabaseManager
from product_catalog.main import CatalogApplication, build_repository
from product_catalog.repositories import (
    InMemoryProductRepository,
    ProductRepository,
    SqlAlchemyProductRepository,
)
from product_catalog.services.product_service import ProductService


class TestFullCatalogFlow:
    """End-to-end catalog scenario against both backends."""

    def test_full_flow(self, service: ProductService, repository: ProductRepository):
        """Test add, get, update, filter and delete in sequence."""
        # Add products
        p1 = service.add_product("Laptop", 50000.0)
        p2 = service.add_product("Mobile", 20000.0)
        p3 = service.add_product("Tablet", 30000.0)
        assert repository.count() == 3

        # Get all products
        assert len(service.get_all_products()) == 3

        # Get product by id
        fetched = service.get_product_by_id(p2.id)
        assert fetched is not None
        assert fetched.name == "Mobile"

        # Update product name
        updated_name = service.update_name(p1.id, "Gaming Laptop")
        assert updated_name.name == "Gaming Laptop"

        # Update product price
        updated_price = service.update_price(p3.id, 35000.0)
        assert updated_price.price == Decimal("35000")

        # Filter by name (case-insensitive)
        name_filtered = service.filter_by_name("mobile")
        assert len(name_filtered) == 1
        assert name_filtered[0].name == "Mobile"

        # Filter by price
        price_filtered = service.filter_by_price(20000.0)
        assert len(price_filtered) == 1
        assert price_filtered[0].price == Decimal("20000")

        # Filter by price range
        range_filtered = service.filter_by_price_range(25000.0, 60000.0)
        assert sorted(p.name for p in range_filtered) == ["Gaming Laptop", "Tablet"]

        # Delete product
        service.delete_product(p2.id)
        assert repository.exists_by_id(p2.id) is False

        # Final check
        remaining = service.get_all_products()
        assert [(p.name, p.price) for p in remaining] == [
            ("Gaming Laptop", Decimal("50000")),
            ("Tablet", Decimal("35000")),
        ]


class TestBuildRepository:
    """Tests for repository selection from settings."""

    def test_memory_backend(self):
        """Test memory backend needs no session."""
        repository = build_repository(Settings(storage_backend="memory"))
        assert isinstance(repository, InMemoryProductRepository)

    def test_sql_backend(self, db):
        """Test SQL backend wraps the given session."""
        repository = build_repository(Settings(storage_backend="sql"), db)
        assert isinstance(repository, SqlAlchemyProductRepository)

    def test_sql_backend_requires_session(self):
        """Test SQL backend without a session is refused."""
        with pytest.raises(ValueError):
            build_repository(Settings(storage_backend="sql"))


class TestCatalogApplication:
    """Tests for the application lifecycle."""

    def test_memory_application(self):
        """Test the memory-backed application serves the catalog."""
        settings = Settings(storage_backend="memory")

        with CatalogApplication(settings) as application:
            application.service.add_product("Laptop", 50000)
            assert application.service.count_products() == 1

    def test_service_unavailable_after_stop(self):
        """Test the service cannot be used once stopped."""
        application = CatalogApplication(Settings(storage_backend="memory"))
        application.start()
        application.stop()

        with pytest.raises(RuntimeError):
            application.service

    def test_sqlite_file_persists_between_runs(self, tmp_path):
        """Test products survive an application restart."""
        db_file = tmp_path / "nested" / "catalog.db"
        settings = Settings(
            storage_backend="sql",
            database_url=f"sqlite:///{db_file}"
        )

        with CatalogApplication(settings) as application:
            laptop = application.service.add_product("Laptop", 50000)

        assert db_file.exists()

        with CatalogApplication(settings) as application:
            fetched = application.service.get_product_by_id(laptop.id)

        assert fetched is not None
        assert fetched.name == "Laptop"
        assert fetched.price == Decimal("50000")

    def test_caller_db_manager_left_open(self, db_manager: DatabaseManager):
        """Test stop does not dispose a DatabaseManager passed in by the caller."""
        settings = Settings(storage_backend="sql", database_url="sqlite://")
        engine = db_manager.engine

        with CatalogApplication(settings, db_manager=db_manager) as application:
            application.service.add_product("Laptop", 50000)

        assert db_manager.engine is engine
        with db_manager.session_scope() as session:
            assert SqlAlchemyProductRepository(session).count() == 1

    def test_failed_start_disposes_own_db_manager(self, tmp_path, monkeypatch):
        """Test a startup failure releases the DatabaseManager start built."""
        disposed = []

        class RecordingDatabaseManager(DatabaseManager):
            def dispose(self) -> None:
                disposed.append(self)
                super().dispose()

        def failing_init_db(db_manager):
            raise StorageError("initialize", "database connection check failed")

        monkeypatch.setattr("product_catalog.main.DatabaseManager", RecordingDatabaseManager)
        monkeypatch.setattr("product_catalog.main.init_db", failing_init_db)

        settings = Settings(
            storage_backend="sql",
            database_url=f"sqlite:///{tmp_path / 'catalog.db'}"
        )
        application = CatalogApplication(settings)

        with pytest.raises(StorageError):
            application.start()

        assert len(disposed) == 1
        with pytest.raises(RuntimeError):
            application.service

    def test_failed_start_keeps_caller_db_manager(self, db_manager: DatabaseManager, monkeypatch):
        """Test a startup failure leaves a caller's DatabaseManager usable."""
        def failing_init_db(manager):
            raise StorageError("initialize", "database connection check failed")

        monkeypatch.setattr("product_catalog.main.init_db", failing_init_db)
        settings = Settings(storage_backend="sql", database_url="sqlite://")
        engine = db_manager.engine

        with pytest.raises(StorageError):
            CatalogApplication(settings, db_manager=db_manager).start()

        assert db_manager.engine is engine
        assert db_manager.verify_connection() is True
