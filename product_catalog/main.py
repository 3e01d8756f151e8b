"""
==============================================================================
Product Catalog Service - Application Wiring
==============================================================================

Builds a ready-to-use ProductService from Settings:
- Logging configuration
- Database initialization (SQL backend)
- Repository selection (sql / memory)
- Session and engine lifecycle

Usage:
------
    from product_catalog.main import CatalogApplication

    with CatalogApplication() as application:
        laptop = application.service.add_product("Laptop", 50000)

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.orm import Session

from product_catalog.config import Settings, get_settings
from product_catalog.db import DatabaseManager, init_db
from product_catalog.repositories import (
    InMemoryProductRepository,
    ProductRepository,
    SqlAlchemyProductRepository,
)
from product_catalog.services import ProductService


# Module logger
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ============================================================================
# LOGGING SETUP
# ============================================================================

def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.effective_log_level,
        format=LOG_FORMAT
    )


# ============================================================================
# REPOSITORY FACTORY
# ============================================================================

def build_repository(
    settings: Settings,
    session: Optional[Session] = None
) -> ProductRepository:
    """
    Build the repository selected by settings.storage_backend.

    Args:
        settings: Application settings
        session: Session for the SQL backend (required when backend is sql)

    Returns:
        ProductRepository implementation

    Raises:
        ValueError: If the SQL backend is selected without a session
    """
    if settings.uses_memory_storage:
        return InMemoryProductRepository()

    if session is None:
        raise ValueError("SQL storage backend requires a database session")

    return SqlAlchemyProductRepository(session)


# ============================================================================
# APPLICATION
# ============================================================================

class CatalogApplication:
    """
    Catalog application lifecycle manager.

    Handles:
    - Startup: logging, database tables, session, service
    - Shutdown: session close, connection pool disposal

    Example:
        >>> with CatalogApplication(Settings(storage_backend="memory")) as app:
        ...     app.service.add_product("Laptop", 50000)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db_manager: Optional[DatabaseManager] = None
    ) -> None:
        """
        Initialize the application.

        Args:
            settings: Application settings (global settings if None)
            db_manager: DatabaseManager for the SQL backend, left open on
                stop (built from settings and disposed on stop if None)
        """
        self._settings = settings if settings is not None else get_settings()
        self._db_manager = db_manager
        self._owns_db_manager = False
        self._session: Optional[Session] = None
        self._service: Optional[ProductService] = None

    def start(self) -> ProductService:
        """Run startup tasks and return the wired service."""
        configure_logging(self._settings)

        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name} ({self._settings.storage_backend} storage)")
        logger.info("=" * 60)

        if self._settings.uses_memory_storage:
            repository = build_repository(self._settings)
        else:
            repository = self._start_sql_storage()

        self._service = ProductService(repository)

        logger.info(f"✅ {self._settings.app_name} ready")
        return self._service

    def _start_sql_storage(self) -> ProductRepository:
        """Initialize the database and open the session used by the service."""
        self._settings.ensure_directories()
        if self._db_manager is None:
            self._db_manager = DatabaseManager(
                self._settings.database_url,
                echo=self._settings.sql_echo
            )
            self._owns_db_manager = True

        try:
            init_db(self._db_manager)
            self._session = self._db_manager.get_session()
            return build_repository(self._settings, self._session)
        except Exception:
            logger.error("❌ Database startup failed, releasing resources")
            self._release_storage()
            raise

    def _release_storage(self) -> None:
        """Close the session and dispose a DatabaseManager built by start()."""
        if self._session is not None:
            self._session.close()
            self._session = None

        if self._owns_db_manager:
            self._db_manager.dispose()
            self._db_manager = None
            self._owns_db_manager = False

    def stop(self) -> None:
        """Release the session and the connection pool."""
        logger.info("🛑 Shutting down...")

        self._release_storage()
        self._service = None
        logger.info("✅ Shutdown complete")

    @property
    def service(self) -> ProductService:
        """Get the running ProductService."""
        if self._service is None:
            raise RuntimeError("CatalogApplication has not been started")
        return self._service

    def __enter__(self) -> CatalogApplication:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
