"""
==============================================================================
Database Connection Management Module
==============================================================================

Database connection management for the relational product store.

This module implements:
- DatabaseManager: Owns the SQLAlchemy engine and session factory
- Session lifecycle helpers (plain session and transactional scope)
- Table management for the ORM metadata

SQLAlchemy Architecture:
-----------------------
    ┌─────────────────┐
    │ DatabaseManager │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │     Engine      │ (Connection pool)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │  sessionmaker   │ (Session factory)
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │    Session      │ (One per repository)
    └─────────────────┘

SQLite Note:
-----------
File databases disable 'check_same_thread'. In-memory databases
("sqlite://" or "sqlite:///:memory:") use StaticPool so every session
sees the same connection and therefore the same tables.

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Generator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from product_catalog.config import get_settings


# Module logger
logger = logging.getLogger(__name__)

# SQLAlchemy declarative base for all models
Base = declarative_base()


def is_memory_url(database_url: str) -> bool:
    """Check whether a SQLAlchemy URL points at an in-memory SQLite database."""
    return database_url in ("sqlite://", "sqlite:///:memory:")


class DatabaseManager:
    """
    Centralized database connection manager.

    Manages the SQLAlchemy engine and session factory. The engine is
    created lazily on first access so the URL can still be changed
    after construction.

    Attributes:
        database_url: SQLAlchemy connection string
        echo: Whether the engine logs SQL statements

    Example:
        >>> db_manager = DatabaseManager("sqlite://")
        >>> db_manager.create_tables()
        >>> with db_manager.session_scope() as session:
        ...     session.add(ProductRecord(name="Laptop", price=50000))
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        echo: Optional[bool] = None
    ) -> None:
        """
        Initialize the database manager.

        Args:
            database_url: Connection string (settings.database_url if None)
            echo: SQL echo flag (settings.sql_echo if None)
        """
        settings = get_settings() if database_url is None or echo is None else None
        self.database_url = database_url if database_url is not None else settings.database_url
        self.echo = echo if echo is not None else settings.sql_echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

        logger.debug(f"DatabaseManager initialized for {self.database_url}")

    # =========================================================================
    # ENGINE MANAGEMENT
    # =========================================================================

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine, creating it on first access."""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """
        Create the SQLAlchemy engine with appropriate configuration.

        - SQLite: disables check_same_thread, StaticPool when in memory
        - Other databases: connection pooling with pre-ping
        """
        database_url = self.database_url

        if database_url.startswith("sqlite"):
            engine_kwargs = {
                "connect_args": {"check_same_thread": False},
                "echo": self.echo,
            }
            if is_memory_url(database_url):
                engine_kwargs["poolclass"] = StaticPool

            engine = create_engine(database_url, **engine_kwargs)

            @event.listens_for(engine, "connect")
            def set_sqlite_pragma(dbapi_connection, connection_record):
                cursor = dbapi_connection.cursor()
                cursor.execute("PRAGMA foreign_keys=ON")
                cursor.close()

            logger.info(f"Created SQLite engine: {database_url}")

        else:
            engine = create_engine(
                database_url,
                pool_size=5,
                max_overflow=10,
                pool_timeout=30,
                pool_recycle=1800,
                pool_pre_ping=True,
                echo=self.echo,
            )

            logger.info(f"Created database engine with pooling: {engine.url!r}")

        return engine

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    @property
    def session_factory(self) -> sessionmaker:
        """Get the session factory, creating it on first access."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._session_factory

    def get_session(self) -> Session:
        """
        Get a new database session.

        The caller is responsible for closing the session.
        """
        return self.session_factory()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Provide a transactional scope around a series of operations.

        Commits on success, rolls back on exception and always closes
        the session.

        Yields:
            SQLAlchemy Session instance
        """
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    # =========================================================================
    # TABLE MANAGEMENT
    # =========================================================================

    def create_tables(self) -> None:
        """Create all tables that don't already exist."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified")

    def drop_tables(self) -> None:
        """
        Drop all tables defined in the models.

        WARNING: This will delete all data!
        """
        Base.metadata.drop_all(bind=self.engine)
        logger.warning("All database tables dropped")

    def reset_database(self) -> None:
        """Drop and recreate all tables."""
        self.drop_tables()
        self.create_tables()
        logger.warning("Database reset complete")

    # =========================================================================
    # CONNECTION MANAGEMENT
    # =========================================================================

    def verify_connection(self) -> bool:
        """
        Verify database connection is working.

        Returns:
            True if connection successful, False otherwise
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.debug("Database connection verified")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        """Dispose of the connection pool."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connection pool disposed")

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"DatabaseManager(url={self.database_url!r})"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

@lru_cache(maxsize=1)
def get_database_manager() -> DatabaseManager:
    """
    Get the process-wide DatabaseManager built from settings.

    Returns:
        Shared DatabaseManager instance
    """
    return DatabaseManager()

