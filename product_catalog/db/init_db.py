"""
==============================================================================
Database Initialization Module
==============================================================================

Database setup utilities for the relational product store.

Initialization Flow:
-------------------
1. Create all tables from ORM models
2. Verify the connection answers a trivial query
3. Log initialization status

Usage:
------
    from product_catalog.db import init_db, DatabaseInitializer

    # Quick initialization against the configured database
    init_db()

    # Or with an explicit manager
    initializer = DatabaseInitializer(DatabaseManager("sqlite://"))
    initializer.initialize()

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from product_catalog.core.exceptions import StorageError
from product_catalog.db.database import DatabaseManager, get_database_manager

# Registers ProductRecord on Base.metadata
from product_catalog.db import models  # noqa: F401


# Module logger
logger = logging.getLogger(__name__)


class DatabaseInitializer:
    """
    Database initialization manager.

    Attributes:
        _db_manager: DatabaseManager whose engine is initialized

    Example:
        >>> initializer = DatabaseInitializer()
        >>> initializer.initialize()
    """

    def __init__(self, db_manager: Optional[DatabaseManager] = None) -> None:
        """
        Initialize the database initializer.

        Args:
            db_manager: DatabaseManager to use (shared manager if None)
        """
        self._db_manager = db_manager or get_database_manager()

    # =========================================================================
    # TABLE OPERATIONS
    # =========================================================================

    def create_tables(self) -> None:
        """Create all tables from ORM models."""
        self._db_manager.create_tables()

    def verify_connection(self) -> bool:
        """Check that the database answers queries."""
        return self._db_manager.verify_connection()

    def reset(self) -> None:
        """
        Drop and recreate all tables.

        WARNING: This will delete all products!
        """
        logger.warning("Resetting product database...")
        self._db_manager.reset_database()

    # =========================================================================
    # FULL INITIALIZATION
    # =========================================================================

    def initialize(self) -> None:
        """
        Run the complete initialization sequence.

        Raises:
            StorageError: If the database cannot be reached after setup
        """
        logger.info("Initializing database...")

        self.create_tables()

        if not self.verify_connection():
            raise StorageError("initialize", "database connection check failed")

        logger.info("✅ Database initialization complete")


def init_db(db_manager: Optional[DatabaseManager] = None) -> None:
    """
    Initialize the database with tables.

    Args:
        db_manager: DatabaseManager to use (shared manager if None)
    """
    DatabaseInitializer(db_manager).initialize()
