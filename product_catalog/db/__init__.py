"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy database infrastructure and ORM models.

Architecture:
------------
├── database.py   - DatabaseManager class, session factory
├── models.py     - ProductRecord ORM model
└── init_db.py    - DatabaseInitializer for setup

Usage:
------
    from product_catalog.db import DatabaseManager, ProductRecord, init_db

    db_manager = DatabaseManager("sqlite://")
    init_db(db_manager)
    with db_manager.session_scope() as session:
        products = session.query(ProductRecord).all()

==============================================================================
"""

from .database import Base, DatabaseManager, get_database_manager
from .models import ProductRecord
from .init_db import DatabaseInitializer, init_db

__all__ = [
    # Database management
    "Base",
    "DatabaseManager",
    "get_database_manager",
    # Models
    "ProductRecord",
    # Initialization
    "DatabaseInitializer",
    "init_db",
]
