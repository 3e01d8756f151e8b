"""
==============================================================================
Product Catalog Service
==============================================================================

Product catalog with create, read, update, delete and filter operations
over a SQLAlchemy or in-memory store.

Usage:
------
    from product_catalog.main import CatalogApplication

    with CatalogApplication() as application:
        service = application.service
        service.add_product("Laptop", 50000)
        service.filter_by_name("lap")

==============================================================================
"""

__version__ = "1.0.0"
