"""
==============================================================================
Repositories Package - Product Persistence
==============================================================================

ProductRepository interface and its storage adapters.

Modules:
--------
- base: ProductRepository abstract interface
- memory_repository: InMemoryProductRepository (dict-backed)
- sql_repository: SqlAlchemyProductRepository (products table)

==============================================================================
"""

from .base import ProductRepository
from .memory_repository import InMemoryProductRepository
from .sql_repository import SqlAlchemyProductRepository

__all__ = [
    "ProductRepository",
    "InMemoryProductRepository",
    "SqlAlchemyProductRepository",
]
