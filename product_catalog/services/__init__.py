"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes implementing the catalog operations.

Architecture Pattern: Service Layer
----------------------------------
    ┌─────────────────┐
    │     Caller      │
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │ ProductService  │  ← Validation, filters, error policy
    └────────┬────────┘
             │
    ┌────────▼────────┐
    │   Repository    │  ← SQLAlchemy or in-memory store
    └─────────────────┘

The repository is passed to the service constructor; nothing is
looked up globally.

Usage:
------
    from product_catalog.services import ProductService
    from product_catalog.repositories import InMemoryProductRepository

    service = ProductService(InMemoryProductRepository())
    laptop = service.add_product("Laptop", 50000)

==============================================================================
"""

from .product_service import ProductService

__all__ = [
    "ProductService",
]
