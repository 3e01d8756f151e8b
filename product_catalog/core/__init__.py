"""
==============================================================================
Core Package
==============================================================================

Core error types shared by every layer of the catalog.

Usage:
------
    from product_catalog.core import ProductNotFoundError

    # Or use exception factory functions via module
    from product_catalog.core import exceptions
    raise exceptions.product_not_found(42)

==============================================================================
"""

from .exceptions import (
    AppException,
    InvalidProductError,
    ProductNotFoundError,
    StorageError,
)

__all__ = [
    "AppException",
    "InvalidProductError",
    "ProductNotFoundError",
    "StorageError",
]
