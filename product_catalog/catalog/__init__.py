"""
==============================================================================
Catalog Package - Product Model
==============================================================================

Domain model for products in the catalog.

Classes:
--------
- Product: Pydantic model for catalog products

==============================================================================
"""

from .models import Product

__all__ = [
    "Product",
]
