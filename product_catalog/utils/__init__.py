"""
==============================================================================
Utilities Package
==============================================================================

Utility classes for the catalog.

Modules:
--------
- validators: Product name and price validation

==============================================================================
"""

from .validators import PriceValidator, ProductNameValidator

__all__ = [
    "PriceValidator",
    "ProductNameValidator",
]
