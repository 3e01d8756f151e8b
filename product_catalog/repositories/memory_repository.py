"""
==============================================================================
In-Memory Product Repository
==============================================================================

Process-local product store backed by a dict.

Ids come from a counter starting at 1 and are never reused, matching
the behaviour of an auto-increment primary key. Stored products are
copied on the way in and on the way out, so callers can only change
stored state through save().

==============================================================================
"""

from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional

from product_catalog.catalog.models import Product
from product_catalog.core import exceptions
from product_catalog.repositories.base import ProductRepository


# Module logger
logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):
    """
    Product repository keeping products in process memory.

    Example:
        >>> repository = InMemoryProductRepository()
        >>> laptop = repository.save(Product(name="Laptop", price=50000))
        >>> laptop.id
        1
    """

    def __init__(self) -> None:
        self._products: Dict[int, Product] = {}
        self._ids = itertools.count(1)

    def save(self, product: Product) -> Product:
        if product.id is None:
            stored = product.model_copy(update={"id": next(self._ids)})
            logger.debug(f"Inserted product {stored.id}")
        elif product.id in self._products:
            stored = product.model_copy()
            logger.debug(f"Updated product {stored.id}")
        else:
            raise exceptions.product_not_found(product.id)

        self._products[stored.id] = stored
        return stored.model_copy()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        product = self._products.get(product_id)
        return product.model_copy() if product else None

    def find_all(self) -> List[Product]:
        # dicts keep insertion order
        return [product.model_copy() for product in self._products.values()]

    def exists_by_id(self, product_id: int) -> bool:
        return product_id in self._products

    def count(self) -> int:
        return len(self._products)

    def delete_by_id(self, product_id: int) -> None:
        if self._products.pop(product_id, None) is not None:
            logger.debug(f"Deleted product {product_id}")

    def __repr__(self) -> str:
        return f"InMemoryProductRepository(count={len(self._products)})"
