"""
Product repository interface.

Defines the persistence capabilities the catalog service relies on.
Concrete stores (SQLAlchemy, in-memory) implement every method.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from product_catalog.catalog.models import Product


class ProductRepository(ABC):
    """Repository interface for product persistence."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """
        Persist a product.

        Inserts and assigns an id when product.id is None,
        otherwise overwrites the stored product with that id.

        Returns:
            The stored product, including its id
        """

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with this id, or None if absent."""

    @abstractmethod
    def find_all(self) -> List[Product]:
        """Return every stored product in insertion order."""

    @abstractmethod
    def exists_by_id(self, product_id: int) -> bool:
        """Check if a product with this id is stored."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Remove the product with this id. Absent ids are ignored."""
