"""
==============================================================================
SQLAlchemy Product Repository
==============================================================================

Relational product store built on a SQLAlchemy session.

Every write commits immediately, so each repository call is atomic
at single-row granularity. Any SQLAlchemyError rolls the session back
and surfaces as StorageError with the original error chained.

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from product_catalog.catalog.models import Product
from product_catalog.core import exceptions
from product_catalog.db.models import ProductRecord
from product_catalog.repositories.base import ProductRepository


# Module logger
logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepository):
    """
    Product repository persisting to the products table.

    Attributes:
        _db: SQLAlchemy session owned by the caller

    Example:
        >>> with db_manager.session_scope() as session:
        ...     repository = SqlAlchemyProductRepository(session)
        ...     laptop = repository.save(Product(name="Laptop", price=50000))
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
        """
        self._db = db

    # =========================================================================
    # ERROR TRANSLATION
    # =========================================================================

    @contextmanager
    def _storage_operation(self, operation: str) -> Generator[None, None, None]:
        """Roll back and raise StorageError when the database fails."""
        try:
            yield
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"❌ Storage failure during {operation}: {e}")
            raise exceptions.storage_error(operation, e) from e

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def save(self, product: Product) -> Product:
        with self._storage_operation("save"):
            if not product.is_persisted:
                record = ProductRecord(name=product.name, price=product.price)
                self._db.add(record)
            else:
                record = self._db.get(ProductRecord, product.id)
                if record is None:
                    raise exceptions.product_not_found(product.id)
                record.name = product.name
                record.price = product.price

            self._db.commit()
            self._db.refresh(record)

        logger.debug(f"Saved {record!r}")
        return Product.model_validate(record)

    def delete_by_id(self, product_id: int) -> None:
        with self._storage_operation("delete_by_id"):
            deleted = self._db.query(ProductRecord).filter(
                ProductRecord.id == product_id
            ).delete(synchronize_session="fetch")
            self._db.commit()

        if deleted:
            logger.debug(f"Deleted product {product_id}")

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._storage_operation("find_by_id"):
            record = self._db.get(ProductRecord, product_id)

        return Product.model_validate(record) if record else None

    def find_all(self) -> List[Product]:
        with self._storage_operation("find_all"):
            records = self._db.query(ProductRecord).order_by(ProductRecord.id).all()

        return [Product.model_validate(record) for record in records]

    def exists_by_id(self, product_id: int) -> bool:
        with self._storage_operation("exists_by_id"):
            found = self._db.query(ProductRecord.id).filter(
                ProductRecord.id == product_id
            ).first()

        return found is not None

    def count(self) -> int:
        with self._storage_operation("count"):
            return self._db.query(ProductRecord).count()
