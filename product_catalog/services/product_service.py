"""
==============================================================================
Product Service Module
==============================================================================

Catalog operations on top of a ProductRepository.

This module implements:
- ProductService: Class handling product CRUD and filtering
- Input validation for names, prices and price ranges
- Catalog statistics

Error Policy:
------------
- Updates on a missing id raise ProductNotFoundError
- Reads and deletes treat a missing id as a normal outcome
- Invalid names, prices or range bounds raise InvalidProductError
- Storage failures propagate unchanged from the repository

Filters run in memory over find_all() and keep insertion order.
Price range bounds are inclusive on both ends. Filter prices are compared
exactly as given; only stored prices are rounded to cents.

==============================================================================
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Optional

from product_catalog.catalog.models import Product
from product_catalog.core import exceptions
from product_catalog.repositories.base import ProductRepository
from product_catalog.utils.validators import PriceValidator, ProductNameValidator


# Module logger
logger = logging.getLogger(__name__)


class ProductService:
    """
    Product catalog service.

    This service handles all catalog operations including:
    - Product creation with validation
    - Lookup by id and full listing
    - Name and price updates
    - Idempotent deletion
    - Name, exact price and price range filters

    Attributes:
        _repository: Backing ProductRepository
        _names: Name validator
        _prices: Price validator

    Example:
        >>> service = ProductService(InMemoryProductRepository())
        >>>
        >>> laptop = service.add_product("Laptop", 50000)
        >>> service.update_name(laptop.id, "Gaming Laptop")
        >>> service.filter_by_price_range(25000, 60000)
    """

    def __init__(
        self,
        repository: ProductRepository,
        name_validator: ProductNameValidator = None,
        price_validator: PriceValidator = None
    ) -> None:
        """
        Initialize the product service.

        Args:
            repository: Store used for every read and write
            name_validator: Optional name validator (default rules if None)
            price_validator: Optional price validator (default rules if None)
        """
        self._repository = repository
        self._names = name_validator or ProductNameValidator()
        self._prices = price_validator or PriceValidator()

    # =========================================================================
    # VALIDATION HELPERS
    # =========================================================================

    def _validated_name(self, name: Any) -> str:
        is_valid, normalized, error = self._names.validate(name)
        if not is_valid:
            logger.warning(f"Rejected product name {name!r}: {error}")
            raise exceptions.invalid_product("name", error, name)
        return normalized

    def _validated_price(self, price: Any, field: str = "price") -> Decimal:
        is_valid, normalized, error = self._prices.validate(price)
        if not is_valid:
            logger.warning(f"Rejected {field} {price!r}: {error}")
            raise exceptions.invalid_product(field, error, price)
        return normalized

    def _query_price(self, price: Any, field: str = "price") -> Decimal:
        is_valid, value, error = self._prices.validate_query(price)
        if not is_valid:
            logger.warning(f"Rejected {field} {price!r}: {error}")
            raise exceptions.invalid_product(field, error, price)
        return value

    def _get_existing(self, product_id: int) -> Product:
        product = self._repository.find_by_id(product_id)
        if product is None:
            logger.warning(f"Product not found: {product_id}")
            raise exceptions.product_not_found(product_id)
        return product

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    def add_product(self, name: str, price: Any) -> Product:
        """
        Add a new product to the catalog.

        Args:
            name: Product name (stripped, must not be empty)
            price: Non-negative price

        Returns:
            Stored Product with its assigned id

        Raises:
            InvalidProductError: VALIDATION_ERROR if name or price is invalid
        """
        product = Product(
            name=self._validated_name(name),
            price=self._validated_price(price)
        )

        saved = self._repository.save(product)

        logger.info(f"✅ Product added: {saved.id} {saved.name!r} @ {saved.price}")
        return saved

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def get_all_products(self) -> List[Product]:
        """Get every product in insertion order."""
        return self._repository.find_all()

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        """
        Get a product by id.

        Returns:
            Product, or None if no product has this id
        """
        product = self._repository.find_by_id(product_id)

        if product is None:
            logger.debug(f"Product lookup miss: {product_id}")

        return product

    def count_products(self) -> int:
        """Get the number of products in the catalog."""
        return self._repository.count()

    # =========================================================================
    # UPDATE OPERATIONS
    # =========================================================================

    def update_name(self, product_id: int, new_name: str) -> Product:
        """
        Rename a product. The price is left unchanged.

        Returns:
            Updated Product

        Raises:
            ProductNotFoundError: PRODUCT_NOT_FOUND if the id is absent
            InvalidProductError: VALIDATION_ERROR if the name is invalid
        """
        name = self._validated_name(new_name)
        product = self._get_existing(product_id)

        old_name = product.name
        updated = self._repository.save(product.model_copy(update={"name": name}))

        logger.info(f"Product {product_id} renamed: {old_name!r} → {updated.name!r}")
        return updated

    def update_price(self, product_id: int, new_price: Any) -> Product:
        """
        Reprice a product. The name is left unchanged.

        Returns:
            Updated Product

        Raises:
            ProductNotFoundError: PRODUCT_NOT_FOUND if the id is absent
            InvalidProductError: VALIDATION_ERROR if the price is invalid
        """
        price = self._validated_price(new_price)
        product = self._get_existing(product_id)

        old_price = product.price
        updated = self._repository.save(product.model_copy(update={"price": price}))

        logger.info(f"Product {product_id} repriced: {old_price} → {updated.price}")
        return updated

    # =========================================================================
    # DELETE OPERATIONS
    # =========================================================================

    def delete_product(self, product_id: int) -> None:
        """
        Delete a product.

        Deleting an id that does not exist is a no-op.
        """
        if not self._repository.exists_by_id(product_id):
            logger.info(f"Delete skipped, product not found: {product_id}")
            return

        self._repository.delete_by_id(product_id)
        logger.info(f"✅ Product deleted: {product_id}")

    # =========================================================================
    # FILTER OPERATIONS
    # =========================================================================

    def filter_by_name(self, query: str) -> List[Product]:
        """
        Get products whose name contains the query, ignoring case.

        An empty query matches every product.
        """
        needle = (query or "").strip().casefold()

        return [
            product for product in self._repository.find_all()
            if needle in product.name.casefold()
        ]

    def filter_by_price(self, price: Any) -> List[Product]:
        """
        Get products priced exactly at the given value.

        Raises:
            InvalidProductError: VALIDATION_ERROR if the price is invalid
        """
        target = self._query_price(price)

        return [
            product for product in self._repository.find_all()
            if product.price == target
        ]

    def filter_by_price_range(self, low: Any, high: Any) -> List[Product]:
        """
        Get products with low <= price <= high.

        An inverted range (low > high) matches nothing.

        Raises:
            InvalidProductError: VALIDATION_ERROR if a bound is invalid
        """
        low_bound = self._query_price(low, "low")
        high_bound = self._query_price(high, "high")

        if low_bound > high_bound:
            logger.warning(f"Inverted price range: {low_bound} > {high_bound}")
            return []

        return [
            product for product in self._repository.find_all()
            if low_bound <= product.price <= high_bound
        ]

    # =========================================================================
    # STATISTICS
    # =========================================================================

    def get_stats(self) -> Dict[str, Any]:
        """
        Get catalog statistics.

        Returns:
            Dict with total_products, min_price, max_price and
            average_price (prices are None for an empty catalog)
        """
        prices = [product.price for product in self._repository.find_all()]

        if not prices:
            return {
                "total_products": 0,
                "min_price": None,
                "max_price": None,
                "average_price": None,
            }

        average = (sum(prices) / len(prices)).quantize(
            PriceValidator.QUANTUM, rounding=ROUND_HALF_UP
        )

        return {
            "total_products": len(prices),
            "min_price": min(prices),
            "max_price": max(prices),
            "average_price": average,
        }
