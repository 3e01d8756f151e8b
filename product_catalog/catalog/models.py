"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for catalog products, independent of the storage backend.

==============================================================================
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product model for catalog items.

    Built from ORM rows with Product.model_validate(record) and stored
    as-is by the in-memory repository.

    Attributes:
        id: Store-assigned identifier (None until first save)
        name: Product display name
        price: Non-negative price
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(default=None, description="Store-assigned identifier")
    name: str = Field(..., min_length=1, max_length=255, description="Product name")
    price: Decimal = Field(..., ge=0, description="Product price")

    @property
    def is_persisted(self) -> bool:
        """Check if the product has been assigned an id by a store."""
        return self.id is not None
