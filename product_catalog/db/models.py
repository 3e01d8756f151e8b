"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM model for the relational product store.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                          products                                │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (INTEGER, PK, AUTOINCREMENT, never reused)                   │
    │ name (VARCHAR(255), NOT NULL)                                   │
    │ price (NUMERIC(12, 2), NOT NULL)                                │
    │ created_at (DATETIME, DEFAULT now)                              │
    │ updated_at (DATETIME, AUTO UPDATE)                              │
    └─────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, DateTime, Integer, Numeric, String, func

from product_catalog.db.database import Base


class ProductRecord(Base):
    """
    Product row in the catalog table.

    Attributes:
        id: Auto-incremented identifier, assigned on insert
        name: Product display name
        price: Non-negative price with two fractional digits
        created_at: Insert timestamp
        updated_at: Last modification timestamp
    """

    __tablename__ = "products"

    # SQLite reuses the highest rowid after a delete unless AUTOINCREMENT is set
    __table_args__ = {"sqlite_autoincrement": True}

    # =========================================================================
    # COLUMNS
    # =========================================================================

    id: int = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Store-assigned product identifier"
    )

    name: str = Column(
        String(255),
        nullable=False,
        doc="Product display name"
    )

    price: Decimal = Column(
        Numeric(12, 2, asdecimal=True),
        nullable=False,
        doc="Product price"
    )

    created_at: datetime = Column(
        DateTime,
        default=func.now(),
        nullable=False,
        doc="Creation timestamp"
    )

    updated_at: datetime = Column(
        DateTime,
        default=func.now(),
        onupdate=func.now(),
        nullable=False,
        doc="Last modification timestamp"
    )

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"ProductRecord(id={self.id!r}, "
            f"name={self.name!r}, "
            f"price={self.price!r})"
        )
