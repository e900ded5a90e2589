"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM tables backing the relational record store.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                           products                               │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (INTEGER, PK, AUTO INCREMENT)                                │
    │ name (VARCHAR(100), NOT NULL)                                   │
    │ price (FLOAT, NOT NULL)                                         │
    │ category (VARCHAR, NOT NULL, INDEX)                             │
    │ stock_status (VARCHAR(20), NOT NULL)                            │
    │ created_at (DATETIME, NOT NULL, INDEX)                          │
    └─────────────────────────────────────────────────────────────────┘

    ┌─────────────────────────────────────────────────────────────────┐
    │                            users                                 │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (UUID, PK)                                                   │
    │ username (VARCHAR, UNIQUE, NOT NULL)                            │
    │ password (VARCHAR, NOT NULL)                                    │
    └─────────────────────────────────────────────────────────────────┘

Product ids use AUTOINCREMENT so SQLite never hands out an id twice, even
after a row is deleted.

=============================================================================
"""

from __future__ import annotations

import uuid

from sqlalchemy import Column, DateTime, Float, Integer, String, Text

from storefront.db.database import Base


class ProductRecord(Base):
    """
    Product row.

    Rows are only written through SqlRecordStore, which validates the
    payload first, so every row satisfies the product constraints.
    """

    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Sequential product identifier"
    )

    name = Column(
        String(100),
        nullable=False,
        doc="Product display name"
    )

    price = Column(
        Float,
        nullable=False,
        doc="Positive price"
    )

    category = Column(
        Text,
        nullable=False,
        index=True,
        doc="Category label"
    )

    stock_status = Column(
        String(20),
        nullable=False,
        doc="In Stock / Low Stock / Out of Stock"
    )

    created_at = Column(
        DateTime,
        nullable=False,
        index=True,
        doc="Insertion timestamp"
    )

    def __repr__(self) -> str:
        return (
            f"ProductRecord(id={self.id!r}, "
            f"name={self.name!r}, "
            f"category={self.category!r})"
        )


class UserRecord(Base):
    """User row with an opaque UUID identifier."""

    __tablename__ = "users"

    id = Column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        doc="Unique user identifier (UUID)"
    )

    username = Column(
        Text,
        unique=True,
        nullable=False,
        index=True,
        doc="Unique username"
    )

    password = Column(
        Text,
        nullable=False,
        doc="Opaque credential"
    )

    def __repr__(self) -> str:
        return f"UserRecord(id={self.id!r}, username={self.username!r})"
