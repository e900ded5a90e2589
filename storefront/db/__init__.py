"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy infrastructure for the relational record store.

Architecture:
------------
├── database.py   - DatabaseManager class, session factory
└── models.py     - ProductRecord and UserRecord tables

==============================================================================
"""

from .database import Base, DatabaseManager
from .models import ProductRecord, UserRecord

__all__ = [
    "Base",
    "DatabaseManager",
    "ProductRecord",
    "UserRecord",
]
