"""
==============================================================================
Catalog Package - Products and Users
==============================================================================

Record stores, the product query pipeline and creation validation.

Classes:
--------
- Product, ProductInput, ProductQuery, QueryResult: catalog models
- RecordStore: store interface (MemoryRecordStore, SqlRecordStore)
- ProductValidator, UserValidator: parse-or-reject payload checks
- PresentationAdapter: display-ready product views

==============================================================================
"""

from .models import (
    Product,
    ProductInput,
    ProductQuery,
    QueryResult,
    StockStatus,
    User,
    UserInput,
)
from .presentation import CatalogPage, PresentationAdapter, ProductView
from .query import page_count, run_query
from .sql_storage import SqlRecordStore
from .storage import MemoryRecordStore, RecordStore, get_store, init_store
from .validator import ProductValidator, UserValidator

__all__ = [
    "Product",
    "ProductInput",
    "ProductQuery",
    "QueryResult",
    "StockStatus",
    "User",
    "UserInput",
    "CatalogPage",
    "PresentationAdapter",
    "ProductView",
    "page_count",
    "run_query",
    "SqlRecordStore",
    "MemoryRecordStore",
    "RecordStore",
    "get_store",
    "init_store",
    "ProductValidator",
    "UserValidator",
]
