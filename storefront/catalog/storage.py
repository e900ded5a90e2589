"""
==============================================================================
Record Store Module
==============================================================================

Holders of product and user records and the sole authority for identity
assignment.

Implementations:
---------------
- MemoryRecordStore: process-wide dictionaries, non-durable (default)
- SqlRecordStore:    SQLAlchemy tables (see sql_storage.py)

Both return frozen pydantic records, so callers never hold references to
store-internal state. Every create is an observable mutation; repeated
calls create additional records.

==============================================================================
"""

from __future__ import annotations

import logging
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from storefront.core import exceptions

from .models import Product, ProductInput, ProductQuery, QueryResult, User, UserInput
from .query import run_query, sorted_categories


# Module logger
logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class RecordStore(ABC):
    """
    Interface shared by all record stores.

    Filtering, sorting and pagination follow the query pipeline rules in
    ``storefront.catalog.query``.
    """

    # =========================================================================
    # PRODUCTS
    # =========================================================================

    @abstractmethod
    def create_product(self, data: ProductInput) -> Product:
        """Assign the next id, stamp created_at, store and return the product."""

    @abstractmethod
    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        """Exact lookup; None means "not found"."""

    @abstractmethod
    def get_products(self, query: ProductQuery) -> QueryResult:
        """Return one filtered, sorted page and the total match count."""

    @abstractmethod
    def list_categories(self) -> List[str]:
        """Unique categories of all stored products, alphabetically."""

    @abstractmethod
    def count_products(self) -> int:
        """Number of stored products."""

    # =========================================================================
    # USERS
    # =========================================================================

    @abstractmethod
    def create_user(self, data: UserInput) -> User:
        """
        Create a user with a fresh opaque id.

        Raises:
            ConflictError: If the username is already taken
        """

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Lookup by id."""

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        """Lookup by exact username."""

    def close(self) -> None:
        """Release resources held by the store."""


class MemoryRecordStore(RecordStore):
    """
    In-memory record store.

    Not durable: records live as long as the process. Id assignment and
    every mutation run under one lock, so concurrent requests served from
    FastAPI's threadpool never receive the same id.

    Example:
        >>> store = MemoryRecordStore()
        >>> product = store.create_product(validated_input)
        >>> store.get_product_by_id(product.id) == product
        True
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or utc_now
        self._products: Dict[int, Product] = {}
        self._users: Dict[str, User] = {}
        self._next_product_id = 1
        self._lock = threading.Lock()

    def create_product(self, data: ProductInput) -> Product:
        with self._lock:
            product = Product(
                id=self._next_product_id,
                created_at=self._clock(),
                **data.model_dump(),
            )
            self._next_product_id += 1
            self._products[product.id] = product

        logger.debug(f"Stored product {product.id}: {product.name}")
        return product

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        return self._products.get(product_id)

    def get_products(self, query: ProductQuery) -> QueryResult:
        with self._lock:
            # dicts preserve insertion order, which is id order here
            snapshot = list(self._products.values())
        return run_query(snapshot, query)

    def list_categories(self) -> List[str]:
        with self._lock:
            snapshot = list(self._products.values())
        return sorted_categories(snapshot)

    def count_products(self) -> int:
        return len(self._products)

    def create_user(self, data: UserInput) -> User:
        with self._lock:
            if any(u.username == data.username for u in self._users.values()):
                raise exceptions.username_exists(data.username)

            user = User(id=str(uuid.uuid4()), **data.model_dump())
            self._users[user.id] = user

        logger.debug(f"Stored user {user.id}: {user.username}")
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in list(self._users.values()):
            if user.username == username:
                return user
        return None

    def __repr__(self) -> str:
        return f"MemoryRecordStore(products={len(self._products)}, users={len(self._users)})"


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_store_instance: Optional[RecordStore] = None


def get_store() -> Optional[RecordStore]:
    """Get the global record store instance."""
    return _store_instance


def init_store(store: RecordStore) -> RecordStore:
    """
    Install the global record store instance.

    Args:
        store: Store to serve requests from

    Returns:
        The installed store
    """
    global _store_instance
    _store_instance = store
    return _store_instance
