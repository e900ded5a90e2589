"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides record stores, services, a deterministic clock and the API client.

==============================================================================
"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Generator

from fastapi.testclient import TestClient

from storefront.catalog.seed import seed_products
from storefront.catalog.sql_storage import SqlRecordStore
from storefront.catalog.storage import MemoryRecordStore, init_store
from storefront.core.dependencies import get_record_store
from storefront.db.database import DatabaseManager
from storefront.main import app
from storefront.services import ProductService, UserService


# ============================================================================
# CLOCK FIXTURES
# ============================================================================

class TickingClock:
    """Clock that advances one second on every reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self._now = start

    def __call__(self) -> datetime:
        current = self._now
        self._now += timedelta(seconds=1)
        return current


@pytest.fixture
def clock() -> TickingClock:
    """Strictly increasing timestamps, so newest-first order is id descending."""
    return TickingClock()


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def store(clock: TickingClock) -> MemoryRecordStore:
    """Empty in-memory store."""
    return MemoryRecordStore(clock=clock)


@pytest.fixture
def seeded_store(store: MemoryRecordStore) -> MemoryRecordStore:
    """In-memory store holding the 12 sample products."""
    seed_products(store)
    return store


@pytest.fixture
def sql_store(clock: TickingClock) -> Generator[SqlRecordStore, None, None]:
    """Empty relational store on a private in-memory SQLite database."""
    db_store = SqlRecordStore(DatabaseManager("sqlite://"), clock=clock)
    try:
        yield db_store
    finally:
        db_store.close()


@pytest.fixture(params=["memory", "sql"])
def any_store(request, store: MemoryRecordStore, sql_store: SqlRecordStore):
    """Each store implementation in turn, seeded with the sample catalog."""
    selected = store if request.param == "memory" else sql_store
    seed_products(selected)
    return selected


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def product_service(seeded_store: MemoryRecordStore) -> ProductService:
    return ProductService(seeded_store)


@pytest.fixture
def user_service(store: MemoryRecordStore) -> UserService:
    return UserService(store)


# ============================================================================
# CLIENT FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client(seeded_store: MemoryRecordStore) -> Generator[TestClient, None, None]:
    """Test client serving from a freshly seeded in-memory store."""
    init_store(seeded_store)
    app.dependency_overrides[get_record_store] = lambda: seeded_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
