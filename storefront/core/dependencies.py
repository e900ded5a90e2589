"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency providers for the record store and the services built on it.

Dependency Hierarchy:
--------------------
                    ┌─────────────────┐
                    │ get_record_store│
                    └────────┬────────┘
                             │
              ┌──────────────┴──────────────┐
              │                             │
    ┌─────────▼─────────┐         ┌─────────▼─────────┐
    │get_product_service│         │ get_user_service  │
    └───────────────────┘         └───────────────────┘

Tests replace ``get_record_store`` through ``app.dependency_overrides``.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends

from storefront.catalog.presentation import PresentationAdapter
from storefront.catalog.sql_storage import SqlRecordStore
from storefront.catalog.storage import MemoryRecordStore, RecordStore, get_store, init_store
from storefront.config import Settings, get_settings
from storefront.db.database import DatabaseManager
from storefront.services import ProductService, UserService


# Module logger
logger = logging.getLogger(__name__)


def build_store(settings: Optional[Settings] = None) -> RecordStore:
    """
    Create the record store selected by STORAGE_BACKEND.

    Args:
        settings: Settings to read (defaults to the global settings)

    Returns:
        MemoryRecordStore or SqlRecordStore
    """
    settings = settings or get_settings()

    if settings.uses_database:
        logger.info(f"Using relational record store: {settings.database_url}")
        return SqlRecordStore(DatabaseManager(settings.database_url, echo=settings.debug))

    logger.info("Using in-memory record store (non-durable)")
    return MemoryRecordStore()


def get_record_store() -> RecordStore:
    """
    FastAPI dependency returning the global record store.

    The store is normally installed at startup; it is created on first
    use when the application runs without its lifespan.
    """
    store = get_store()
    if store is None:
        store = init_store(build_store())
    return store


def get_product_service(
    store: RecordStore = Depends(get_record_store)
) -> ProductService:
    """FastAPI dependency returning a ProductService bound to the store."""
    presenter = PresentationAdapter(get_settings().image_base_url)
    return ProductService(store, presenter=presenter)


def get_user_service(
    store: RecordStore = Depends(get_record_store)
) -> UserService:
    """FastAPI dependency returning a UserService bound to the store."""
    return UserService(store)
