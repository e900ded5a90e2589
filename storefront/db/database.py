"""
==============================================================================
Database Connection Management Module
==============================================================================

Engine and session handling for the relational record store.

    DatabaseManager(url)
        ├── engine           created on first use
        ├── session_factory  sessionmaker bound to the engine
        └── session_scope()  one transaction: commit, or roll back on error

One manager exists per database URL; the store that owns it disposes of
it on shutdown.

SQLite Note:
-----------
FastAPI serves requests from a threadpool, so 'check_same_thread' is
disabled. In-memory SQLite URLs get a StaticPool, otherwise each pooled
connection would open its own empty database. Every SQLite connection
gets a Unicode-aware lower() so search folds case like Python does.

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.config import get_settings


# Module logger
logger = logging.getLogger(__name__)

# Declarative base shared by ProductRecord and UserRecord
Base = declarative_base()


def unicode_lower(value: Any) -> Any:
    """Full Unicode lower-casing for SQL ``lower()``; non-text passes through."""
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(dbapi_connection: Any, connection_record: Any) -> None:
    """
    Replace SQLite's ASCII-only ``lower()`` with Python's ``str.lower``.

    Case-insensitive search lower-cases the needle in Python, so the
    column side must fold the same way.
    """
    dbapi_connection.create_function("lower", 1, unicode_lower, deterministic=True)


def engine_options(database_url: str) -> Dict[str, Any]:
    """
    Keyword arguments for ``create_engine`` suited to the database URL.

    SQLite gets thread sharing (and a single static connection when in
    memory); server databases get a recycled, pre-pinged pool.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        "pool_size": 5,
        "max_overflow": 10,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }


class DatabaseManager:
    """
    Owner of one SQLAlchemy engine and its session factory.

    Example:
        >>> db = DatabaseManager("sqlite://")
        >>> db.create_tables()
        >>> with db.session_scope() as session:
        ...     session.add(ProductRecord(...))
    """

    def __init__(self, database_url: Optional[str] = None, echo: bool = False) -> None:
        """
        Args:
            database_url: SQLAlchemy URL (defaults to the DATABASE_URL setting)
            echo: Log every emitted SQL statement
        """
        self._database_url = database_url or get_settings().database_url
        self._echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(
                self._database_url,
                echo=self._echo,
                **engine_options(self._database_url)
            )
            if self._engine.dialect.name == "sqlite":
                event.listen(self._engine, "connect", register_sqlite_functions)
            logger.info(f"Created database engine: {self._engine.url!r}")
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            # expire_on_commit=False keeps rows readable after session_scope exits
            self._session_factory = sessionmaker(
                bind=self.engine,
                autoflush=False,
                expire_on_commit=False,
            )
        return self._session_factory

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Run the enclosed operations as one transaction.

        Commits when the block completes, rolls back and re-raises when it
        fails, and always closes the session.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Create the catalog tables if they are missing."""
        # Importing the models registers their tables on Base.metadata
        from storefront.db import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Catalog tables ready")

    def dispose(self) -> None:
        """Close pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connections closed")

    def __repr__(self) -> str:
        return f"DatabaseManager(url={self._database_url!r})"
