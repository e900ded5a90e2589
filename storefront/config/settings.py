"""
==============================================================================
Application Settings Module
==============================================================================

Runtime configuration read from the environment (or a .env file) through
Pydantic Settings. Environment variables win over .env entries, which win
over the defaults below.

Storage Backends:
----------------
- memory:   Process-wide in-memory record store (non-durable, default)
- database: SQLAlchemy-backed relational store at DATABASE_URL

Example .env:
------------
    STORAGE_BACKEND=database
    DATABASE_URL=sqlite:///./storage/db/catalog.db
    SEED_SAMPLE_PRODUCTS=false
    CORS_ORIGINS=["http://localhost:5173"]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url


# Module logger
logger = logging.getLogger(__name__)


ENVIRONMENTS = ("development", "staging", "production")
STORAGE_BACKENDS = ("memory", "database")


class Settings(BaseSettings):
    """
    Catalog service configuration.

    Example:
        >>> Settings(storage_backend="database").uses_database
        True
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # Application
    app_name: str = Field("Storefront Catalog API", description="Display name")
    app_env: str = Field("development", description="development, staging or production")
    debug: bool = Field(False, description="Verbose logging and SQL echo")

    # Server
    host: str = Field("0.0.0.0", description="Bind address for uvicorn")
    port: int = Field(8000, ge=1, le=65535, description="Bind port for uvicorn")

    # Record store
    storage_backend: str = Field("memory", description="memory or database")
    database_url: str = Field(
        "sqlite:///./storage/db/catalog.db",
        description="SQLAlchemy URL used by the database backend"
    )
    seed_sample_products: bool = Field(
        True,
        description="Load the sample catalog into an empty store at startup"
    )

    # Catalog view
    image_base_url: str = Field("/static/images", description="Prefix for product artwork")
    default_page_size: int = Field(10, ge=1, le=100)
    max_page_size: int = Field(100, ge=1, le=500)

    # CORS, as a JSON array so it fits in one environment variable
    cors_origins: str = Field('["*"]', description="Allowed origins (JSON array)")

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, value: str) -> str:
        """Normalize the environment name; unknown names mean development."""
        env = value.strip().lower()
        if env in ENVIRONMENTS:
            return env

        logger.warning(f"Unknown APP_ENV {value!r}, using 'development'")
        return "development"

    @field_validator("storage_backend")
    @classmethod
    def validate_storage_backend(cls, value: str) -> str:
        """
        Normalize the backend name.

        Raises:
            ValueError: If the backend is not one of STORAGE_BACKENDS
        """
        backend = value.strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"STORAGE_BACKEND must be one of {', '.join(STORAGE_BACKENDS)}, got {value!r}"
            )
        return backend

    @property
    def uses_database(self) -> bool:
        return self.storage_backend == "database"

    @property
    def cors_origins_list(self) -> List[str]:
        """CORS origins as a list; anything but a JSON array allows all origins."""
        try:
            origins = json.loads(self.cors_origins)
        except json.JSONDecodeError:
            logger.warning(f"CORS_ORIGINS is not valid JSON: {self.cors_origins!r}")
            origins = None

        if not isinstance(origins, list):
            return ["*"]
        return [str(origin) for origin in origins]

    def get_database_path(self) -> Optional[Path]:
        """
        File backing a SQLite database URL.

        Returns:
            Path of the database file, or None for in-memory SQLite and
            other database engines
        """
        url = make_url(self.database_url)
        if url.get_backend_name() != "sqlite" or url.database in (None, "", ":memory:"):
            return None
        return Path(url.database)

    def ensure_directories(self) -> None:
        """Create the directory holding the SQLite file, if one is used."""
        if not self.uses_database:
            return

        db_path = self.get_database_path()
        if db_path is not None:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Database directory ready: {db_path.parent}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Process-wide settings, created on first use.

    Tests that change the environment call ``get_settings.cache_clear()``.
    """
    settings = Settings()
    settings.ensure_directories()

    logger.debug(
        f"Configuration loaded: env={settings.app_env} "
        f"backend={settings.storage_backend}"
    )
    return settings
