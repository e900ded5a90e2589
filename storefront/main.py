"""
==============================================================================
Storefront Catalog API - Application Entry Point
==============================================================================

FastAPI application with:
- Product listing, filtering, pagination and creation
- Page-number catalog view for the browsing UI
- In-memory or SQLAlchemy-backed record store

Usage:
------
    # Development
    uvicorn storefront.main:app --reload

    # Production
    STORAGE_BACKEND=database uvicorn storefront.main:app --host 0.0.0.0 --port 8000

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.router import api_router
from storefront.catalog.seed import seed_products
from storefront.catalog.storage import get_store, init_store
from storefront.config import get_settings
from storefront.core.dependencies import build_store
from storefront.core.exceptions import register_exception_handlers


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)

__version__ = "1.0.0"


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    Builds the FastAPI app and owns the record store's lifecycle.

    Startup installs the store selected by STORAGE_BACKEND (unless one is
    already installed, as in tests) and loads the sample catalog into it
    when it is empty. Shutdown closes the store.
    """

    def __init__(self):
        self._settings = get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="Browse, filter and add products to the storefront catalog",
            lifespan=self._lifespan,
        )

        self._configure_cors(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name} ({self._settings.app_env})")
        logger.info("=" * 60)

        store = get_store() or init_store(build_store(self._settings))
        logger.info(f"Record store: {store!r}")

        if self._settings.seed_sample_products:
            seed_products(store)

        logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _shutdown(self) -> None:
        store = get_store()
        if store is not None:
            store.close()
        logger.info("✅ Shutdown complete")

    def _configure_cors(self, app: FastAPI) -> None:
        origins = self._settings.cors_origins_list
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            # browsers refuse credentials with a wildcard origin
            allow_credentials="*" not in origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    def _register_root(self, app: FastAPI) -> None:
        @app.get("/", include_in_schema=False)
        async def root():
            return {
                "name": self._settings.app_name,
                "version": __version__,
                "docs": "/docs",
                "products": "/api/products",
            }

    @property
    def app(self) -> FastAPI:
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
