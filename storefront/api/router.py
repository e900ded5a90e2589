"""
==============================================================================
Main API Router
==============================================================================

Mounts every v1 router under /api.

==============================================================================
"""

from fastapi import APIRouter

from storefront.api.v1 import catalog, health, products, users


class MainAPIRouter:
    """Single /api router combining the v1 route modules."""

    ROUTE_MODULES = (health, products, catalog, users)

    def __init__(self, prefix: str = "/api"):
        self._router = APIRouter(prefix=prefix)
        for module in self.ROUTE_MODULES:
            self._router.include_router(module.router)

    @property
    def router(self) -> APIRouter:
        return self._router


api_router = MainAPIRouter().router
