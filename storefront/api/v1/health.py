"""
==============================================================================
Health Check Endpoints
==============================================================================

Probes for monitoring and orchestration.

    GET /health        component status and product count
    GET /health/ready  200 once the record store answers, 503 otherwise
    GET /health/live   200 while the process serves requests

==============================================================================
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.catalog.storage import RecordStore
from storefront.config import get_settings
from storefront.core.dependencies import get_record_store


# Module logger
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Reports on the record store behind the API."""

    def __init__(self, store: RecordStore):
        self._store = store

    def product_count(self) -> int:
        """
        Number of stored products, or -1 when the store cannot answer.

        A failing probe is a reported state, not an error response.
        """
        try:
            return self._store.count_products()
        except Exception as e:
            logger.warning(f"Record store probe failed: {e}")
            return -1

    def get_health(self) -> dict:
        count = self.product_count()
        store_ok = count >= 0

        return {
            "status": "healthy" if store_ok else "degraded",
            "components": {
                "api": "healthy",
                "store": "healthy" if store_ok else "unhealthy",
            },
            "details": {
                "storage_backend": get_settings().storage_backend,
                "products_stored": max(count, 0),
            },
        }


@router.get("")
async def health_check(store: RecordStore = Depends(get_record_store)):
    """Component status of the API and its record store."""
    return HealthController(store).get_health()


@router.get("/ready")
async def readiness_check(store: RecordStore = Depends(get_record_store)):
    """Readiness probe: the record store must answer a count query."""
    if HealthController(store).product_count() < 0:
        return JSONResponse(status_code=503, content={"ready": False})
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe."""
    return {"alive": True}
