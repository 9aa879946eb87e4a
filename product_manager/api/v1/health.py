"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from typing import Optional

from fastapi import APIRouter, Depends

from product_manager.catalog.store import ProductStore
from product_manager.core.dependencies import get_product_store_optional


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, store: Optional[ProductStore]):
        self._store = store

    def check_catalog(self) -> dict:
        """Check catalog status."""
        if self._store is None:
            return {"status": "not_loaded", "products": 0}

        if not self._store.is_durable or self._store.last_load_error is not None:
            status = "degraded"
        else:
            status = "healthy"

        return {"status": status, "products": len(self._store)}

    def check_storage(self) -> dict:
        """Report the last load and save errors, if any."""
        if self._store is None:
            return {"location": None, "load_error": None, "save_error": None}

        load_error = self._store.last_load_error
        save_error = self._store.last_save_error
        return {
            "location": self._store.storage.location,
            "load_error": load_error.message if load_error else None,
            "save_error": save_error.message if save_error else None,
        }

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()

        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "products_loaded": catalog_info["products"],
                "storage": self.check_storage()
            }
        }


@router.get("")
async def health_check(store: Optional[ProductStore] = Depends(get_product_store_optional)):
    """
    Health check endpoint.

    Returns API and catalog status, including storage errors.
    """
    controller = HealthController(store)
    return controller.get_health()


@router.get("/ready")
async def readiness_check(store: Optional[ProductStore] = Depends(get_product_store_optional)):
    """Readiness probe: ready once the catalog has been loaded."""
    return {"ready": store is not None}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
