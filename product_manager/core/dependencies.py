"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependencies that hand the process-wide ProductStore to route handlers.
Tests replace them through ``app.dependency_overrides``.

==============================================================================
"""

from __future__ import annotations

from typing import Optional

from product_manager.catalog.store import ProductStore, get_store
from product_manager.core import exceptions


def get_product_store() -> ProductStore:
    """
    Get the loaded product store.

    Raises:
        AppException: CATALOG_NOT_LOADED if the application has not
            created the store yet
    """
    store = get_store()
    if store is None:
        raise exceptions.catalog_not_loaded()
    return store


def get_product_store_optional() -> Optional[ProductStore]:
    """Get the product store, or None when it has not been created."""
    return get_store()
