"""
==============================================================================
Core Package
==============================================================================

Core utilities shared by the catalog and the API.

Modules:
--------
- exceptions: AppException classes and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from product_manager.core import exceptions
    raise exceptions.product_not_found(7)

==============================================================================
"""

from .exceptions import (
    AppException,
    CatalogLoadError,
    CatalogSaveError,
    ProductNotFoundError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "CatalogLoadError",
    "CatalogSaveError",
    "ProductNotFoundError",
    "register_exception_handlers",
]
