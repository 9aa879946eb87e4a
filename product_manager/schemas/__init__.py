"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas for the REST API.

==============================================================================
"""

from .common import MessageResponse
from .product import (
    ProductResponse,
    ProductWriteResponse,
    ProductListResponse,
    ProductDeleteResponse,
)

__all__ = [
    # Common
    "MessageResponse",
    # Product
    "ProductResponse",
    "ProductWriteResponse",
    "ProductListResponse",
    "ProductDeleteResponse",
]
