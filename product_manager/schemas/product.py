"""
==============================================================================
Product Schemas Module
==============================================================================

Response envelopes for the product endpoints. Request bodies reuse
ProductCreate and ProductUpdate from the catalog package.

==============================================================================
"""

from typing import List
from pydantic import BaseModel, Field

from product_manager.catalog.models import Product

from .common import MessageResponse


class ProductResponse(BaseModel):
    """Single product response."""
    success: bool = Field(default=True)
    product: Product


class ProductWriteResponse(ProductResponse):
    """Product response for a mutation, with the outcome of the flush."""
    durable: bool = Field(
        default=True,
        description="False if the change could not be written to storage"
    )


class ProductListResponse(BaseModel):
    """List of products response."""
    success: bool = Field(default=True)
    total: int = Field(ge=0)
    products: List[Product]


class ProductDeleteResponse(MessageResponse):
    """Delete confirmation."""
    durable: bool = Field(default=True)
