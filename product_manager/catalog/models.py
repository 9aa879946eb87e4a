"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog products and the payloads that create and
update them.

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product stored in the catalog.

    The id is assigned by the store and cannot be reassigned afterwards.
    Keys other than the model fields are rejected.

    Attributes:
        id: Store-assigned identifier, unique within the catalog
        title: Display title
        description: Free-text description
        price: Unit price
        thumbnail: Image reference or placeholder text
        code: Caller-supplied code/SKU (not required to be unique)
        stock: Units in stock
    """

    model_config = ConfigDict(extra="forbid")

    id: int = Field(..., frozen=True, description="Store-assigned identifier")
    title: str = Field(..., description="Product title")
    description: str = Field(..., description="Product description")
    price: float = Field(..., description="Unit price")
    thumbnail: str = Field(..., description="Image reference or placeholder")
    code: str = Field(..., description="Product code / SKU")
    stock: int = Field(..., description="Units in stock")


class ProductCreate(BaseModel):
    """
    Fields required to add a product.

    Unknown keys, including any caller-supplied id, are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str
    price: float
    thumbnail: str
    code: str
    stock: int


class ProductUpdate(BaseModel):
    """
    Partial product update.

    Only fields the caller sets are applied; id and unknown keys are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    price: Optional[float] = Field(default=None)
    thumbnail: Optional[str] = Field(default=None)
    code: Optional[str] = Field(default=None)
    stock: Optional[int] = Field(default=None)

    def changes(self) -> dict:
        """Return the fields to overwrite on the target product."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
