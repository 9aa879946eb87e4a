"""
==============================================================================
Product Catalog Endpoints
==============================================================================

CRUD endpoints over the product store.

==============================================================================
"""

from fastapi import APIRouter, Depends

from product_manager.catalog.models import ProductCreate, ProductUpdate
from product_manager.catalog.store import ProductStore
from product_manager.core.dependencies import get_product_store
from product_manager.schemas.product import (
    ProductDeleteResponse,
    ProductListResponse,
    ProductResponse,
    ProductWriteResponse,
)


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, store: ProductStore):
        self._store = store

    def list_products(self) -> ProductListResponse:
        """List all products in insertion order."""
        products = self._store.list_products()
        return ProductListResponse(total=len(products), products=products)

    def get_product(self, product_id: int) -> ProductResponse:
        """Get product by id."""
        return ProductResponse(product=self._store.get_product_by_id(product_id))

    def create_product(self, data: ProductCreate) -> ProductWriteResponse:
        """Add a product."""
        product = self._store.add_product(data)
        return ProductWriteResponse(product=product, durable=self._store.is_durable)

    def update_product(self, product_id: int, data: ProductUpdate) -> ProductWriteResponse:
        """Update the provided fields of a product."""
        product = self._store.update_product(product_id, data)
        return ProductWriteResponse(product=product, durable=self._store.is_durable)

    def delete_product(self, product_id: int) -> ProductDeleteResponse:
        """Delete a product."""
        self._store.delete_product(product_id)
        return ProductDeleteResponse(
            message=f"Product {product_id} deleted",
            durable=self._store.is_durable
        )


@router.get("", response_model=ProductListResponse)
async def list_products(store: ProductStore = Depends(get_product_store)):
    """List all products."""
    controller = ProductController(store)
    return controller.list_products()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, store: ProductStore = Depends(get_product_store)):
    """Get product by id."""
    controller = ProductController(store)
    return controller.get_product(product_id)


@router.post("", response_model=ProductWriteResponse, status_code=201)
async def create_product(
    data: ProductCreate,
    store: ProductStore = Depends(get_product_store)
):
    """Add a product. The id is assigned by the store."""
    controller = ProductController(store)
    return controller.create_product(data)


@router.patch("/{product_id}", response_model=ProductWriteResponse)
async def update_product(
    product_id: int,
    data: ProductUpdate,
    store: ProductStore = Depends(get_product_store)
):
    """Update some fields of a product. The id cannot be changed."""
    controller = ProductController(store)
    return controller.update_product(product_id, data)


@router.delete("/{product_id}", response_model=ProductDeleteResponse)
async def delete_product(product_id: int, store: ProductStore = Depends(get_product_store)):
    """Delete a product."""
    controller = ProductController(store)
    return controller.delete_product(product_id)
