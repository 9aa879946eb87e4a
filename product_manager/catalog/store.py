"""
==============================================================================
Product Store Module
==============================================================================

CRUD operations over the product catalog with persistence after every
mutation.

Persistence Strategy:
--------------------
- The whole catalog is read into memory when the store is created
- Every add/update/delete rewrites the complete backing store
- A load problem leaves the store empty; a save problem keeps the
  in-memory change. Both are logged and recorded on the store
  (last_load_error / last_save_error) instead of being raised

Only ProductNotFoundError is raised to callers for a failed operation.

==============================================================================
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping, Optional, Union

from product_manager.core.exceptions import (
    CatalogLoadError,
    CatalogSaveError,
    product_not_found,
)

from .catalog import Catalog
from .models import Product, ProductCreate, ProductUpdate
from .storage import JsonFileStorage, ProductStorage


# Module logger
logger = logging.getLogger(__name__)


class ProductStore:
    """
    Product catalog manager backed by a ProductStorage.

    Attributes:
        last_load_error: Error from the most recent load, if any
        last_save_error: Error from the most recent save, if any

    Example:
        >>> store = ProductStore("products.json")
        >>> product = store.add_product({
        ...     "title": "producto prueba",
        ...     "description": "Este es un producto prueba",
        ...     "price": 200,
        ...     "thumbnail": "Sin imagen",
        ...     "code": "abc123",
        ...     "stock": 25,
        ... })
        >>> store.update_product(product.id, {"price": 250}).price
        250.0
        >>> store.delete_product(product.id)
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        *,
        storage: Optional[ProductStorage] = None
    ) -> None:
        """
        Create the store and load the catalog.

        Args:
            path: Products JSON file, used when no storage is given
            storage: Backend to use instead of a JSON file

        Raises:
            ValueError: If neither path nor storage is given
        """
        if storage is None:
            if path is None:
                raise ValueError("ProductStore needs a path or a storage backend")
            storage = JsonFileStorage(path)

        self._storage = storage
        self._catalog = Catalog()
        self.last_load_error: Optional[CatalogLoadError] = None
        self.last_save_error: Optional[CatalogSaveError] = None

        self._load()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def storage(self) -> ProductStorage:
        return self._storage

    @property
    def next_id(self) -> int:
        """Highest id assigned so far."""
        return self._catalog.next_id

    @property
    def is_durable(self) -> bool:
        """False when the last flush to the backing store failed."""
        return self.last_save_error is None

    def __len__(self) -> int:
        return len(self._catalog)

    def count(self) -> int:
        """Number of products in the catalog."""
        return len(self._catalog)

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def _load(self) -> None:
        """Replace the catalog with the backing store's content."""
        try:
            self._catalog = Catalog(self._storage.load())
            self.last_load_error = None
        except CatalogLoadError as e:
            logger.error(
                f"❌ Error loading products from {self._storage.location}: "
                f"{e.message}. Starting with an empty catalog"
            )
            self._catalog = Catalog()
            self.last_load_error = e
            return

        logger.info(
            f"✅ Loaded {len(self._catalog)} products from {self._storage.location}"
        )

    def _save(self) -> None:
        """Flush the full catalog to the backing store."""
        try:
            self._storage.save(self._catalog.products)
        except CatalogSaveError as e:
            logger.error(
                f"❌ Error saving products to {self._storage.location}: "
                f"{e.message}. Changes are kept in memory only"
            )
            self.last_save_error = e
            return

        self.last_save_error = None

    def reload(self) -> None:
        """Discard in-memory state and load the backing store again."""
        logger.info("Reloading product catalog...")
        self._load()

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_products(self) -> List[Product]:
        """
        Get all products in insertion order.

        Returns:
            Copies of the stored products; changing them does not
            change the catalog
        """
        return [product.model_copy() for product in self._catalog.products]

    def get_product_by_id(self, product_id: int) -> Product:
        """
        Get a product by id.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        product = self._catalog.find(product_id)
        if product is None:
            logger.warning(f"Product not found: {product_id}")
            raise product_not_found(product_id)
        return product.model_copy()

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def add_product(self, fields: Union[ProductCreate, Mapping]) -> Product:
        """
        Add a product with the next id.

        Args:
            fields: title, description, price, thumbnail, code and stock.
                An id in the input is ignored.

        Returns:
            The created product

        Raises:
            pydantic.ValidationError: If a field is missing or has a bad type
        """
        if not isinstance(fields, ProductCreate):
            fields = ProductCreate.model_validate(fields)

        product = self._catalog.append_new(fields.model_dump())
        self._save()

        logger.info(f"✅ Product added: {product.id} ({product.title})")
        return product.model_copy()

    def update_product(
        self,
        product_id: int,
        changes: Union[ProductUpdate, Mapping]
    ) -> Product:
        """
        Overwrite the given fields of a product.

        Only provided fields change. The id cannot be changed; an id in
        the input is ignored, as are keys that are not product fields.

        Returns:
            The updated product

        Raises:
            ProductNotFoundError: If no product has this id
        """
        index = self._catalog.index_of(product_id)
        if index == -1:
            logger.warning(f"Update failed, product not found: {product_id}")
            raise product_not_found(product_id)

        if not isinstance(changes, ProductUpdate):
            ignored = set(changes) - set(ProductUpdate.model_fields)
            if ignored:
                logger.debug(f"Ignoring non-updatable fields: {sorted(ignored)}")
            changes = ProductUpdate.model_validate(changes)

        values = changes.changes()
        product = self._catalog.products[index].model_copy(update=values)
        self._catalog.replace_at(index, product)
        self._save()

        logger.info(f"✅ Product updated: {product_id} ({', '.join(values) or 'no changes'})")
        return product.model_copy()

    def delete_product(self, product_id: int) -> None:
        """
        Remove a product, keeping the order of the others.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        index = self._catalog.index_of(product_id)
        if index == -1:
            logger.warning(f"Delete failed, product not found: {product_id}")
            raise product_not_found(product_id)

        removed = self._catalog.remove_at(index)
        self._save()

        logger.info(f"✅ Product deleted: {removed.id} ({removed.title})")


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_store_instance: Optional[ProductStore] = None


def get_store() -> Optional[ProductStore]:
    """Get the store created by init_store, if any."""
    return _store_instance


def init_store(products_file: Union[str, Path]) -> ProductStore:
    """
    Create the process-wide store used by the web application.

    Args:
        products_file: Path to products.json

    Returns:
        ProductStore instance
    """
    global _store_instance
    _store_instance = ProductStore(products_file)
    return _store_instance
