"""
==============================================================================
Catalog Aggregate Module
==============================================================================

The in-memory catalog: products in insertion order plus the counter used
to hand out the next id. Lookups are linear scans.

==============================================================================
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from product_manager.core.exceptions import CatalogLoadError

from .models import Product


class Catalog:
    """
    Ordered product collection with an auto-incrementing id counter.

    Attributes:
        next_id: Highest id handed out so far (0 for a fresh catalog)

    Example:
        >>> catalog = Catalog()
        >>> product = catalog.append_new({"title": "Mug", ...})
        >>> product.id
        1
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        """
        Build a catalog from already-validated products.

        Raises:
            CatalogLoadError: If two products share an id
        """
        self._products: List[Product] = list(products or [])

        seen = set()
        for product in self._products:
            if product.id in seen:
                raise CatalogLoadError(
                    f"Duplicate product id {product.id}",
                    {"product_id": product.id}
                )
            seen.add(product.id)

        self._next_id = max((p.id for p in self._products), default=0)

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def products(self) -> List[Product]:
        """The live product list. Not a copy; do not mutate."""
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def index_of(self, product_id: int) -> int:
        """Position of the product with this id, or -1."""
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    def find(self, product_id: int) -> Optional[Product]:
        index = self.index_of(product_id)
        if index == -1:
            return None
        return self._products[index]

    def append_new(self, fields: dict) -> Product:
        """Assign the next id to a new product and append it."""
        product = Product(id=self._next_id + 1, **fields)
        self._next_id = product.id
        self._products.append(product)
        return product

    def replace_at(self, index: int, product: Product) -> None:
        self._products[index] = product

    def remove_at(self, index: int) -> Product:
        return self._products.pop(index)
