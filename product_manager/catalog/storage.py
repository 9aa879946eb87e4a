"""
==============================================================================
Catalog Storage Module
==============================================================================

Backing stores for the product catalog.

The store keeps the whole catalog in memory and hands the full product
list to a backend after every mutation, so a backend only has to know how
to read and overwrite everything at once.

Backends:
---------
- JsonFileStorage: UTF-8 JSON array in a single file (the default)
- MemoryStorage: serialized records held in a list, for tests and scripts

File Format:
-----------
[
  {
    "id": 1,
    "title": "producto prueba",
    "description": "Este es un producto prueba",
    "price": 200.0,
    "thumbnail": "Sin imagen",
    "code": "abc123",
    "stock": 25
  }
]

==============================================================================
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from product_manager.core.exceptions import CatalogLoadError, CatalogSaveError

from .models import Product


# Module logger
logger = logging.getLogger(__name__)

_product_list = TypeAdapter(List[Product])


def parse_products(data: Any, source: str) -> List[Product]:
    """
    Validate decoded JSON as an ordered list of products.

    Args:
        data: Decoded JSON value
        source: Description of where the data came from, for error messages

    Raises:
        CatalogLoadError: If the value is not a list of valid product records
    """
    if not isinstance(data, list):
        raise CatalogLoadError(
            f"Expected a JSON array of products in {source}, "
            f"got {type(data).__name__}",
            {"source": source}
        )

    try:
        return _product_list.validate_python(data)
    except ValidationError as e:
        raise CatalogLoadError(
            f"Invalid product record in {source}: {e.error_count()} error(s)",
            {"source": source, "error_count": e.error_count()}
        ) from e


def dump_products(products: Sequence[Product]) -> List[Dict[str, Any]]:
    """Serialize products to plain JSON-compatible dicts."""
    return [product.model_dump(mode="json") for product in products]


class ProductStorage(ABC):
    """Whole-catalog persistence interface."""

    @abstractmethod
    def load(self) -> List[Product]:
        """
        Read every stored product, in stored order.

        Returns an empty list when nothing has been stored yet.

        Raises:
            CatalogLoadError: If stored content is unreadable or malformed
        """

    @abstractmethod
    def save(self, products: Sequence[Product]) -> None:
        """
        Overwrite stored content with the given products.

        Raises:
            CatalogSaveError: If the content could not be written
        """

    @property
    def location(self) -> str:
        """Human-readable description of where products are kept."""
        return type(self).__name__


class JsonFileStorage(ProductStorage):
    """
    Products stored as an indented JSON array in one UTF-8 file.

    A missing file or one holding only whitespace is an empty catalog.

    Example:
        >>> storage = JsonFileStorage("data/products.json")
        >>> products = storage.load()
        >>> storage.save(products)
    """

    def __init__(self, path: Union[str, Path], indent: int = 2) -> None:
        self._path = Path(path)
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def load(self) -> List[Product]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning(f"Products file not found, starting empty: {self._path}")
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogLoadError(
                f"Unable to read products file {self._path}: {e}",
                {"path": str(self._path)}
            ) from e

        if not raw.strip():
            logger.warning(f"Products file is empty: {self._path}")
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(
                f"Invalid JSON in {self._path}: {e}",
                {"path": str(self._path), "line": e.lineno, "column": e.colno}
            ) from e
        except (ValueError, RecursionError) as e:
            raise CatalogLoadError(
                f"Undecodable JSON in {self._path}: {e}",
                {"path": str(self._path)}
            ) from e

        return parse_products(data, str(self._path))

    def save(self, products: Sequence[Product]) -> None:
        content = json.dumps(
            dump_products(products),
            indent=self._indent,
            ensure_ascii=False
        )

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise CatalogSaveError(
                f"Unable to write products file {self._path}: {e}",
                {"path": str(self._path)}
            ) from e

        logger.debug(f"Saved {len(products)} products to {self._path}")


class MemoryStorage(ProductStorage):
    """
    Products kept as serialized records in memory.

    Records go through the same validation as the file backend on load.
    Set ``fail_saves`` to make every save raise CatalogSaveError.

    Attributes:
        records: Last saved (or initial) list of product dicts
        save_count: Number of successful saves
        fail_saves: Whether save() should fail
    """

    def __init__(
        self,
        records: Optional[List[Dict[str, Any]]] = None,
        fail_saves: bool = False
    ) -> None:
        self.records: List[Dict[str, Any]] = list(records or [])
        self.save_count = 0
        self.fail_saves = fail_saves

    @property
    def location(self) -> str:
        return "memory"

    def load(self) -> List[Product]:
        return parse_products(self.records, self.location)

    def save(self, products: Sequence[Product]) -> None:
        if self.fail_saves:
            raise CatalogSaveError("Memory storage is not accepting writes")
        self.records = dump_products(products)
        self.save_count += 1
