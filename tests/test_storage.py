"""
==============================================================================
Storage Backend Tests
==============================================================================

Tests for JsonFileStorage, MemoryStorage, and the Catalog aggregate.

==============================================================================
"""

import json
import logging
from pathlib import Path
from typing import Dict

import pytest
from pydantic import ValidationError

from product_manager.catalog import Catalog, JsonFileStorage, MemoryStorage, Product
from product_manager.core.exceptions import CatalogLoadError, CatalogSaveError


@pytest.fixture
def products(product_data: Dict, other_product_data: Dict):
    """Two validated products."""
    return [Product(id=1, **product_data), Product(id=2, **other_product_data)]


class TestJsonFileStorage:
    """Tests for the JSON file backend."""

    def test_load_missing_file(self, products_file: Path):
        """Test a missing file loads as no products."""
        assert JsonFileStorage(products_file).load() == []

    def test_missing_and_empty_file_logged_as_warning(self, products_file: Path, caplog):
        """Test an absent or blank file is reported at WARNING."""
        with caplog.at_level(logging.WARNING, logger="product_manager.catalog.storage"):
            JsonFileStorage(products_file).load()
            products_file.write_text("", encoding="utf-8")
            JsonFileStorage(products_file).load()
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert any("not found" in m for m in messages)
        assert any("empty" in m for m in messages)

    def test_load_rejects_extra_keys(self, products_file: Path, product_data: Dict):
        """Test records with keys beyond the product fields are malformed."""
        products_file.write_text(
            json.dumps([{"id": 1, **product_data, "color": "red"}]), encoding="utf-8"
        )
        with pytest.raises(CatalogLoadError):
            JsonFileStorage(products_file).load()

    def test_save_then_load(self, products_file: Path, products):
        """Test saved products load back identically and in order."""
        storage = JsonFileStorage(products_file)
        storage.save(products)
        assert storage.load() == products

    def test_save_is_indented_utf8(self, products_file: Path, products):
        """Test the file is readable multi-line JSON with non-ASCII text kept."""
        JsonFileStorage(products_file).save(products)
        text = products_file.read_text(encoding="utf-8")
        assert "\n  {" in text
        assert "cerámica" in text

    def test_save_overwrites(self, products_file: Path, products):
        """Test each save replaces the previous content."""
        storage = JsonFileStorage(products_file)
        storage.save(products)
        storage.save(products[:1])
        assert [p["id"] for p in json.loads(products_file.read_text(encoding="utf-8"))] == [1]

    def test_save_creates_parent_directory(self, tmp_path: Path, products):
        """Test missing parent directories are created."""
        path = tmp_path / "data" / "products.json"
        JsonFileStorage(path).save(products)
        assert path.exists()

    def test_load_invalid_json(self, products_file: Path):
        """Test invalid JSON raises CatalogLoadError."""
        products_file.write_text("[{", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            JsonFileStorage(products_file).load()

    def test_load_directory(self, tmp_path: Path):
        """Test an unreadable path raises CatalogLoadError."""
        with pytest.raises(CatalogLoadError):
            JsonFileStorage(tmp_path).load()

    def test_save_to_directory_fails(self, tmp_path: Path, products):
        """Test an unwritable path raises CatalogSaveError."""
        with pytest.raises(CatalogSaveError):
            JsonFileStorage(tmp_path).save(products)

    def test_location(self, products_file: Path):
        """Test location names the file."""
        assert JsonFileStorage(products_file).location == str(products_file)


class TestMemoryStorage:
    """Tests for the in-memory backend."""

    def test_records_validated_on_load(self, product_data: Dict):
        """Test records go through product validation."""
        storage = MemoryStorage([{"id": 1, **product_data}])
        assert storage.load()[0].title == "producto prueba"

        with pytest.raises(CatalogLoadError):
            MemoryStorage([{"id": 1}]).load()

    def test_fail_saves(self, products):
        """Test fail_saves makes save raise."""
        storage = MemoryStorage(fail_saves=True)
        with pytest.raises(CatalogSaveError):
            storage.save(products)
        assert storage.save_count == 0


class TestCatalog:
    """Tests for the catalog aggregate."""

    def test_next_id_from_products(self, products):
        """Test next_id starts at the highest id."""
        assert Catalog(products).next_id == 2
        assert Catalog().next_id == 0

    def test_duplicate_ids_rejected(self, products):
        """Test duplicate ids raise CatalogLoadError."""
        with pytest.raises(CatalogLoadError):
            Catalog(products + products[:1])

    def test_append_and_find(self, product_data: Dict):
        """Test append_new assigns the next id and find locates it."""
        catalog = Catalog()
        product = catalog.append_new(product_data)
        assert product.id == 1
        assert catalog.find(1) is product
        assert catalog.find(2) is None
        assert catalog.index_of(2) == -1

    def test_product_id_is_frozen(self, products):
        """Test the id of a product cannot be reassigned."""
        with pytest.raises(ValidationError):
            products[0].id = 5
