"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides product store, storage, and API client fixtures.

==============================================================================
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, Generator

import pytest

# Keep the application's own products file out of the working directory
os.environ.setdefault(
    "PRODUCTS_FILE",
    str(Path(tempfile.mkdtemp(prefix="product-manager-")) / "products.json")
)

from fastapi.testclient import TestClient  # noqa: E402

from product_manager.main import app  # noqa: E402
from product_manager.catalog import MemoryStorage, ProductStore  # noqa: E402
from product_manager.core.dependencies import (  # noqa: E402
    get_product_store,
    get_product_store_optional,
)


# ============================================================================
# DATA FIXTURES
# ============================================================================

@pytest.fixture
def product_data() -> Dict:
    """Fields for the sample product."""
    return {
        "title": "producto prueba",
        "description": "Este es un producto prueba",
        "price": 200,
        "thumbnail": "Sin imagen",
        "code": "abc123",
        "stock": 25,
    }


@pytest.fixture
def other_product_data() -> Dict:
    """Fields for a second product."""
    return {
        "title": "Taza",
        "description": "Taza de cerámica",
        "price": 12.5,
        "thumbnail": "img/taza.png",
        "code": "mug-01",
        "stock": 4,
    }


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def products_file(tmp_path: Path) -> Path:
    """Path to a products file that does not exist yet."""
    return tmp_path / "products.json"


@pytest.fixture
def store(products_file: Path) -> ProductStore:
    """Empty file-backed store."""
    return ProductStore(products_file)


@pytest.fixture
def populated_store(store: ProductStore, product_data: Dict, other_product_data: Dict) -> ProductStore:
    """File-backed store holding two products (ids 1 and 2)."""
    store.add_product(product_data)
    store.add_product(other_product_data)
    return store


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Empty in-memory backend."""
    return MemoryStorage()


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture
def client(store: ProductStore) -> Generator[TestClient, None, None]:
    """Create test client backed by the temporary store."""
    app.dependency_overrides[get_product_store] = lambda: store
    app.dependency_overrides[get_product_store_optional] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
