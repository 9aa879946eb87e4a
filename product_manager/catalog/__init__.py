"""
==============================================================================
Catalog Package - Product Management
==============================================================================

Product catalog kept in memory and persisted to a JSON file after every
change.

Classes:
--------
- Product, ProductCreate, ProductUpdate: Pydantic models
- Catalog: Ordered products plus the id counter
- ProductStorage, JsonFileStorage, MemoryStorage: Backing stores
- ProductStore: CRUD operations with persistence

==============================================================================
"""

from .models import Product, ProductCreate, ProductUpdate
from .catalog import Catalog
from .storage import JsonFileStorage, MemoryStorage, ProductStorage
from .store import ProductStore, get_store, init_store

__all__ = [
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "Catalog",
    "ProductStorage",
    "JsonFileStorage",
    "MemoryStorage",
    "ProductStore",
    "get_store",
    "init_store",
]
