#!/usr/bin/env python3
"""
Product Store Demo Script
Runs the basic CRUD walkthrough against a products JSON file
"""

import logging
import sys

from product_manager.catalog import ProductStore
from product_manager.core.exceptions import ProductNotFoundError

# Products file used when no path is given on the command line
PRODUCTS_FILE = "products.json"


def run_demo(path):
    """Exercise every store operation once and print the results"""
    store = ProductStore(path)

    print("Listing products in an empty store:")
    print(store.list_products())

    print("\nAdding a product:")
    product = store.add_product({
        "title": "producto prueba",
        "description": "Este es un producto prueba",
        "price": 200,
        "thumbnail": "Sin imagen",
        "code": "abc123",
        "stock": 25,
    })
    print(product)

    print("\nListing products after adding one:")
    print(store.list_products())

    print("\nGetting the product by id:")
    print(store.get_product_by_id(product.id))

    print("\nUpdating the price:")
    store.update_product(product.id, {"price": 250})
    print(store.get_product_by_id(product.id))

    print("\nDeleting the product:")
    store.delete_product(product.id)
    print(store.list_products())

    print("\nGetting the deleted product:")
    try:
        store.get_product_by_id(product.id)
    except ProductNotFoundError as e:
        print(f"✅ Expected error: {e.message}")

    if not store.is_durable:
        print(f"❌ WARNING: last save failed: {store.last_save_error.message}")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    print("=" * 60)
    print("PRODUCT STORE DEMO")
    print("=" * 60)
    print()
    run_demo(sys.argv[1] if len(sys.argv) > 1 else PRODUCTS_FILE)
    print()
    print("=" * 60)
