"""
Warehouse Package
=================
In-memory product catalogs, one per name, handed out by a process-wide
registry.

Usage:
    from uuid import uuid4
    from decimal import Decimal
    from warehouse import get_warehouse, Category

    store = get_warehouse("MyStore")
    milk = store.add_product(uuid4(), "Milk", Category.of("Dairy"), Decimal("9.99"))
"""

import logging

from warehouse.category import Category
from warehouse.errors import (
    WarehouseError, DuplicateProductError, ProductNotFoundError,
    UnsupportedMutationError, InvalidCategoryError, InvalidProductError,
)
from warehouse.product import Product, coerce_price
from warehouse.views import ProductView
from warehouse.warehouse import Warehouse
from warehouse.registry import get_warehouse, reset_registry, warehouse_names

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Category", "Product", "ProductView", "Warehouse", "coerce_price",
    "get_warehouse", "reset_registry", "warehouse_names",
    "WarehouseError", "DuplicateProductError", "ProductNotFoundError",
    "UnsupportedMutationError", "InvalidCategoryError", "InvalidProductError",
]
