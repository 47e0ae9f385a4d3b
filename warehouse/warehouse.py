"""
Warehouse
=========
Named in-memory product catalog.

Storage is a dict keyed by product id; assigning to an existing key keeps
its slot. Invariants:
  - ids are pairwise distinct
  - listings follow insertion order, including after price updates

Concurrency:
  Every warehouse owns a ReadWriteLock. add_product / update_product_price
  hold it EXCLUSIVE for the whole check-then-write step; every read holds
  it SHARED while copying out of storage. No reference to the live dict
  ever leaves this class.

Instances come only from warehouse.registry.get_warehouse(); calling
Warehouse(...) directly raises TypeError.
"""

import logging
from collections import Counter
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, FrozenSet, List, Optional, Union
from uuid import UUID

from concurrency import ReadWriteLock
from warehouse import config
from warehouse.category import Category
from warehouse.errors import (
    DuplicateProductError, InvalidProductError, ProductNotFoundError,
)
from warehouse.product import Product, coerce_price
from warehouse.views import ProductView

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Handed out only to the registry; see _create().
_CONSTRUCTION_TOKEN = object()


class Warehouse:
    """
    A named, thread-safe, insertion-ordered collection of products.
    """

    def __init__(self, name: str, *, clock: Optional[Clock] = None,
                 strict: bool = False, _token: Any = None):
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError(
                "Warehouse has no public constructor; use warehouse.get_warehouse(name)"
            )
        self._name = name
        self._clock: Clock = clock or datetime.now
        self._strict = strict
        self._products: Dict[UUID, Product] = {}
        self._lock = ReadWriteLock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def strict(self) -> bool:
        return self._strict

    def __repr__(self) -> str:
        return f"Warehouse(name={self._name!r}, products={len(self)})"

    def __len__(self) -> int:
        with self._lock.shared():
            return len(self._products)

    def __contains__(self, product_id) -> bool:
        with self._lock.shared():
            return product_id in self._products

    def is_empty(self) -> bool:
        return len(self) == 0

    # ─── Mutations ───────────────────────────────────────────────────────

    def add_product(self, product_id: UUID, name: str,
                    category: Union[Category, str], price: Any) -> Product:
        """
        Append a new product and return it.
        Raises DuplicateProductError if product_id is already stored.
        """
        category = Category.of(category)
        price = coerce_price(price)
        if self._strict:
            self._validate(name, price)

        with self._lock.exclusive():
            if product_id in self._products:
                raise DuplicateProductError(product_id)
            now = self._clock()
            product = Product(product_id, name, category, price,
                              created_at=now, updated_at=now)
            self._products[product_id] = product

        logger.debug("Warehouse %r: added product %s (%s, %s)",
                     self._name, product_id, name, category)
        return product

    def update_product_price(self, product_id: UUID, price: Any) -> Product:
        """
        Replace the stored product with a copy carrying the new price.
        The product keeps its position in the listing.
        Raises ProductNotFoundError if product_id is not stored.
        """
        price = coerce_price(price)
        if self._strict:
            self._validate_price(price)

        with self._lock.exclusive():
            current = self._products.get(product_id)
            if current is None:
                raise ProductNotFoundError(product_id)
            updated = current.with_price(price, self._clock())
            self._products[product_id] = updated

        logger.debug("Warehouse %r: price of %s changed %s -> %s",
                     self._name, product_id, current.price, price)
        return updated

    # ─── Reads ───────────────────────────────────────────────────────────

    def get_products(self) -> ProductView:
        """Snapshot of all products in insertion order (read-only)."""
        return ProductView(self._snapshot())

    def get_product_by_id(self, product_id: UUID) -> Optional[Product]:
        with self._lock.shared():
            return self._products.get(product_id)

    def get_products_by(self, category: Union[Category, str]) -> List[Product]:
        category = Category.lookup(category)
        return [p for p in self._snapshot() if p.category == category]

    def get_products_grouped_by_categories(self) -> Dict[Category, List[Product]]:
        """
        Products partitioned by category. Keys appear in the order their
        first product was added; empty categories never appear.
        """
        groups: Dict[Category, List[Product]] = {}
        for product in self._snapshot():
            groups.setdefault(product.category, []).append(product)
        return groups

    def get_changed_products(self) -> List[Product]:
        """Products whose price was updated at least once."""
        return [p for p in self._snapshot() if p.is_modified]

    def get_categories_with_products(self) -> FrozenSet[Category]:
        return frozenset(p.category for p in self._snapshot())

    def get_product_count_in_category(self, category: Union[Category, str]) -> int:
        category = Category.lookup(category)
        return sum(1 for p in self._snapshot() if p.category == category)

    def get_product_count_by_first_letter(self) -> Dict[str, int]:
        counts = Counter(p.name[0].upper() for p in self._snapshot() if p.name)
        return dict(counts)

    def get_products_since(self, since: Union[date, datetime]) -> List[Product]:
        """
        Products created at or after `since`. A plain date is compared
        against the creation date, a datetime against the full timestamp.
        """
        if isinstance(since, datetime):
            return [p for p in self._snapshot() if p.created_at >= since]
        return [p for p in self._snapshot() if p.created_at.date() >= since]

    # ─── Internals ───────────────────────────────────────────────────────

    def _snapshot(self) -> tuple:
        with self._lock.shared():
            return tuple(self._products.values())

    def _validate(self, name: str, price: Decimal) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidProductError("Product name can't be blank", "name")
        self._validate_price(price)

    @staticmethod
    def _validate_price(price: Decimal) -> None:
        if price < 0:
            raise InvalidProductError("Product price can't be negative", "price")


def _create(name: str, clock: Optional[Clock] = None) -> Warehouse:
    """Build a warehouse for the registry. Not for direct use."""
    warehouse = Warehouse(name, clock=clock, strict=config.STRICT_VALIDATION,
                          _token=_CONSTRUCTION_TOKEN)
    logger.info("Created warehouse %r (strict=%s)", name, warehouse.strict)
    return warehouse
