"""
Read-only Product Listing
=========================
ProductView wraps a tuple snapshot of a warehouse's products. It reads
like a list (indexing, slicing, len, iteration, equality with lists and
tuples) but every list mutator raises UnsupportedMutationError, so a
caller cannot reach the warehouse's storage through it.
"""

from collections.abc import Sequence
from typing import Iterable, Iterator, Tuple, Union

from warehouse.errors import UnsupportedMutationError
from warehouse.product import Product


class ProductView(Sequence):
    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Product] = ()):
        self._items: Tuple[Product, ...] = tuple(items)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return ProductView(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._items)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __eq__(self, other) -> bool:
        if isinstance(other, ProductView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == tuple(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"ProductView({list(self._items)!r})"

    # ─── Rejected mutators ───────────────────────────────────────────────

    def _reject(self, operation: str):
        raise UnsupportedMutationError(operation)

    def __setitem__(self, index, value):
        self._reject("__setitem__")

    def __delitem__(self, index):
        self._reject("__delitem__")

    def __iadd__(self, other):
        self._reject("+=")

    def __imul__(self, count):
        self._reject("*=")

    def append(self, item):
        self._reject("append")

    def extend(self, items):
        self._reject("extend")

    def insert(self, index, item):
        self._reject("insert")

    def remove(self, item):
        self._reject("remove")

    def pop(self, index=-1):
        self._reject("pop")

    def clear(self):
        self._reject("clear")

    def sort(self, *args, **kwargs):
        self._reject("sort")

    def reverse(self):
        self._reject("reverse")
