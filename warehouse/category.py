"""
Product Categories
==================
A Category is an immutable label used to partition products.

Labels are normalized on construction: surrounding whitespace is removed
and the first character is upper-cased, so "dairy", " Dairy" and "Dairy"
are the same category. Category.of() additionally interns instances, so
repeated lookups of one label share a single object. Category.lookup()
reuses an interned instance when there is one but never adds to the cache;
query paths use it so arbitrary query labels do not accumulate.
"""

import threading
from dataclasses import dataclass
from typing import Dict, Optional, Union

from warehouse.errors import InvalidCategoryError


def normalize_label(name: Optional[str]) -> str:
    if name is None:
        raise InvalidCategoryError("Category name can't be null")
    if not isinstance(name, str):
        raise InvalidCategoryError(f"Category name must be a string, got {type(name).__name__}")
    label = name.strip()
    if not label:
        raise InvalidCategoryError("Category name can't be blank")
    return label[0].upper() + label[1:]


@dataclass(frozen=True)
class Category:
    name: str

    def __post_init__(self):
        object.__setattr__(self, "name", normalize_label(self.name))

    @classmethod
    def of(cls, name: Union[str, "Category"]) -> "Category":
        """Return the shared Category for a label (or the Category itself)."""
        if isinstance(name, Category):
            return name
        label = normalize_label(name)
        with _interned_lock:
            category = _interned.get(label)
            if category is None:
                category = cls(label)
                _interned[label] = category
            return category

    @classmethod
    def lookup(cls, name: Union[str, "Category"]) -> "Category":
        """Category for a query label, without adding it to the shared cache."""
        if isinstance(name, Category):
            return name
        with _interned_lock:
            category = _interned.get(normalize_label(name))
        return category if category is not None else cls(name)

    def __str__(self) -> str:
        return self.name


_interned: Dict[str, Category] = {}
_interned_lock = threading.Lock()
