"""
Product Records
===============
Immutable catalog entries plus the price coercion rules used when a
warehouse accepts a price from a caller.

A price update never mutates a Product: Product.with_price() builds the
replacement value and the warehouse stores it in the old one's slot.
Bookkeeping fields (created_at, updated_at, revision) are excluded from
equality and hashing, so a product only differs from its predecessor by
price.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional
from uuid import UUID

from warehouse.category import Category


def coerce_price(value: Any) -> Decimal:
    """
    Convert a caller-supplied price to an exact, finite Decimal.
    Floats go through str() so 9.99 becomes Decimal("9.99"), not the
    binary approximation. Raises TypeError for non-numeric types and
    ValueError for unparsable strings, NaN and infinities.
    """
    if isinstance(value, bool):
        raise TypeError("Price must be a number, not bool")
    if isinstance(value, Decimal):
        price = value
    elif isinstance(value, int):
        price = Decimal(value)
    elif isinstance(value, float):
        price = Decimal(str(value))
    elif isinstance(value, str):
        try:
            price = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Cannot coerce {value!r} to a price") from None
    else:
        raise TypeError(f"Price must be a Decimal, int, float or str, got {type(value).__name__}")
    if not price.is_finite():
        raise ValueError(f"Price must be a finite amount, got {value!r}")
    return price


@dataclass(frozen=True)
class Product:
    """One catalog entry. Only the price may change, by replacement."""
    id: UUID
    name: str
    category: Category
    price: Decimal
    created_at: Optional[datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime] = field(default=None, compare=False)
    revision: int = field(default=0, compare=False)

    def __post_init__(self):
        if self.updated_at is None:
            object.__setattr__(self, "updated_at", self.created_at)

    @property
    def is_modified(self) -> bool:
        return self.revision > 0

    def with_price(self, price: Decimal, updated_at: Optional[datetime] = None) -> "Product":
        return replace(
            self,
            price=price,
            updated_at=updated_at if updated_at is not None else self.updated_at,
            revision=self.revision + 1,
        )
