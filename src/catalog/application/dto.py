"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from catalog.domain.model.product import Product


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


# Marks an update field the caller did not supply. Distinct from None and "".
UNSET = _Unset.UNSET


@dataclass(frozen=True)
class ProductCreateDTO:
    """Input: a new catalog entry."""

    name: str
    price: Decimal
    stock: int
    description: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class ProductUpdateDTO:
    """Input: a partial update. Fields left as UNSET are not touched."""

    name: str | _Unset = UNSET
    description: str | None | _Unset = UNSET
    price: Decimal | _Unset = UNSET
    stock: int | _Unset = UNSET
    is_active: bool | _Unset = UNSET


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as returned by every read or write confirmation."""

    id: int
    name: str
    description: str | None
    price: Decimal
    stock: int
    created_date: datetime
    is_active: bool

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        if product.id is None:
            raise ValueError("Cannot expose a product that was never stored")
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price.amount,
            stock=product.stock.value,
            created_date=product.created_date,
            is_active=product.is_active,
        )

    def to_dict(self) -> dict[str, object]:
        """JSON-friendly rendering of the read shape."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": str(self.price),
            "stock": self.stock,
            "created_date": self.created_date.isoformat(),
            "is_active": self.is_active,
        }
