"""Product aggregate.

A product is the only aggregate in the catalog. It is never physically
removed: deletion flips ``is_active`` and the row stays in the store,
where it still reserves its name.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money, StockLevel

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


def _check_name(name: str) -> str:
    if not name or not name.strip():
        raise ValidationError("Product name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Product name cannot exceed {MAX_NAME_LENGTH} characters"
        )
    return name


def _check_description(description: str | None) -> str | None:
    if description is not None and len(description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"Product description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
        )
    return description


def _check_flag(is_active: bool) -> bool:
    if not isinstance(is_active, bool):
        raise ValidationError("is_active must be a boolean")
    return is_active


@dataclass
class Product:
    """A product in the catalog.

    Use the ``Product.create()`` factory for new products, it enforces
    the field invariants. The ``__init__`` is kept plain so the store can
    reconstitute persisted rows without re-validating them.
    """

    id: int | None
    name: str
    description: str | None
    price: Money
    stock: StockLevel
    created_date: datetime
    is_active: bool = True

    @staticmethod
    def create(
        name: str,
        description: str | None,
        price: Money,
        stock: StockLevel,
        created_date: datetime,
        is_active: bool = True,
    ) -> Product:
        return Product(
            id=None,  # assigned by the store
            name=_check_name(name),
            description=_check_description(description),
            price=price,
            stock=stock,
            created_date=created_date,
            is_active=_check_flag(is_active),
        )

    # --- Mutations ------------------------------------------------------------

    def rename(self, name: str) -> None:
        self.name = _check_name(name)

    def describe(self, description: str | None) -> None:
        """Replace the description. An empty string is a valid value."""
        self.description = _check_description(description)

    def reprice(self, price: Money) -> None:
        self.price = price

    def restock(self, stock: StockLevel) -> None:
        self.stock = stock

    def set_active(self, is_active: bool) -> None:
        self.is_active = _check_flag(is_active)

    def deactivate(self) -> None:
        """Soft delete. Calling it on an inactive product changes nothing."""
        self.is_active = False

    # --- Queries --------------------------------------------------------------

    def matches(self, term: str) -> bool:
        """Case-sensitive substring match on name or description."""
        if term in self.name:
            return True
        return self.description is not None and term in self.description
