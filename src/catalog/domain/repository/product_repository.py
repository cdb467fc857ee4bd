"""Abstract record store for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.

Every method may raise RecordStoreError when the underlying storage is
unavailable. Implementations must not retry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID regardless of its active flag, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return the product with exactly this name, active or not, or None."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a new product and assign its ID.

        Raises DuplicateProductNameError if any row already uses the name;
        nothing is written in that case.
        """

    @abstractmethod
    def modify(
        self,
        product_id: int,
        change: Callable[[Product], None],
        *,
        active_only: bool = True,
    ) -> Product | None:
        """Apply *change* to the stored product and write it back atomically.

        The row is read, changed and written with no other write through
        this store in between. Returns the changed product, or None without
        writing when no row has this ID or, with *active_only*, when the
        row is inactive. An exception raised by *change* aborts the write.
        Nothing is written when *change* leaves the product as it was.

        Raises DuplicateProductNameError if the changed name belongs to a
        different row.
        """

    @abstractmethod
    def find(self, predicate: Callable[[Product], bool]) -> list[Product]:
        """Return every product satisfying *predicate*, ordered by name."""
