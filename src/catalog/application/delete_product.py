"""Application service: Delete Product use case.

Deletion is logical. Unlike reads and updates, the target is resolved
by ID alone, so deleting an already inactive product succeeds again
without writing anything.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> bool:
        """Return False only when no product with this ID was ever stored."""
        product = self._product_repo.modify(
            product_id, Product.deactivate, active_only=False
        )
        return product is not None
