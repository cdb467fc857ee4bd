"""Application service: Show Product use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


def find_active(product_repo: ProductRepository, product_id: int) -> Product | None:
    """Resolve a product that exists *and* is active.

    Inactive products are invisible to reads and updates, so they
    resolve to None exactly like a missing ID.
    """
    product = product_repo.get_by_id(product_id)
    if product is None or not product.is_active:
        return None
    return product


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO | None:
        product = find_active(self._product_repo, product_id)
        if product is None:
            return None
        return ProductDTO.from_product(product)
