"""Application service: Update Product use case.

Applies a partial update. Only the fields present on the request are
touched, with one asymmetry carried over from the catalog rules:

* ``name`` is applied only when it is non-blank; a blank name is ignored.
* ``description`` is applied whenever present, so ``""`` clears the text.

The changes run inside the store's ``modify``, so the product is
resolved and rewritten in one step: a product deleted concurrently is
never written back as active, and a rejected update writes nothing.
"""

from __future__ import annotations

from catalog.application.dto import UNSET, ProductDTO, ProductUpdateDTO
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, StockLevel
from catalog.domain.repository.product_repository import ProductRepository


def _apply(product: Product, request: ProductUpdateDTO) -> None:
    if request.name is not UNSET and request.name and request.name.strip():
        product.rename(request.name)

    if request.description is not UNSET:
        product.describe(request.description)

    if request.price is not UNSET:
        product.reprice(Money.of(request.price))

    if request.stock is not UNSET:
        product.restock(StockLevel(request.stock))

    if request.is_active is not UNSET:
        product.set_active(request.is_active)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, request: ProductUpdateDTO) -> ProductDTO | None:
        """Return None when the product is missing or inactive."""
        product = self._product_repo.modify(
            product_id, lambda p: _apply(p, request), active_only=True
        )
        if product is None:
            return None
        return ProductDTO.from_product(product)
