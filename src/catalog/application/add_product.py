"""Application service: Add Product use case."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from catalog.application.dto import ProductCreateDTO, ProductDTO
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, StockLevel
from catalog.domain.repository.product_repository import ProductRepository


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, request: ProductCreateDTO) -> ProductDTO:
        """Add a new product to the catalog.

        Name uniqueness is the store's job: a duplicate surfaces as
        DuplicateProductNameError from ``add`` and nothing is inserted.
        """
        product = Product.create(
            name=request.name,
            description=request.description,
            price=Money.of(request.price),
            stock=StockLevel(request.stock),
            created_date=self._clock(),
            is_active=request.is_active,
        )
        stored = self._product_repo.add(product)
        return ProductDTO.from_product(stored)
