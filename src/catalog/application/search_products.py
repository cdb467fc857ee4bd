"""Application service: Search Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import ValidationError
from catalog.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, term: str) -> list[ProductDTO]:
        """Active products whose name or description contains *term*.

        Matching is a case-sensitive substring test. Results are ordered
        by name.
        """
        if not term or not term.strip():
            raise ValidationError("Search term cannot be empty")

        products = self._product_repo.find(
            lambda p: p.is_active and p.matches(term)
        )
        return [ProductDTO.from_product(p) for p in products]
