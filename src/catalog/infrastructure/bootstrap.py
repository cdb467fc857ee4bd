"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.infrastructure.config import Settings
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from catalog.infrastructure.persistence.seed import SEED_PRODUCTS


def product_repository(settings: Settings) -> JsonProductRepository:
    seed = SEED_PRODUCTS if settings.seed_on_init else None
    return JsonProductRepository(settings.products_path, seed=seed)
