"""JSON-file-backed implementation of ProductRepository.

The whole catalog lives in one JSON array. Each mutating call is a
read-modify-write of that file done under the instance lock, so calls on
one JsonProductRepository never interleave. Separate instances, and
separate processes, are not coordinated with each other. New content
is written to a temporary file and swapped in with ``os.replace`` so a
crash never leaves a half-written catalog behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable

from catalog.domain.exceptions import (
    DuplicateProductNameError,
    RecordStoreError,
    ValidationError,
)
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, StockLevel
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def _is_row(raw: object) -> bool:
    return (
        isinstance(raw, dict)
        and type(raw.get("id")) is int
        and isinstance(raw.get("name"), str)
    )


class JsonProductRepository(ProductRepository):

    def __init__(
        self,
        file_path: Path,
        seed: list[dict[str, Any]] | None = None,
    ) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file(seed or [])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Product | None:
        for raw in self._load_raw():
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def add(self, product: Product) -> Product:
        with self._lock:
            rows = self._load_raw()
            if any(raw["name"] == product.name for raw in rows):
                raise DuplicateProductNameError(product.name)

            product.id = max((raw["id"] for raw in rows), default=0) + 1
            rows.append(self._to_raw(product))
            self._persist(rows)

        logger.info("Inserted product #%s %r", product.id, product.name)
        return product

    def modify(
        self,
        product_id: int,
        change: Callable[[Product], None],
        *,
        active_only: bool = True,
    ) -> Product | None:
        with self._lock:
            rows = self._load_raw()
            index = next(
                (i for i, raw in enumerate(rows) if raw["id"] == product_id), None
            )
            if index is None:
                return None

            product = self._to_domain(rows[index])
            if active_only and not product.is_active:
                return None

            original = replace(product)
            change(product)
            if product == original:
                return product

            if any(
                raw["name"] == product.name and raw["id"] != product_id
                for raw in rows
            ):
                raise DuplicateProductNameError(product.name)

            rows[index] = self._to_raw(product)
            self._persist(rows)

        logger.debug("Updated product #%s", product_id)
        return product

    def find(self, predicate: Callable[[Product], bool]) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._load_raw()]
        return sorted(
            (p for p in products if predicate(p)),
            key=lambda p: p.name,
        )

    # --- Serialization helpers ------------------------------------------------

    def _load_raw(self) -> list[dict[str, Any]]:
        with self._lock:
            try:
                rows = json.loads(self._file_path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise RecordStoreError(
                    f"Cannot read product store {self._file_path}: {exc}"
                ) from exc

        if not isinstance(rows, list) or not all(map(_is_row, rows)):
            raise RecordStoreError(
                f"Malformed product store {self._file_path}: "
                "expected a list of rows with an integer id and a string name"
            )
        return rows

    def _persist(self, rows: list[dict[str, Any]]) -> None:
        content = json.dumps(rows, indent=2, ensure_ascii=False) + "\n"
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=".products-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(content)
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise RecordStoreError(
                f"Cannot write product store {self._file_path}: {exc}"
            ) from exc

    @staticmethod
    def _to_raw(product: Product) -> dict[str, Any]:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "stock": product.stock.value,
            "created_date": product.created_date.isoformat(),
            "is_active": product.is_active,
        }

    def _to_domain(self, raw: dict[str, Any]) -> Product:
        try:
            return Product(
                id=raw["id"],
                name=raw["name"],
                description=raw.get("description"),
                price=Money(Decimal(raw["price"])),
                stock=StockLevel(raw["stock"]),
                created_date=datetime.fromisoformat(raw["created_date"]),
                is_active=raw.get("is_active", True),
            )
        except (KeyError, TypeError, ArithmeticError, ValueError, ValidationError) as exc:
            raise RecordStoreError(
                f"Malformed product row in {self._file_path}: {raw!r}"
            ) from exc

    def _ensure_file(self, seed: list[dict[str, Any]]) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RecordStoreError(
                f"Cannot create data directory {self._file_path.parent}: {exc}"
            ) from exc

        now = datetime.now(timezone.utc).isoformat()
        rows = [
            {"created_date": now, "is_active": True, "description": None, **row}
            for row in seed
        ]
        self._persist(rows)
        logger.info("Initialised %s with %d product(s)", self._file_path, len(rows))
