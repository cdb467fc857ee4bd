"""Tests for the AddProduct use case.

Uses the in-memory fake repository, no file I/O.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductCreateDTO
from catalog.domain.exceptions import DuplicateProductNameError, ValidationError

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def _handler(repo) -> AddProductHandler:
    return AddProductHandler(repo, clock=lambda: NOW)


def _monitor(**overrides) -> ProductCreateDTO:
    fields = {"name": "Monitor", "price": Decimal("3000"), "stock": 5}
    fields.update(overrides)
    return ProductCreateDTO(**fields)


class TestAddProductHappyPath:

    def test_returns_read_shape_with_new_id(self, repo):
        dto = _handler(repo).handle(_monitor())
        assert dto.id == 4
        assert dto.name == "Monitor"
        assert dto.price == Decimal("3000")
        assert dto.stock == 5
        assert dto.description is None

    def test_defaults_to_active(self, repo):
        assert _handler(repo).handle(_monitor()).is_active is True

    def test_created_date_comes_from_clock(self, repo):
        assert _handler(repo).handle(_monitor()).created_date == NOW

    def test_persists_product(self, repo):
        dto = _handler(repo).handle(_monitor(description="27 inch"))
        saved = repo.get_by_id(dto.id)
        assert saved.name == "Monitor"
        assert saved.description == "27 inch"

    def test_inactive_creation_is_honoured(self, repo):
        dto = _handler(repo).handle(_monitor(is_active=False))
        assert dto.is_active is False

    def test_default_clock_is_timezone_aware(self, repo):
        dto = AddProductHandler(repo).handle(_monitor())
        assert dto.created_date.tzinfo is not None


class TestAddProductUniqueness:

    def test_second_monitor_conflicts(self, repo):
        handler = _handler(repo)
        handler.handle(_monitor())
        with pytest.raises(DuplicateProductNameError, match="already exists"):
            handler.handle(_monitor(stock=1))

    def test_no_row_inserted_on_conflict(self, repo):
        with pytest.raises(DuplicateProductNameError):
            _handler(repo).handle(_monitor(name="Mouse"))
        assert repo.writes == 0
        assert repo.get_by_id(4) is None

    def test_inactive_products_still_reserve_their_name(self, repo):
        DeleteProductHandler(repo).handle(2)
        with pytest.raises(DuplicateProductNameError):
            _handler(repo).handle(_monitor(name="Mouse"))


class TestAddProductValidation:

    def test_negative_price_rejected(self, repo):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _handler(repo).handle(_monitor(price=Decimal("-1")))
        assert repo.writes == 0

    def test_negative_stock_rejected(self, repo):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _handler(repo).handle(_monitor(stock=-1))

    def test_blank_name_rejected(self, repo):
        with pytest.raises(ValidationError, match="name is required"):
            _handler(repo).handle(_monitor(name=" "))

    def test_non_boolean_active_flag_rejected(self, repo):
        with pytest.raises(ValidationError, match="must be a boolean"):
            _handler(repo).handle(_monitor(is_active="yes"))
        assert repo.writes == 0
