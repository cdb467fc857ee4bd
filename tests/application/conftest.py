import pytest

from tests.fakes import FakeProductRepository, seed_catalog


@pytest.fixture
def repo() -> FakeProductRepository:
    """The three-product seed catalog."""
    return FakeProductRepository(seed_catalog())
