"""Tests for environment-driven settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from catalog.infrastructure.config import Settings


def test_defaults(monkeypatch):
    for name in ("CATALOG_DATA_DIR", "CATALOG_LOG_LEVEL", "CATALOG_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.products_path.name == "products.json"
    assert settings.seed_on_init is True
    assert settings.log_format == "text"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CATALOG_LOG_FORMAT", "JSON")
    settings = Settings(_env_file=None)
    assert settings.products_path == Path(tmp_path) / "products.json"
    assert settings.log_format == "json"


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("CATALOG_LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
