"""Runtime configuration, read from the environment and an optional .env file."""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    """Catalog settings. Every field can be overridden with CATALOG_<FIELD>."""

    # Storage
    data_dir: Path = _PROJECT_ROOT / "data"
    products_file: str = "products.json"
    seed_on_init: bool = True

    # Logging
    log_level: str = "WARNING"
    log_format: str = "text"

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("text", "json"):
            raise ValueError("log_format must be 'text' or 'json'")
        return value

    @property
    def products_path(self) -> Path:
        return self.data_dir / self.products_file
