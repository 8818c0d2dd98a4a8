"""Runtime settings, read from ``SOLARCAT_*`` environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SOLARCAT_", env_file=".env", extra="ignore")

    # Storage
    data_dir: Path = _PROJECT_ROOT / "data"
    catalog_file: str = "catalog.json"

    # Catalog
    currency: str = "TRY"

    # Logging
    log_level: str = "INFO"

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / self.catalog_file


settings = Settings()
