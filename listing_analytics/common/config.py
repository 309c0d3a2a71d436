"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from importlib import resources
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_DIR = PROJECT_ROOT / "config"
# Sample data ships inside the package so installed copies can find it
DATA_DIR = Path(str(resources.files("listing_analytics") / "data"))
DEFAULT_LISTINGS_PATH = DATA_DIR / "listings.json"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class DataSettings(BaseModel):
    """Where the listing collection is read from."""
    listings_path: str = str(DEFAULT_LISTINGS_PATH)

    @property
    def listings_abs_path(self) -> Path:
        """Resolve listings path against the working directory, then project root."""
        p = Path(self.listings_path)
        if p.is_absolute():
            return p
        if (cwd_path := Path.cwd() / p).exists():
            return cwd_path
        return PROJECT_ROOT / p


class LoggingSettings(BaseModel):
    """Log output settings."""
    level: str = "INFO"


class Settings(BaseModel):
    """Top-level application settings."""
    data: DataSettings = Field(default_factory=DataSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def __init__(self, **values) -> None:
        super().__init__(**values)
        if path := os.getenv("LISTINGS_DATA_PATH"):
            self.data.listings_path = path
        if level := os.getenv("LOG_LEVEL"):
            self.logging.level = level.upper()

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults."""
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()


# Singleton settings instance
settings = Settings.load()
