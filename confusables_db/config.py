# confusables_db/config.py
from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

LATEST_CONFUSABLES_URL = "https://unicode.org/Public/security/latest/confusables.txt"
VERSIONED_CONFUSABLES_URL = "https://unicode.org/Public/security/{version}/confusables.txt"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CONFUSABLES_", extra="ignore")

    # --- Data ---
    # Optional JSON record set to serve instead of the embedded dataset.
    DATA_PATH: Optional[str] = None

    # --- Generator ---
    SOURCE_URL_LATEST: str = Field(default=LATEST_CONFUSABLES_URL)
    SOURCE_URL_VERSIONED: str = Field(default=VERSIONED_CONFUSABLES_URL)
    HTTP_TIMEOUT_S: float = Field(default=30.0, gt=0)

    # --- Logging / metrics ---
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=False)
    METRICS_ENABLED: bool = Field(default=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


__all__ = ["APP_VERSION", "Settings", "get_settings"]
