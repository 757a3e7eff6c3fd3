"""Library configuration via Pydantic Settings.

Reads environment variables (and optional .env file) and validates them
when the registry is bootstrapped. Use ``get_settings()`` to obtain a
cached singleton.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Validated settings sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # --- Translation -----------------------------------------------------
    DEFAULT_LANGUAGE: str = ""  # empty = translation disabled
    DEFAULT_TRANSLATOR: str = "default"
    TRANSLATIONS_FILE: str = ""  # optional JSON array of records

    # --- Logging ---------------------------------------------------------
    LOG_LEVEL: str = "INFO"

    # --- Validators ------------------------------------------------------
    @property
    def initial_language(self) -> str | None:
        """Language handed to the default translator (``None`` = disabled)."""
        return self.DEFAULT_LANGUAGE or None

    @field_validator("DEFAULT_LANGUAGE", "TRANSLATIONS_FILE")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()

    @field_validator("DEFAULT_TRANSLATOR")
    @classmethod
    def _validate_translator_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("DEFAULT_TRANSLATOR must not be empty")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings singleton."""
    return Settings()
