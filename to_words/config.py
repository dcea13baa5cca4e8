"""
Runtime configuration from environment variables.

    TO_WORDS_LOCALE      default locale code for ToWords()   (default: en-US)
    TO_WORDS_LOG_LEVEL   log level for the CLI and API       (default: INFO)

Entry points load a ``.env`` file (python-dotenv) before calling
``load_settings()``, so both sources work.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, field_validator

DEFAULT_LOCALE = "en-US"


class Settings(BaseModel):
    """Process-wide settings."""

    default_locale: str = DEFAULT_LOCALE
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings(
        default_locale=os.environ.get("TO_WORDS_LOCALE", DEFAULT_LOCALE),
        log_level=os.environ.get("TO_WORDS_LOG_LEVEL", "INFO"),
    )
