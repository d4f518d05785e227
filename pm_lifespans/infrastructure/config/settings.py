"""Runtime settings loaded from ``PM_LIFESPANS_*`` environment variables."""

import os

from datetime import date
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


ENV_PREFIX = "PM_LIFESPANS_"

DEFAULT_SOURCE_URL = (
    "https://en.wikipedia.org/wiki/List_of_prime_ministers_of_Australia"
)
DEFAULT_NAME_COLUMN = "Name(Birth–Death)Constituency"
DEFAULT_USER_AGENT = "PmLifespansBot/0.1 (lifespan-statistics; contact@example.com)"


class Settings(BaseModel):
    """Application settings."""

    source_url: str = DEFAULT_SOURCE_URL
    table_class: str = "wikitable"
    name_column: str = DEFAULT_NAME_COLUMN
    cache_dir: Path = Path(".cache")
    request_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"
    current_year: int = Field(default_factory=lambda: date.today().year)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return normalized

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from environment variables.

        Only variables that are set override the defaults; values are
        validated and coerced by pydantic.
        """
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            key = ENV_PREFIX + field_name.upper()
            if key in env and env[key] != "":
                values[field_name] = env[key]
        return cls.model_validate(values)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reload_settings() -> Settings:
    """Re-read the environment and replace the cached settings."""
    global _settings
    _settings = Settings.from_env()
    return _settings
