"""Command-line configuration loading."""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from version_code.code import Factory
from version_code.schema import parse_schema_spec


class Settings(BaseSettings):
    """Runtime settings loaded from ``VERSION_CODE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VERSION_CODE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    schema_spec: str = "Major:7,Minor:19,Patch:5"
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level

    def factory(self) -> Factory:
        """Build the default factory described by ``schema_spec``."""
        return Factory(*parse_schema_spec(self.schema_spec))


@lru_cache
def get_settings() -> Settings:
    """Return cached settings."""
    return Settings()
