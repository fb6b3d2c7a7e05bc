"""Library configuration using Pydantic settings.

Configuration is loaded from:
1. Environment variables (EASY_COLLECTION_* prefix)
2. .env file in current directory
3. Default values
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AddPolicy(str, Enum):
    """How ``Collection.add`` treats collections that are not lists."""

    LIST_ONLY = "list_only"
    PERMISSIVE = "permissive"

    @classmethod
    def _missing_(cls, value: object) -> AddPolicy | None:
        if isinstance(value, str):
            normalized = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class CollectionSettings(BaseSettings):
    """Configuration for easy_collection.

    Environment variables are prefixed with EASY_COLLECTION_.
    """

    model_config = SettingsConfigDict(
        env_prefix="EASY_COLLECTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    add_policy: AddPolicy = AddPolicy.LIST_ONLY
    log_level: str = "INFO"

    @field_validator("add_policy", mode="before")
    @classmethod
    def normalize_add_policy(cls, v: object) -> object:
        """Accept policy names case-insensitively."""
        if isinstance(v, str):
            return AddPolicy(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return upper


@lru_cache
def get_settings() -> CollectionSettings:
    """Get the global settings.

    Settings are cached after first load.
    """
    return CollectionSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (for testing)."""
    get_settings.cache_clear()
