"""Verity configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VeritySettings(BaseSettings):
    """Settings controlling how matcher messages are rendered.

    Loads from environment variables automatically:
        VERITY_MAX_VALUE_REPR_LENGTH

    Settings never change whether a matcher passes, only how values
    appear in failure messages.
    """

    max_value_repr_length: int = Field(
        default=120,
        ge=0,
        description="Truncate rendered values longer than this; 0 disables truncation",
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="VERITY_",
    )


@lru_cache(maxsize=1)
def get_settings() -> VeritySettings:
    """Return the process-wide settings, loading them on first use."""
    return VeritySettings()


def reset_settings() -> None:
    """Drop cached settings so the next lookup re-reads the environment."""
    get_settings.cache_clear()
