"""Runtime configuration using Pydantic Settings.

Values come from ``PANTONE_``-prefixed environment variables or a local
``.env`` file. Matching thresholds are not configurable and live in
``colors`` and ``extract``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the command-line front end and its logging."""

    model_config = SettingsConfigDict(
        env_prefix="PANTONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["prod", "staging", "dev"] = Field(
        default="dev",
        description="Environment name",
    )

    # Reference table
    palette_path: str | None = Field(
        default=None,
        description="Custom reference table (.csv/.json) used instead of the bundled one",
    )
    nearest_count: int = Field(
        default=5,
        ge=1,
        description="Default number of results for nearest-color queries",
    )

    # Image input
    http_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Timeout in seconds when fetching images over HTTP(S)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON lines outside of dev",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
