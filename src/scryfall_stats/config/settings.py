"""
Configuration management for Scryfall Search Stats.

Uses Pydantic for type-safe, validated configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from ..errors import ConfigurationError


class StatsSettings(BaseSettings):
    """Main configuration for Scryfall Search Stats.

    Settings can be overridden via:
    1. Environment variables (prefixed with SS_)
    2. .env file in the working directory
    3. Programmatic overrides

    Example:
        export SS_MAX_PAGES=20
        export SS_LOG_LEVEL=DEBUG
    """

    # === Scryfall API ===
    api_base: str = Field(
        default="https://api.scryfall.com",
        description="Base URL of the Scryfall API",
    )
    user_agent: str = Field(
        default="ScryfallSearchStats/1.0",
        description="User-Agent header sent with every request",
    )
    http_timeout: int = Field(
        default=30, ge=1, le=300, description="HTTP request timeout in seconds"
    )

    # === Pagination ===
    max_pages: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum number of result pages to fetch (175 cards each)",
    )
    request_delay: float = Field(
        default=0.1,
        ge=0.0,
        le=10.0,
        description="Delay before each API request (seconds)",
    )

    # === Report ===
    top_n: int = Field(
        default=5, ge=1, le=50, description="Entries shown per ranked section"
    )

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Console logging level"
    )
    log_rotation: str = Field(default="10 MB", description="Log file rotation size")
    log_retention: str = Field(
        default="10 days", description="Log file retention period"
    )
    log_to_file: bool = Field(default=False, description="Enable file logging")
    logs_dir: Path = Field(default=Path("logs"), description="Log files directory")

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the API base so paths can be appended directly."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_base must be an http(s) URL, got {v!r}")
        return v

    model_config = {
        "env_prefix": "SS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


def load_settings(**overrides) -> StatsSettings:
    """Build settings, reporting invalid values as a ConfigurationError.

    Raises:
        ConfigurationError: If an environment variable or override is invalid
    """
    try:
        return StatsSettings(**overrides)
    except ValidationError as exc:
        problems = "; ".join(
            "{}: {}".format(".".join(str(p) for p in error["loc"]), error["msg"])
            for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from exc


# Global settings instance
settings = load_settings()


def reload_settings() -> StatsSettings:
    """Reload settings from environment and .env file.

    Useful for testing or runtime configuration changes.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    global settings
    settings = load_settings()
    return settings
