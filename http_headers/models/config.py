"""Library configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from http_headers.core.checksum import DEFAULT_HASH_ALGORITHM, SUPPORTED_HASH_ALGORITHMS


class Config(BaseSettings):
    """Configuration loaded from ``HTTP_HEADERS_*`` environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HTTP_HEADERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: str = "console"
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        """Log format must be console or json."""
        lower_value = value.lower()
        if lower_value not in ("console", "json"):
            msg = "log_format must be one of console, json"
            raise ValueError(msg)
        return lower_value

    @field_validator("hash_algorithm")
    @classmethod
    def validate_hash_algorithm(cls, value: str) -> str:
        """Hash algorithm must be a fixed-length hashlib digest."""
        lower_value = value.lower()
        if lower_value not in SUPPORTED_HASH_ALGORITHMS:
            msg = f"hash_algorithm '{value}' is not supported by hashlib"
            raise ValueError(msg)
        return lower_value
