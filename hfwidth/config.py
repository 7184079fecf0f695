"""
Configuration management for the hfwidth command line tool.

Uses pydantic-settings to load configuration from environment variables
and an optional .env file. The conversion functions themselves read no
configuration.
"""

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class WidthSettings(BaseSettings):
    """Settings loaded from HFWIDTH_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HFWIDTH_", env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    log_level: LogLevel = Field("WARNING", description="Log level for the CLI")
    json_logs: bool = Field(False, description="Whether to output JSON format logs")
    ensure_ascii: bool = Field(False, description="Escape non-ASCII characters in JSON output")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


def load_settings(**overrides: Any) -> WidthSettings:
    """
    Load settings, applying explicit overrides on top of the environment.

    Args:
        **overrides: Field values that take precedence; None values are ignored

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If any value fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return WidthSettings(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid hfwidth configuration: {e}") from e
