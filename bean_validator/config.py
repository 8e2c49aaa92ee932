"""
Runtime settings for bean-validator.

Settings come from environment variables, optionally seeded from a .env
file. Command-line flags override them.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

_TRUE_VALUES = ("1", "true", "yes", "on")


class Settings(BaseModel):
    """
    Attributes:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: "json" (default) or "text"
        metrics_enabled: Whether the engine records Prometheus metrics
    """

    log_level: str = "INFO"
    log_format: str = "json"
    metrics_enabled: bool = True

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        if v not in ("json", "text"):
            raise ValueError(f"Invalid log format '{v}'. Must be 'json' or 'text'")
        return v


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from the environment.

    Args:
        env_file: Optional .env file; its values do not override variables
            already set in the environment

    Returns:
        Settings instance
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json"),
        metrics_enabled=os.getenv("METRICS_ENABLED", "true").lower() in _TRUE_VALUES,
    )
