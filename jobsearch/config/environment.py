"""Environment variable loading and validation."""

import os
from pathlib import Path
from typing import Optional

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "key-value"]


class EnvironmentConfig:
    """Environment variable configuration holder."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        alias_table_path: Optional[Path] = None,
        jobs_url: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """Initialize environment configuration."""
        self.log_level = log_level
        self.log_format = log_format
        self.alias_table_path = alias_table_path
        self.jobs_url = jobs_url
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    All variables are optional:
    - LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - LOG_FORMAT: Override log format (json, key-value)
    - ALIAS_TABLE_PATH: Custom alias table YAML file
    - JOBS_URL: Jobs listing page used when building search URLs
    - ENVIRONMENT: Environment label stamped on log records (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If any variable is set to an invalid value
    """
    errors = []

    log_level = os.getenv("LOG_LEVEL")
    log_format = os.getenv("LOG_FORMAT")
    alias_table_path_str = os.getenv("ALIAS_TABLE_PATH")
    jobs_url = os.getenv("JOBS_URL")
    environment = os.getenv("ENVIRONMENT")

    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    if log_format:
        log_format = log_format.strip().lower()
        if log_format not in VALID_LOG_FORMATS:
            errors.append(
                f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(VALID_LOG_FORMATS)}"
            )

    alias_table_path = None
    if alias_table_path_str:
        alias_table_path = Path(alias_table_path_str.strip())
        if not alias_table_path.is_file():
            errors.append(f"ALIAS_TABLE_PATH does not point to a file: '{alias_table_path}'")

    if jobs_url:
        jobs_url = jobs_url.strip()
        if not jobs_url.startswith(("http://", "https://")):
            errors.append(f"Invalid JOBS_URL: '{jobs_url}'. Must start with http:// or https://")

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Copy .env.example to .env and adjust the values",
                "Unset variables you do not need; all of them are optional",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level,
        log_format=log_format,
        alias_table_path=alias_table_path,
        jobs_url=jobs_url,
        environment=environment.strip() if environment else None,
    )
