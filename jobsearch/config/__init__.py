"""Configuration management for the search query normalizer."""

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .loader import load_config, read_yaml_mapping, validate_config_file
from .models import (
    AliasTableConfig,
    AppConfig,
    LogFormat,
    LogLevel,
    LoggingConfig,
    MatchingConfig,
    SearchConfig,
)

__all__ = [
    # Main loader functions
    "load_config",
    "validate_config_file",
    "load_environment_config",
    "read_yaml_mapping",
    # Configuration models
    "AppConfig",
    "AliasTableConfig",
    "MatchingConfig",
    "SearchConfig",
    "LoggingConfig",
    "EnvironmentConfig",
    # Enums
    "LogLevel",
    "LogFormat",
    # Exceptions
    "ConfigurationError",
]
