"""Configuration schema models using Pydantic."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class AliasTableConfig(BaseModel):
    """Where the alias table is loaded from."""

    path: Optional[Path] = Field(
        None,
        description="Custom alias table YAML file (defaults to the packaged table)",
    )


class MatchingConfig(BaseModel):
    """Thresholds for the canonicalization cascade.

    Every threshold is a strict lower bound: a similarity must be greater than
    the value to be accepted.
    """

    high_similarity: float = Field(
        0.8, gt=0.0, lt=1.0, description="Whole-query similarity, strict pass"
    )
    medium_similarity: float = Field(
        0.7, gt=0.0, lt=1.0, description="Whole-query similarity, second pass"
    )
    token_high_similarity: float = Field(
        0.8, gt=0.0, lt=1.0, description="Per-word similarity"
    )
    token_medium_similarity: float = Field(
        0.6, gt=0.0, lt=1.0, description="Per-word similarity alongside word containment"
    )
    low_similarity: float = Field(
        0.5, gt=0.0, lt=1.0, description="Whole-query similarity, last resort"
    )
    min_token_length: int = Field(
        3, ge=1, le=10, description="Shortest word that takes part in word containment"
    )
    min_token_coverage: float = Field(
        0.5,
        ge=0.0,
        le=1.0,
        description="Share of query words that must match one surface form in per-word stages",
    )


class SearchConfig(BaseModel):
    """Boundary settings for the search box."""

    max_query_length: int = Field(
        200, ge=20, le=2000, description="Longer queries are truncated before matching"
    )
    jobs_url: str = Field(
        "http://localhost:3000/jobs",
        min_length=1,
        description="Jobs listing page the query string is appended to",
    )

    @field_validator("jobs_url")
    @classmethod
    def validate_jobs_url(cls, v: str) -> str:
        """Strip whitespace and require an http(s) URL."""
        stripped = v.strip()
        if not stripped.startswith(("http://", "https://")):
            raise ValueError("jobs_url must start with http:// or https://")
        return stripped


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True, "validate_default": True}


class AppConfig(BaseModel):
    """Root configuration object for the search query normalizer."""

    aliases: AliasTableConfig = Field(
        default_factory=AliasTableConfig, description="Alias table source"
    )
    matching: MatchingConfig = Field(
        default_factory=MatchingConfig, description="Cascade thresholds"
    )
    search: SearchConfig = Field(default_factory=SearchConfig, description="Search box settings")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
