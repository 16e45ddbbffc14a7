"""Structured query detection (title / company / location)."""

from .classifier import QueryClassifier
from .models import StructuredQuery
from .patterns import (
    CATCH_ALL_INDICATORS,
    DEFAULT_PATTERNS,
    CatchAllPattern,
    QueryPattern,
    ThreeFieldPattern,
    TitleAtCompanyPattern,
    TwoFieldPattern,
)

__all__ = [
    "QueryClassifier",
    "StructuredQuery",
    "QueryPattern",
    "ThreeFieldPattern",
    "TwoFieldPattern",
    "TitleAtCompanyPattern",
    "CatchAllPattern",
    "DEFAULT_PATTERNS",
    "CATCH_ALL_INDICATORS",
]
