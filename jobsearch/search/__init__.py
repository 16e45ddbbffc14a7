"""Search boundary: query normalization, query-string building and exact-match filtering.

This module provides:
- normalize_search_query: the single function the search box calls
- SearchQueryNormalizer / NormalizationOutcome: injectable service and its explained result
- build_search_params / build_jobs_url / parse_search_params: jobs-listing query string
- matches_structured_query: downstream exact-match predicate
"""

from .exceptions import EmptyQueryError, EmptySearchError
from .filters import matches_structured_query
from .params import SearchFilters, build_jobs_url, build_search_params, parse_search_params
from .service import (
    NormalizationOutcome,
    SearchQueryNormalizer,
    get_default_normalizer,
    normalize_search_query,
)

__all__ = [
    "normalize_search_query",
    "get_default_normalizer",
    "SearchQueryNormalizer",
    "NormalizationOutcome",
    "build_search_params",
    "build_jobs_url",
    "parse_search_params",
    "SearchFilters",
    "matches_structured_query",
    "EmptyQueryError",
    "EmptySearchError",
]
