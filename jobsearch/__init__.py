"""Job search query normalization: canonical terms for free-text job searches."""

__version__ = "1.0.0"

from .classification import StructuredQuery
from .search import SearchQueryNormalizer, normalize_search_query

__all__ = [
    "__version__",
    "normalize_search_query",
    "SearchQueryNormalizer",
    "StructuredQuery",
]
