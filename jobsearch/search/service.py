"""Search query normalization service.

This module implements the single boundary the search box calls:
1. Enforce non-empty, trimmed input and cap its length
2. Route structured queries (title / company / location) around canonicalization
3. Canonicalize free text, falling back to the query as typed
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

from jobsearch.aliases import get_default_alias_table, load_alias_table
from jobsearch.aliases.models import AliasTable
from jobsearch.classification import QueryClassifier, StructuredQuery
from jobsearch.config.models import AppConfig, MatchingConfig, SearchConfig
from jobsearch.logging import get_logger
from jobsearch.matching import CanonicalMatch, Canonicalizer

from .exceptions import EmptyQueryError

logger = get_logger(__name__, component="search")

NormalizedQuery = Union[StructuredQuery, str]


@dataclass(frozen=True)
class NormalizationOutcome:
    """A normalization result together with how it was reached.

    Attributes:
        query: The trimmed (and possibly truncated) query that was processed
        result: StructuredQuery, canonical term, or the query itself on passthrough
        match: Cascade match behind a canonical term, None otherwise
        truncated: Whether the input was cut to the configured maximum length
    """

    query: str
    result: NormalizedQuery
    match: Optional[CanonicalMatch] = None
    truncated: bool = False

    @property
    def is_structured(self) -> bool:
        return isinstance(self.result, StructuredQuery)

    @property
    def is_passthrough(self) -> bool:
        return not self.is_structured and self.match is None

    @property
    def stage(self) -> str:
        """Classifier pattern, cascade stage, or "passthrough"."""
        if isinstance(self.result, StructuredQuery):
            return self.result.pattern
        if self.match is not None:
            return self.match.stage
        return "passthrough"


class SearchQueryNormalizer:
    """Normalizes raw search-box text into a structured query or a search term.

    Collaborators are injected so tests and alternative alias tables can be
    used without touching process-wide state.
    """

    def __init__(
        self,
        alias_table: Optional[AliasTable] = None,
        classifier: Optional[QueryClassifier] = None,
        canonicalizer: Optional[Canonicalizer] = None,
        matching_config: Optional[MatchingConfig] = None,
        search_config: Optional[SearchConfig] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize SearchQueryNormalizer.

        Args:
            alias_table: Alias table (defaults to the packaged table); ignored if canonicalizer given
            classifier: Query classifier (defaults to QueryClassifier())
            canonicalizer: Canonicalizer (built from alias_table and matching_config if omitted)
            matching_config: Cascade thresholds for the default canonicalizer
            search_config: Boundary settings such as max_query_length
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.search_config = search_config or SearchConfig()
        self.classifier = classifier or QueryClassifier()
        if canonicalizer is None:
            canonicalizer = Canonicalizer(
                alias_table or get_default_alias_table(),
                matching_config=matching_config,
            )
        self.canonicalizer = canonicalizer
        self.logger = logger_instance or logger

    @classmethod
    def from_config(cls, app_config: AppConfig) -> "SearchQueryNormalizer":
        """Build a normalizer from application configuration.

        Args:
            app_config: Validated AppConfig

        Returns:
            SearchQueryNormalizer using the configured alias table and thresholds

        Raises:
            ConfigurationError: If the configured alias table cannot be loaded
        """
        if app_config.aliases.path is not None:
            alias_table = load_alias_table(app_config.aliases.path)
        else:
            alias_table = get_default_alias_table()

        return cls(
            alias_table=alias_table,
            matching_config=app_config.matching,
            search_config=app_config.search,
        )

    def explain(self, raw: Optional[str]) -> NormalizationOutcome:
        """Normalize a query and report which pattern or stage decided it.

        Args:
            raw: Text from the search box

        Returns:
            NormalizationOutcome

        Raises:
            EmptyQueryError: If raw is None, empty or whitespace-only
        """
        if raw is None or not raw.strip():
            raise EmptyQueryError()

        query = raw.strip()
        truncated = False
        max_length = self.search_config.max_query_length
        if len(query) > max_length:
            query = query[:max_length].rstrip()
            truncated = True
            self.logger.warning(
                f"Search query truncated to {max_length} characters",
                extra={
                    "event": "search.query.truncated",
                    "original_length": len(raw.strip()),
                    "max_query_length": max_length,
                },
            )

        structured = self.classifier.classify(query)
        if structured is not None:
            self.logger.info(
                "Structured search query detected",
                extra={
                    "event": "search.query.structured",
                    "pattern": structured.pattern,
                    "job_title": structured.job_title,
                    "company": structured.company,
                    "location": structured.location,
                },
            )
            return NormalizationOutcome(query=query, result=structured, truncated=truncated)

        match = self.canonicalizer.match(query)
        if match is None:
            self.logger.info(
                "No canonical term found, passing query through",
                extra={"event": "search.query.passthrough", "query": query},
            )
            return NormalizationOutcome(query=query, result=query, truncated=truncated)

        self.logger.info(
            f"Canonicalized search query to '{match.canonical_term}'",
            extra={
                "event": "search.query.canonicalized",
                "query": query,
                "canonical_term": match.canonical_term,
                "stage": match.stage,
            },
        )
        return NormalizationOutcome(
            query=query, result=match.canonical_term, match=match, truncated=truncated
        )

    def normalize(self, raw: Optional[str]) -> NormalizedQuery:
        """Normalize a query into a StructuredQuery or a search term.

        Args:
            raw: Text from the search box

        Returns:
            StructuredQuery for structured input; otherwise the canonical term,
            or the trimmed query unchanged when no canonical term fits

        Raises:
            EmptyQueryError: If raw is None, empty or whitespace-only
        """
        return self.explain(raw).result


@lru_cache(maxsize=1)
def get_default_normalizer() -> SearchQueryNormalizer:
    """Process-wide normalizer over the packaged alias table and default settings."""
    return SearchQueryNormalizer()


def normalize_search_query(raw: Optional[str]) -> NormalizedQuery:
    """Normalize search-box text with the default normalizer.

    Example:
        >>> normalize_search_query("intrn")
        'intern'
    """
    return get_default_normalizer().normalize(raw)
