"""Query classifier: routes structured queries around canonicalization."""

from typing import Optional, Sequence

from .models import StructuredQuery
from .patterns import DEFAULT_PATTERNS, QueryPattern


class QueryClassifier:
    """Detects queries that pack several fields into one string.

    Canonicalizing "Python Developer at Google in Bangalore" would destroy its
    structure, so such queries are recognized first and passed through as a
    StructuredQuery.
    """

    def __init__(self, patterns: Optional[Sequence[QueryPattern]] = None):
        """Initialize QueryClassifier.

        Args:
            patterns: Patterns to try, in precedence order (defaults to DEFAULT_PATTERNS)
        """
        self.patterns = tuple(patterns) if patterns is not None else DEFAULT_PATTERNS

    def classify(self, query: str) -> Optional[StructuredQuery]:
        """Return the structured reading of a query, or None for free text.

        Args:
            query: Trimmed, non-empty query in its original case

        Returns:
            StructuredQuery from the first matching pattern, or None
        """
        for pattern in self.patterns:
            structured = pattern.match(query)
            if structured is not None:
                return structured
        return None
