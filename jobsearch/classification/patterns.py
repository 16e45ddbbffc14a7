"""Ordered pattern matchers that recognize structured search queries.

Each pattern either returns a StructuredQuery or None. The classifier tries
them in sequence and the first match wins, so precedence is the order of
DEFAULT_PATTERNS rather than branching logic.
"""

import re
from typing import Optional, Sequence, Tuple

from .models import StructuredQuery

CATCH_ALL_INDICATORS: Tuple[str, ...] = (
    " at ",
    " in ",
    "@",
    "position:",
    "company:",
    "location:",
)


def _clean(group: Optional[str]) -> Optional[str]:
    if group is None:
        return None
    stripped = group.strip()
    return stripped or None


class QueryPattern:
    """Base class for structured-query patterns."""

    name = "pattern"

    def match(self, query: str) -> Optional[StructuredQuery]:
        raise NotImplementedError


class ThreeFieldPattern(QueryPattern):
    """``<title> at|in|@ <company> in|at|@ <location>``."""

    name = "three_field"
    regex = re.compile(r"(.+?)\s+(?:at|in|@)\s+(.+?)\s+(?:in|at|@)\s+(.+)", re.IGNORECASE)

    def match(self, query: str) -> Optional[StructuredQuery]:
        found = self.regex.match(query)
        if not found:
            return None
        return StructuredQuery(
            original_query=query,
            job_title=_clean(found.group(1)),
            company=_clean(found.group(2)),
            location=_clean(found.group(3)),
            pattern=self.name,
        )


class TwoFieldPattern(QueryPattern):
    """``<company> in <location>``."""

    name = "two_field"
    regex = re.compile(r"(.+?)\s+in\s+(.+)", re.IGNORECASE)

    def match(self, query: str) -> Optional[StructuredQuery]:
        found = self.regex.match(query)
        if not found:
            return None
        return StructuredQuery(
            original_query=query,
            company=_clean(found.group(1)),
            location=_clean(found.group(2)),
            pattern=self.name,
        )


class TitleAtCompanyPattern(QueryPattern):
    """``<title> at|@ <company>``."""

    name = "title_at_company"
    regex = re.compile(r"(.+?)\s+(?:at|@)\s+(.+)", re.IGNORECASE)

    def match(self, query: str) -> Optional[StructuredQuery]:
        found = self.regex.match(query)
        if not found:
            return None
        return StructuredQuery(
            original_query=query,
            job_title=_clean(found.group(1)),
            company=_clean(found.group(2)),
            pattern=self.name,
        )


class CatchAllPattern(QueryPattern):
    """Connector or field prefix present but no positional pattern parsed.

    Every field is set to the whole query, which downstream exact matching
    treats as "match anywhere".
    """

    name = "catch_all"

    def __init__(self, indicators: Sequence[str] = CATCH_ALL_INDICATORS):
        self.indicators = tuple(indicator.lower() for indicator in indicators)

    def match(self, query: str) -> Optional[StructuredQuery]:
        lowered = query.lower()
        if not any(indicator in lowered for indicator in self.indicators):
            return None
        return StructuredQuery(
            original_query=query,
            job_title=query,
            company=query,
            location=query,
            pattern=self.name,
        )


DEFAULT_PATTERNS: Tuple[QueryPattern, ...] = (
    ThreeFieldPattern(),
    TwoFieldPattern(),
    TitleAtCompanyPattern(),
    CatchAllPattern(),
)
