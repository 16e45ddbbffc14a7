"""Exact-match filtering of job postings against a structured query."""

from typing import Optional

from jobsearch.classification import StructuredQuery


def _mutually_contained(wanted: str, actual: Optional[str]) -> bool:
    """Case-insensitive containment in either direction; a blank job field never matches."""
    if not actual or not actual.strip():
        return False
    wanted_lower = wanted.lower().strip()
    actual_lower = actual.lower().strip()
    return wanted_lower in actual_lower or actual_lower in wanted_lower


def matches_structured_query(
    query: StructuredQuery,
    title: Optional[str],
    company: Optional[str],
    location: Optional[str],
) -> bool:
    """
    Decide whether a job posting satisfies a structured query.

    Positional patterns require every populated query field to match its job
    field (each contained in the other, ignoring case). The catch-all pattern
    puts the whole query in every field and means "match anywhere", so one
    matching field is enough.

    Args:
        query: StructuredQuery from the classifier
        title: Job title
        company: Company name
        location: Job location

    Returns:
        True if the posting matches
    """
    pairs = [
        (query.job_title, title),
        (query.company, company),
        (query.location, location),
    ]
    checks = [_mutually_contained(wanted, actual) for wanted, actual in pairs if wanted]

    if not checks:
        return False

    if query.pattern == "catch_all":
        return any(checks)
    return all(checks)
