"""Data model for structured (exact-match) search queries."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class StructuredQuery:
    """A search string that encodes job title, company and/or location.

    Structured queries bypass canonicalization and are sent downstream for
    exact matching with their fields as typed.

    Attributes:
        is_exact_match: Always True for classifier output
        job_title: Job title field, if the pattern captured one
        company: Company field, if the pattern captured one
        location: Location field, if the pattern captured one
        original_query: The trimmed query exactly as the user typed it
        pattern: Name of the classifier pattern that produced this record
    """

    original_query: str
    is_exact_match: bool = True
    job_title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    pattern: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict (for JSON output and logs)."""
        return asdict(self)
