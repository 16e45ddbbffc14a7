"""Data models for the canonicalization cascade."""

from dataclasses import dataclass
from typing import Tuple

from jobsearch.utils.text import collapse_whitespace, tokenize


@dataclass(frozen=True)
class PreparedQuery:
    """A query in the form every cascade stage compares against.

    Attributes:
        text: Lower-cased query with whitespace runs collapsed
        tokens: Whitespace-delimited words of text
    """

    text: str
    tokens: Tuple[str, ...]

    @classmethod
    def from_text(cls, query: str) -> "PreparedQuery":
        text = collapse_whitespace(query).lower()
        return cls(text=text, tokens=tuple(tokenize(text)))


@dataclass(frozen=True)
class CanonicalMatch:
    """Result of a successful cascade stage.

    Attributes:
        canonical_term: Canonical term the query resolves to
        surface_form: Surface form that satisfied the stage
        stage: Name of the stage that accepted the match
        score: Similarity (or word coverage) behind the decision; 1.0 for exact and containment
    """

    canonical_term: str
    surface_form: str
    stage: str
    score: float = 1.0
