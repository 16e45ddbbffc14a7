"""Cascade stages for mapping a query onto a canonical term.

Each stage walks the alias entries in matching order and returns the first
entry with an accepting surface form, or None. Stages run from strictest to
loosest and the cascade stops at the first stage that returns a match, so a
loose stage can never override a stricter one.
"""

from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional, Sequence, Tuple

from jobsearch.aliases.models import AliasEntry
from jobsearch.config.models import MatchingConfig
from jobsearch.utils.text import contains_phrase, tokenize

from .models import CanonicalMatch, PreparedQuery
from .similarity import similarity

StageMatcher = Callable[[PreparedQuery, Sequence[AliasEntry]], Optional[CanonicalMatch]]
TokenPredicate = Callable[[str, str], bool]


@dataclass(frozen=True)
class MatchStage:
    """A named cascade stage."""

    name: str
    matcher: StageMatcher

    def run(
        self, query: PreparedQuery, entries: Sequence[AliasEntry]
    ) -> Optional[CanonicalMatch]:
        return self.matcher(query, entries, stage=self.name)


def exact_match(
    query: PreparedQuery, entries: Sequence[AliasEntry], stage: str = "exact"
) -> Optional[CanonicalMatch]:
    """Query equals a canonical term, or failing that, a surface form.

    Canonical terms are checked across the whole table before any surface
    form, so a canonical term always resolves to itself even when an earlier
    entry lists it as a synonym.
    """
    for entry in entries:
        if entry.canonical_term == query.text:
            return CanonicalMatch(entry.canonical_term, query.text, stage)

    for entry in entries:
        if query.text in entry.surface_forms:
            return CanonicalMatch(entry.canonical_term, query.text, stage)

    return None


def containment_match(
    query: PreparedQuery, entries: Sequence[AliasEntry], stage: str = "containment"
) -> Optional[CanonicalMatch]:
    """Query contains a surface form, or a surface form contains the query, on whole words."""
    for entry in entries:
        for form in entry.surface_forms:
            form_tokens = tokenize(form)
            if contains_phrase(query.tokens, form_tokens) or contains_phrase(
                form_tokens, query.tokens
            ):
                return CanonicalMatch(entry.canonical_term, form, stage)
    return None


def similarity_match(
    query: PreparedQuery,
    entries: Sequence[AliasEntry],
    threshold: float,
    stage: str = "similarity",
) -> Optional[CanonicalMatch]:
    """Whole query is more similar than threshold to a surface form."""
    for entry in entries:
        for form in entry.surface_forms:
            score = similarity(query.text, form)
            if score > threshold:
                return CanonicalMatch(entry.canonical_term, form, stage, score)
    return None


def _token_coverage_match(
    query: PreparedQuery,
    entries: Sequence[AliasEntry],
    predicate: TokenPredicate,
    min_coverage: float,
    stage: str,
) -> Optional[CanonicalMatch]:
    """First surface form whose words match enough of the query's words.

    A query word matches a form when predicate(query_word, form_word) holds for
    any of the form's words. The form is accepted when at least one query word
    matches and the matching share of query words reaches min_coverage.
    """
    if not query.tokens:
        return None

    total = len(query.tokens)
    for entry in entries:
        for form in entry.surface_forms:
            form_tokens = tokenize(form)
            matched = sum(
                1
                for query_token in query.tokens
                if any(predicate(query_token, form_token) for form_token in form_tokens)
            )
            if matched and matched / total >= min_coverage:
                return CanonicalMatch(entry.canonical_term, form, stage, matched / total)
    return None


def token_similarity_match(
    query: PreparedQuery,
    entries: Sequence[AliasEntry],
    threshold: float,
    min_coverage: float,
    stage: str = "token_similarity",
) -> Optional[CanonicalMatch]:
    """Query words are more similar than threshold to words of a surface form."""

    def predicate(query_token: str, form_token: str) -> bool:
        return similarity(query_token, form_token) > threshold

    return _token_coverage_match(query, entries, predicate, min_coverage, stage)


def token_overlap_match(
    query: PreparedQuery,
    entries: Sequence[AliasEntry],
    threshold: float,
    min_token_length: int,
    min_coverage: float,
    stage: str = "token_overlap",
) -> Optional[CanonicalMatch]:
    """Query words contain, sit inside, or loosely resemble words of a surface form.

    Containment only counts when both words have at least min_token_length
    characters; otherwise single letters like "a" would be found in almost
    every word.
    """

    def predicate(query_token: str, form_token: str) -> bool:
        if len(query_token) >= min_token_length and len(form_token) >= min_token_length:
            if query_token in form_token or form_token in query_token:
                return True
        return similarity(query_token, form_token) > threshold

    return _token_coverage_match(query, entries, predicate, min_coverage, stage)


def build_cascade(config: Optional[MatchingConfig] = None) -> Tuple[MatchStage, ...]:
    """
    Build the ordered cascade of stages from matching thresholds.

    Order: exact, containment, similarity_high, similarity_medium,
    token_similarity, token_overlap, similarity_low.

    Args:
        config: Matching thresholds (defaults to MatchingConfig())

    Returns:
        Tuple of MatchStage in evaluation order
    """
    config = config or MatchingConfig()

    return (
        MatchStage("exact", exact_match),
        MatchStage("containment", containment_match),
        MatchStage(
            "similarity_high", partial(similarity_match, threshold=config.high_similarity)
        ),
        MatchStage(
            "similarity_medium", partial(similarity_match, threshold=config.medium_similarity)
        ),
        MatchStage(
            "token_similarity",
            partial(
                token_similarity_match,
                threshold=config.token_high_similarity,
                min_coverage=config.min_token_coverage,
            ),
        ),
        MatchStage(
            "token_overlap",
            partial(
                token_overlap_match,
                threshold=config.token_medium_similarity,
                min_token_length=config.min_token_length,
                min_coverage=config.min_token_coverage,
            ),
        ),
        MatchStage(
            "similarity_low", partial(similarity_match, threshold=config.low_similarity)
        ),
    )
