"""Canonicalization engine for free-text job search queries.

This module provides:
- Canonicalizer: cascade runner over an alias table
- MatchStage / build_cascade: the ordered matching stages
- CanonicalMatch: result of a successful stage
- similarity / edit_distance: normalized edit-distance primitive
"""

from .engine import Canonicalizer
from .models import CanonicalMatch, PreparedQuery
from .similarity import edit_distance, similarity
from .strategies import (
    MatchStage,
    build_cascade,
    containment_match,
    exact_match,
    similarity_match,
    token_overlap_match,
    token_similarity_match,
)

__all__ = [
    "Canonicalizer",
    "CanonicalMatch",
    "PreparedQuery",
    "MatchStage",
    "build_cascade",
    "exact_match",
    "containment_match",
    "similarity_match",
    "token_similarity_match",
    "token_overlap_match",
    "similarity",
    "edit_distance",
]
