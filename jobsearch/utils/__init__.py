"""Text helpers shared by the classifier and the canonicalizer."""

from .text import collapse_whitespace, contains_phrase, tokenize

__all__ = [
    "collapse_whitespace",
    "contains_phrase",
    "tokenize",
]
