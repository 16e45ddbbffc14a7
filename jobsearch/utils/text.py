"""Whitespace handling and word-level phrase checks for search queries."""

import re
from typing import List, Sequence

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Trim text and collapse internal whitespace runs to a single space.

    Args:
        text: Text to clean

    Returns:
        Cleaned text (empty string if input is None/empty)

    Example:
        >>> collapse_whitespace("  senior   python\\tdev ")
        'senior python dev'
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text.strip())


def tokenize(text: str) -> List[str]:
    """Split text into whitespace-delimited tokens."""
    return text.split()


def contains_phrase(haystack: Sequence[str], needle: Sequence[str]) -> bool:
    """Check whether needle occurs as a contiguous run of whole tokens in haystack.

    Word-level containment: "ba" is found in ["ba"] and ["senior", "ba"], but
    not in ["back", "end", "developer"].

    Args:
        haystack: Tokens to search in
        needle: Tokens to search for

    Returns:
        True if every token of needle appears, in order and adjacent, in haystack
    """
    width = len(needle)
    if width == 0 or width > len(haystack):
        return False

    for start in range(len(haystack) - width + 1):
        if list(haystack[start:start + width]) == list(needle):
            return True
    return False
