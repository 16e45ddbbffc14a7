"""Normalized edit-distance similarity used as the canonicalizer's fuzziness primitive."""

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between two strings.

    Unit cost for insertions, deletions and substitutions.

    Example:
        >>> edit_distance("intrn", "intern")
        1
    """
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Score how close two strings are on a 0..1 scale.

    The score is ``(longest - distance) / longest`` where ``longest`` is the
    length of the longer string, so 1.0 means identical and 0.0 means every
    character of the longer string has to change. Two empty strings are
    identical.

    Args:
        a: First string
        b: Second string

    Returns:
        Similarity in [0.0, 1.0]

    Example:
        >>> similarity("developr", "developer")
        0.8888888888888888
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return (longest - edit_distance(a, b)) / longest
