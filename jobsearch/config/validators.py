"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

# Cascade order; each stage is expected to be no stricter than the one before.
_WHOLE_QUERY_THRESHOLDS = [
    ("high_similarity", 0.8),
    ("medium_similarity", 0.7),
    ("low_similarity", 0.5),
]
_PER_WORD_THRESHOLDS = [
    ("token_high_similarity", 0.8),
    ("token_medium_similarity", 0.6),
]


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for potential issues and return warnings.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    matching = config_dict.get("matching", {})
    if isinstance(matching, dict):
        for ordered in (_WHOLE_QUERY_THRESHOLDS, _PER_WORD_THRESHOLDS):
            values = [(name, matching.get(name, default)) for name, default in ordered]
            for (prev_name, prev), (name, value) in zip(values, values[1:]):
                if _is_number(prev) and _is_number(value) and value > prev:
                    warning_messages.append(
                        f"matching.{name} ({value}) is stricter than matching.{prev_name} "
                        f"({prev}); the later stage can never accept anything new"
                    )

        coverage = matching.get("min_token_coverage", 0.5)
        if _is_number(coverage) and coverage == 0:
            warning_messages.append(
                "matching.min_token_coverage is 0: a single word of a long query "
                "can decide its canonical term"
            )

    search = config_dict.get("search", {})
    if isinstance(search, dict):
        max_length = search.get("max_query_length", 200)
        if isinstance(max_length, int) and max_length > 500:
            warning_messages.append(
                f"Large search.max_query_length ({max_length}) makes fuzzy matching slower"
            )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
