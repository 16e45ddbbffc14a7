"""Consistency checks for alias tables that do not make a table invalid."""

import warnings
from typing import List

from .models import AliasTable


def check_alias_table(table: AliasTable) -> List[str]:
    """
    Report surface forms that resolve ambiguously.

    A surface form listed under several canonical terms always resolves to the
    first of them in matching order; the others can only be reached through
    their remaining forms.

    Args:
        table: Alias table to inspect

    Returns:
        List of warning messages (empty when no form is shared)
    """
    warning_messages = []

    for form, terms in sorted(table.find_ambiguous_forms().items()):
        winner, shadowed = terms[0], terms[1:]
        warning_messages.append(
            f"Surface form '{form}' resolves to '{winner}' and is shadowed for: "
            f"{', '.join(shadowed)}"
        )

    return warning_messages


def emit_alias_warnings(warning_messages: List[str]) -> None:
    """
    Emit alias table warnings using Python's warnings module.

    Args:
        warning_messages: Messages from check_alias_table()
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
