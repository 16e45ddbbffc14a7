"""Alias table: canonical search terms and their synonyms, abbreviations and misspellings.

This module provides:
- AliasEntry / AliasTable: immutable, validated table models
- load_alias_table: YAML loader (packaged table by default)
- get_default_alias_table: process-wide cached packaged table
- check_alias_table: report of surface forms shared between entries
"""

from .loader import build_alias_table, default_alias_path, get_default_alias_table, load_alias_table
from .models import AliasEntry, AliasTable
from .validators import check_alias_table, emit_alias_warnings

__all__ = [
    "AliasEntry",
    "AliasTable",
    "build_alias_table",
    "check_alias_table",
    "default_alias_path",
    "emit_alias_warnings",
    "get_default_alias_table",
    "load_alias_table",
]
