"""Loading alias tables from YAML files."""

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from jobsearch.config.exceptions import ConfigurationError
from jobsearch.config.loader import read_yaml_mapping
from jobsearch.logging import get_logger

from .models import AliasTable

logger = get_logger(__name__, component="aliases")

DEFAULT_ALIAS_FILE = "default_aliases.yaml"


def default_alias_path() -> Path:
    """Path of the alias table shipped with the package."""
    return Path(str(resources.files("jobsearch.aliases") / "data" / DEFAULT_ALIAS_FILE))


def build_alias_table(data: Dict[str, Any], source: str = "<memory>") -> AliasTable:
    """
    Validate raw alias data into an AliasTable.

    Args:
        data: Mapping with "entries" (and optionally "version")
        source: Where the data came from, used in error messages

    Returns:
        Validated, immutable AliasTable

    Raises:
        ConfigurationError: If the data breaks the table's invariants
    """
    if not data:
        raise ConfigurationError(
            f"Alias table is empty: {source}",
            suggestions=["Add at least one entry under 'entries'"],
        )

    try:
        return AliasTable.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(
            f"Alias table validation failed: {source}",
            e,
            suggestions=[
                "Every entry needs canonical_term and surface_forms",
                "List each canonical_term in its own surface_forms",
                "Declare each canonical_term only once",
            ],
        )


def load_alias_table(path: Optional[Path] = None) -> AliasTable:
    """
    Load and validate an alias table from a YAML file.

    Args:
        path: YAML file to load; defaults to the packaged table

    Returns:
        Validated AliasTable

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    alias_path = path or default_alias_path()
    data = read_yaml_mapping(alias_path, "alias table")
    table = build_alias_table(data, source=str(alias_path))

    logger.info(
        f"Loaded alias table with {len(table)} entries",
        extra={
            "event": "aliases.table.loaded",
            "alias_path": str(alias_path),
            "entry_count": len(table),
            "table_version": table.version,
        },
    )
    return table


@lru_cache(maxsize=1)
def get_default_alias_table() -> AliasTable:
    """Process-wide packaged alias table, loaded on first use."""
    return load_alias_table()
