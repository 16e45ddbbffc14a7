"""Canonicalizer: maps free-text search queries onto canonical search terms."""

import logging
from typing import Optional, Sequence

from jobsearch.aliases.models import AliasTable
from jobsearch.config.models import MatchingConfig
from jobsearch.logging import get_logger

from .models import CanonicalMatch, PreparedQuery
from .strategies import MatchStage, build_cascade

logger = get_logger(__name__, component="matching")


class Canonicalizer:
    """Resolves a query to a canonical term using a cascade of matching stages.

    Responsibilities:
    - Hold the alias entries in matching order (priority, then declaration)
    - Run the stages strictest first and stop at the first match
    - Fall back to the original query when no stage accepts it

    The alias table is injected and never modified, so one Canonicalizer can
    serve concurrent callers.
    """

    def __init__(
        self,
        alias_table: AliasTable,
        matching_config: Optional[MatchingConfig] = None,
        stages: Optional[Sequence[MatchStage]] = None,
        logger_instance: Optional[logging.Logger] = None,
    ):
        """Initialize Canonicalizer.

        Args:
            alias_table: Alias table to match against
            matching_config: Cascade thresholds (defaults to MatchingConfig())
            stages: Explicit stage sequence, overriding matching_config
            logger_instance: Optional logger instance (defaults to module logger)
        """
        self.alias_table = alias_table
        self.matching_config = matching_config or MatchingConfig()
        self.stages = tuple(stages) if stages is not None else build_cascade(self.matching_config)
        self.logger = logger_instance or logger
        self._entries = alias_table.ordered_entries()

    def match(self, query: str) -> Optional[CanonicalMatch]:
        """Find the canonical term for a query.

        Args:
            query: Non-structured query (any case; it is lower-cased here)

        Returns:
            CanonicalMatch from the first accepting stage, or None
        """
        prepared = PreparedQuery.from_text(query)
        if not prepared.tokens:
            return None

        for stage in self.stages:
            result = stage.run(prepared, self._entries)
            if result is not None:
                self.logger.debug(
                    f"Stage {stage.name} matched '{prepared.text}' to '{result.canonical_term}'",
                    extra={
                        "event": "matching.stage.matched",
                        "stage": stage.name,
                        "canonical_term": result.canonical_term,
                        "surface_form": result.surface_form,
                        "score": round(result.score, 4),
                    },
                )
                return result

        self.logger.debug(
            f"No stage matched '{prepared.text}'",
            extra={"event": "matching.cascade.exhausted", "stage_count": len(self.stages)},
        )
        return None

    def canonicalize(self, query: str) -> str:
        """Return the canonical term for a query, or the trimmed query itself.

        Args:
            query: Non-structured query

        Returns:
            Canonical term, or the original trimmed query (original case) when nothing matched
        """
        trimmed = query.strip()
        result = self.match(trimmed)
        return result.canonical_term if result is not None else trimmed
