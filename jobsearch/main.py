"""Command-line entry point for the job search query normalizer."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from jobsearch.aliases import check_alias_table, load_alias_table
from jobsearch.classification import StructuredQuery
from jobsearch.config.environment import EnvironmentConfig
from jobsearch.config.exceptions import ConfigurationError
from jobsearch.config.loader import load_config
from jobsearch.config.models import AppConfig
from jobsearch.logging import get_logger
from jobsearch.logging.config import configure_logging
from jobsearch.logging.context import log_context
from jobsearch.search import (
    EmptyQueryError,
    EmptySearchError,
    NormalizationOutcome,
    SearchQueryNormalizer,
    build_jobs_url,
)

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str],
    aliases_override: Optional[Path] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and apply overrides.

    Priority for every overridable setting: CLI > environment > config > defaults.

    Args:
        config_path: Path to configuration file (None to search the defaults)
        log_level_override: Log level from CLI
        aliases_override: Alias table path from CLI

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with overrides resolved

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    if not env_config.log_format:
        env_config.log_format = app_config.logging.format

    if aliases_override:
        app_config.aliases.path = aliases_override
    elif env_config.alias_table_path:
        app_config.aliases.path = env_config.alias_table_path

    if env_config.jobs_url:
        app_config.search.jobs_url = env_config.jobs_url

    return app_config, env_config


def render_outcome(outcome: NormalizationOutcome, as_json: bool = False) -> str:
    """
    Format a normalization outcome for stdout.

    Free-text results print as the bare search term so the output can be piped;
    structured results print one field per line.
    """
    if as_json:
        result = outcome.result
        payload = {
            "query": outcome.query,
            "stage": outcome.stage,
            "truncated": outcome.truncated,
            "result": result.to_dict() if isinstance(result, StructuredQuery) else result,
        }
        if outcome.match is not None:
            payload["surface_form"] = outcome.match.surface_form
            payload["score"] = round(outcome.match.score, 4)
        return json.dumps(payload, ensure_ascii=False)

    result = outcome.result
    if not isinstance(result, StructuredQuery):
        return result

    lines = [f"pattern: {result.pattern}"]
    for field_name in ("job_title", "company", "location"):
        value = getattr(result, field_name)
        if value:
            lines.append(f"{field_name}: {value}")
    return "\n".join(lines)


def validate_aliases(path: Path) -> int:
    """
    Load an alias table, print its ambiguity report and return an exit code.

    Shared surface forms are reported but do not fail validation.
    """
    table = load_alias_table(path)
    messages = check_alias_table(table)

    print(f"Alias table OK: {path} ({len(table)} entries, version {table.version})")
    for message in messages:
        print(f"  warning: {message}")

    logger.info(
        "Alias table validated",
        extra={
            "event": "cli.aliases.validated",
            "alias_path": str(path),
            "entry_count": len(table),
            "ambiguous_form_count": len(messages),
        },
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobsearch",
        description="Normalize a free-text job search into a canonical term or a structured query",
    )
    parser.add_argument("query", nargs="?", default=None, help="Search text, e.g. 'sr eng'")
    parser.add_argument(
        "--location",
        default=None,
        help="Separate location field for --url (replaces a location parsed from the query)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--aliases",
        type=Path,
        default=None,
        help="Alias table YAML file (overrides config and ALIAS_TABLE_PATH)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result, stage and match details as JSON",
    )
    parser.add_argument(
        "--url",
        action="store_true",
        help="Print the jobs listing URL for this search instead of the result",
    )
    parser.add_argument(
        "--validate-aliases",
        type=Path,
        default=None,
        metavar="PATH",
        help="Validate an alias table file and report shared surface forms",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the jobsearch CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level, args.aliases)
        configure_logging(
            level=env_config.log_level,
            format_type=env_config.log_format,
            environment=env_config.environment,
        )

        if args.validate_aliases:
            return validate_aliases(args.validate_aliases)

        normalizer = SearchQueryNormalizer.from_config(app_config)

        with log_context(origin="cli"):
            if args.url:
                print(
                    build_jobs_url(
                        app_config.search.jobs_url,
                        args.query,
                        args.location,
                        normalizer=normalizer,
                    )
                )
                return 0

            outcome = normalizer.explain(args.query)
            print(render_outcome(outcome, as_json=args.json))

        logger.debug(
            "Search query processed",
            extra={"event": "cli.query.completed", "stage": outcome.stage},
        )
        return 0

    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        logger.error(
            f"Configuration error: {e}",
            extra={"event": "config.error", "error_type": "ConfigurationError"},
        )
        return 1
    except (EmptyQueryError, EmptySearchError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        logger.critical(
            "Fatal error while processing search query",
            extra={
                "event": "cli.failed",
                "error_type": type(e).__name__,
                "error": str(e),
            },
            exc_info=True,
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
