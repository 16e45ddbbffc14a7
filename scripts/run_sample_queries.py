#!/usr/bin/env python3
"""Sample query harness for manual end-to-end checks.

Runs a batch of search queries through the normalizer and prints a table of
query, result and the classifier pattern or cascade stage that decided it.

Usage:
    # Built-in sample queries against the packaged alias table
    python scripts/run_sample_queries.py

    # Queries from a file (one per line) against a custom table
    python scripts/run_sample_queries.py --queries queries.txt --aliases my_aliases.yaml
"""

import argparse
import sys
from pathlib import Path
from typing import List

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from jobsearch.aliases import load_alias_table
from jobsearch.classification import StructuredQuery
from jobsearch.config.loader import load_config
from jobsearch.logging.config import configure_logging
from jobsearch.search import SearchQueryNormalizer

SAMPLE_QUERIES = [
    "Python Developer at Google in Bangalore",
    "Data Scientist @ Meta",
    "Google in Bangalore",
    "pyhton develper",
    "pyhton dev",
    "sr eng",
    "intrn",
    "ML engineer",
    "front end dev",
    "ux designer",
    "underwater basket weaver",
    "####$$$",
]


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_results_table(rows: List[tuple]):
    """Print query / result / stage rows as a box table."""
    headers = ("Query", "Result", "Stage")
    widths = [
        max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(len(headers))
    ]

    def line(left: str, mid: str, right: str) -> str:
        return left + mid.join("─" * (w + 2) for w in widths) + right

    print(line("┌", "┬", "┐"))
    print("│ " + " │ ".join(h.ljust(w) for h, w in zip(headers, widths)) + " │")
    print(line("├", "┼", "┤"))
    for row in rows:
        print("│ " + " │ ".join(c.ljust(w) for c, w in zip(row, widths)) + " │")
    print(line("└", "┴", "┘"))


def describe(result) -> str:
    if isinstance(result, StructuredQuery):
        fields = [
            f"{name}={getattr(result, name)}"
            for name in ("job_title", "company", "location")
            if getattr(result, name)
        ]
        return ", ".join(fields)
    return result


def main():
    """Run sample queries and print the results."""
    parser = argparse.ArgumentParser(
        description="Run sample search queries through the normalizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--queries",
        type=Path,
        help="File with one query per line (default: built-in samples)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--aliases",
        type=Path,
        help="Alias table YAML file (default: packaged table)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args()

    load_dotenv()
    configure_logging(level=args.log_level, format_type="key-value")

    if args.queries:
        if not args.queries.exists():
            print(f"ERROR: Queries file not found: {args.queries}", file=sys.stderr)
            return 1
        queries = [
            line.strip()
            for line in args.queries.read_text(encoding="utf-8").splitlines()
            if line.strip()
        ]
    else:
        queries = SAMPLE_QUERIES

    app_config, _ = load_config(args.config)
    normalizer = SearchQueryNormalizer.from_config(app_config)
    if args.aliases:
        normalizer = SearchQueryNormalizer(
            alias_table=load_alias_table(args.aliases),
            matching_config=app_config.matching,
            search_config=app_config.search,
        )

    print_header(f"Normalizing {len(queries)} queries")

    rows = []
    for query in queries:
        outcome = normalizer.explain(query)
        rows.append((query, describe(outcome.result), outcome.stage))

    print_results_table(rows)

    passthrough_count = sum(1 for _, _, stage in rows if stage == "passthrough")
    print(f"\n{len(rows) - passthrough_count}/{len(rows)} queries normalized")
    return 0


if __name__ == "__main__":
    sys.exit(main())
