#!/usr/bin/env python3
"""
moviequery - OMDb lookups from the command line.

Prints the resulting table, or writes it to CSV.
"""
import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

from .client import MovieQueryClient
from .errors import OMDbError
from .models import QueryMode
from .transport import OMDB_BASE_URL


def parse_filter(text: str) -> tuple[str, str]:
    """Parse a KEY=VALUE filter argument."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def print_table(frame: pd.DataFrame) -> None:
    """Print the records, leaving out bulky nested columns."""
    if frame.empty:
        print("No records.")
        return
    columns = [c for c in frame.columns if c != "ratings"]
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(frame[columns].to_string(index=False))


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="moviequery",
        description="Look up movies, series and games on OMDb."
    )

    parser.add_argument(
        "mode",
        choices=[m.value for m in QueryMode],
        help="Look up by IMDb id, by exact title, or search by term"
    )
    parser.add_argument(
        "value",
        nargs="?",
        default=None,
        help="IMDb id, title or search term (a demo value is used if omitted)"
    )
    parser.add_argument(
        "--page",
        type=int,
        default=None,
        metavar="N",
        help="Return only this search page (default: all pages)"
    )
    parser.add_argument(
        "--type",
        choices=["movie", "series", "episode", "game"],
        default=None,
        help="Restrict results to one media type"
    )
    parser.add_argument(
        "--year", "-y",
        type=int,
        default=None,
        help="Restrict results to a release year"
    )
    parser.add_argument(
        "--plot",
        choices=["short", "full"],
        default=None,
        help="Plot length for lookups"
    )
    parser.add_argument(
        "--filter", "-f",
        type=parse_filter,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra query parameter passed to OMDb as-is (repeatable)"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Write the records to this CSV file instead of printing them"
    )
    parser.add_argument(
        "--api-key",
        type=str,
        default=None,
        help="OMDb API key (default: OMDB_API_KEY or .env)"
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=OMDB_BASE_URL,
        help=f"OMDb endpoint (default: {OMDB_BASE_URL})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show detailed debug information"
    )

    parsed_args = parser.parse_args(args)

    # Third-party loggers (urllib3) echo full request URLs, API key included
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if parsed_args.verbose:
        logging.getLogger("moviequery").setLevel(logging.DEBUG)

    extra_filters = dict(parsed_args.filter)
    if parsed_args.type:
        extra_filters["type"] = parsed_args.type
    if parsed_args.year:
        extra_filters["y"] = parsed_args.year
    if parsed_args.plot:
        extra_filters["plot"] = parsed_args.plot

    try:
        client = MovieQueryClient(
            api_key=parsed_args.api_key,
            base_url=parsed_args.base_url
        )
        frame = client.query(
            parsed_args.mode,
            parsed_args.value,
            parsed_args.page,
            **extra_filters
        )
    except (OMDbError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if parsed_args.output:
        frame.to_csv(parsed_args.output, index=False)
        print(f"Wrote {len(frame)} record(s) to {parsed_args.output}")
    else:
        print_table(frame)

    return 0


if __name__ == "__main__":
    sys.exit(main())
