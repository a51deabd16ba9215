#!/usr/bin/env python3
"""Crawl hanzidb character lists into a TSV file.

Each line of the output holds 7 tab-separated columns:
    character, traditional, shinjitai, pinyin, HSK level, General Standard #, frequency rank

Rows are appended; running twice into the same file duplicates characters
across runs (deduplication only covers a single run).

Usage:
    python crawl.py characters.tsv --verbose
    python crawl.py characters.tsv --config crawl.json --max-page 3
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from hanzicrawl.common.config import load_crawl_config
from hanzicrawl.common.errors import OutputWriteError
from hanzicrawl.common.logging import log, log_error
from hanzicrawl.input.fetch import PageFetcher
from hanzicrawl.output.enrich import Resolver
from hanzicrawl.output.ledger import Ledger
from hanzicrawl.output.processing import crawl
from hanzicrawl.output.sink import open_sink


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="hanzicrawl",
        description="Crawl hanzidb character lists and append enriched rows to a TSV file",
    )
    parser.add_argument(
        "output",
        type=Path,
        help="Output TSV file (created if missing, appended to otherwise)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="JSON file with crawl settings",
    )
    parser.add_argument(
        "--base-url",
        dest="base_urls",
        action="append",
        help="Listing URL the page number is appended to (repeatable; replaces the defaults)",
    )
    parser.add_argument(
        "--start-page",
        type=int,
        help="First page to fetch (default: 1)",
    )
    parser.add_argument(
        "--max-page",
        type=int,
        help="Page to stop before (default: 101)",
    )
    parser.add_argument(
        "--end-threshold",
        dest="end_of_pages_threshold",
        type=int,
        help="Failed fetches past this page end a listing instead of the crawl (default: 82)",
    )
    parser.add_argument(
        "--delay",
        type=float,
        help="Delay between page requests in seconds (default: 0)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds (default: 20)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the crawler."""
    args = build_parser().parse_args(argv)

    try:
        config = load_crawl_config(
            args.output,
            config_path=args.config,
            base_urls=args.base_urls,
            start_page=args.start_page,
            max_page=args.max_page,
            end_of_pages_threshold=args.end_of_pages_threshold,
            delay=args.delay,
            timeout=args.timeout,
        )
    except (OSError, ValueError) as e:
        log_error(f"Invalid configuration: {e}")
        return 1

    try:
        sink = open_sink(config.output_path)
    except OutputWriteError as e:
        log_error(str(e))
        return 1

    if args.verbose:
        print(f"\n{'=' * 60}")
        print("🚀 Starting crawler")
        print(f"   Output: {config.output_path}")
        print(f"   Listings: {', '.join(config.base_urls)}")
        print(f"   Pages: {config.start_page}..{config.max_page - 1}")
        print(f"{'=' * 60}")

    with sink, PageFetcher(timeout=config.timeout, user_agent=config.user_agent) as fetcher:
        result = crawl(
            config,
            fetcher,
            Resolver(),
            sink,
            ledger=Ledger(),
            verbose=args.verbose,
            debug=args.debug,
        )

    if result.error is not None:
        log_error(f"{result.error} ({result.written} rows written)")
        return 1

    if args.verbose:
        print(f"\n{'=' * 60}")
        print("✅ Complete!")
        print(f"   Pages fetched: {result.pages_fetched}")
        print(f"   Duplicates skipped: {result.duplicates}")
        print(f"   Rows skipped: {result.skipped}")
        print(f"{'=' * 60}\n")
    log("done", f"{result.written} rows written to {config.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
