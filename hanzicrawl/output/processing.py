"""Main crawl loop: fetch listing pages, parse rows, enrich and write them."""

import time
from dataclasses import dataclass
from typing import Optional, Protocol

from hanzicrawl.common.config import CrawlConfig
from hanzicrawl.common.errors import CrawlError, FetchError
from hanzicrawl.common.logging import (
    clear_log_context,
    log_debug,
    log_verbose,
    set_log_context,
)
from hanzicrawl.input.fetch import FetchedPage, page_url
from hanzicrawl.input.rows import RowStatus, iter_table_rows, parse_row
from hanzicrawl.output.enrich import Resolver
from hanzicrawl.output.ledger import Ledger
from hanzicrawl.output.sink import TsvSink


class Fetcher(Protocol):
    def fetch(self, url: str) -> FetchedPage: ...


@dataclass
class CrawlResult:
    """Counters for one run. ``error`` is set when the run aborted."""
    written: int = 0
    pages_fetched: int = 0
    duplicates: int = 0
    skipped: int = 0
    error: Optional[CrawlError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def process_page(
    html: str,
    ledger: Ledger,
    resolver: Resolver,
    sink: TsvSink,
    result: CrawlResult,
    verbose: bool = False,
    debug: bool = False,
) -> None:
    """Parse, enrich and write every row of one page, in document order.

    Raises CrawlError on the first fatal problem; rows before it stay written.
    """
    for tr in iter_table_rows(html):
        parsed = parse_row(tr, seen=ledger)
        if parsed.status is RowStatus.SKIPPED:
            result.skipped += 1
            log_verbose(debug, "skip", f"{parsed.character or '<no character>'}: {parsed.reason}")
            continue
        if parsed.status is RowStatus.DUPLICATE:
            result.duplicates += 1
            log_verbose(debug, "dup", parsed.character)
            continue

        record = resolver.resolve(parsed.row)
        sink.write(record)
        ledger.record(record.character)
        result.written += 1
        log_verbose(
            verbose,
            "row",
            f"{record.character} {record.traditional} {record.shinjitai} "
            f"{record.pronunciation} hsk={record.hsk_level} gs={record.standard_index} "
            f"freq={record.frequency_rank}",
        )


def crawl_listing(
    base_url: str,
    config: CrawlConfig,
    fetcher: Fetcher,
    ledger: Ledger,
    resolver: Resolver,
    sink: TsvSink,
    result: CrawlResult,
    verbose: bool = False,
    debug: bool = False,
) -> None:
    """Walk one listing page by page until max_page or its end is detected."""
    for page in config.pages():
        set_log_context(base_url, page)
        url = page_url(base_url, page)
        if result.pages_fetched > 0 and config.delay > 0:
            time.sleep(config.delay)
        log_verbose(verbose, "fetch", f"GET {url}")
        fetched = fetcher.fetch(url)
        if not fetched.ok:
            if config.is_past_end(page):
                log_verbose(
                    verbose,
                    "end",
                    f"HTTP {fetched.status} past page {config.end_of_pages_threshold}; listing finished",
                )
                return
            raise FetchError(url, fetched.status)
        result.pages_fetched += 1
        log_debug(debug, f"{len(fetched.text)} characters of HTML from {url}")
        process_page(fetched.text, ledger, resolver, sink, result, verbose=verbose, debug=debug)


def crawl(
    config: CrawlConfig,
    fetcher: Fetcher,
    resolver: Resolver,
    sink: TsvSink,
    ledger: Optional[Ledger] = None,
    verbose: bool = False,
    debug: bool = False,
) -> CrawlResult:
    """Crawl every configured listing into the sink.

    Fatal errors don't propagate: they stop the crawl and are returned in
    ``CrawlResult.error`` together with the number of rows written so far.
    """
    if ledger is None:
        ledger = Ledger()
    result = CrawlResult()
    try:
        for base_url in config.base_urls:
            crawl_listing(
                base_url,
                config,
                fetcher,
                ledger,
                resolver,
                sink,
                result,
                verbose=verbose,
                debug=debug,
            )
    except CrawlError as e:
        result.error = e
    finally:
        clear_log_context()
    return result
