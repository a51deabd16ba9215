"""Output side of the crawl: dedup, enrichment, TSV writing and the crawl loop."""

from hanzicrawl.output.record import CharacterRecord
from hanzicrawl.output.ledger import Ledger
from hanzicrawl.output.enrich import (
    Resolver,
    join_readings,
    simplified_to_traditional,
    tone_mark_readings,
)
from hanzicrawl.output.sink import TsvSink, open_sink
from hanzicrawl.output.processing import (
    CrawlResult,
    crawl,
    crawl_listing,
    process_page,
)

__all__ = [
    # record
    "CharacterRecord",
    # ledger
    "Ledger",
    # enrich
    "Resolver",
    "join_readings",
    "simplified_to_traditional",
    "tone_mark_readings",
    # sink
    "TsvSink",
    "open_sink",
    # processing
    "CrawlResult",
    "crawl",
    "crawl_listing",
    "process_page",
]
