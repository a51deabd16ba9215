"""Input side of the crawl: fetching listing pages and parsing their rows."""

from hanzicrawl.input.fields import (
    FieldOutcome,
    Outcome,
    unsigned_field,
)
from hanzicrawl.input.rows import (
    RawRow,
    ParsedRow,
    RowStatus,
    iter_table_rows,
    parse_row,
)
from hanzicrawl.input.fetch import (
    FetchedPage,
    PageFetcher,
    page_url,
)

__all__ = [
    # fields
    "FieldOutcome",
    "Outcome",
    "unsigned_field",
    # rows
    "RawRow",
    "ParsedRow",
    "RowStatus",
    "iter_table_rows",
    "parse_row",
    # fetch
    "FetchedPage",
    "PageFetcher",
    "page_url",
]
