"""hanzidb character-list crawler.

Subpackages:
- hanzicrawl.common: Shared utilities (config, errors, logging, text helpers)
- hanzicrawl.input: Fetching listing pages and parsing their table rows
- hanzicrawl.output: Dedup ledger, enrichment, TSV output and the crawl loop
"""

__version__ = "1.0.0"
