"""Common utilities shared across input and output processing."""

from hanzicrawl.common.config import (
    CrawlConfig,
    load_crawl_config,
    read_config_file,
    DEFAULT_BASE_URLS,
    DEFAULT_END_OF_PAGES_THRESHOLD,
)
from hanzicrawl.common.errors import (
    CrawlError,
    FetchError,
    PageSchemaError,
    PronunciationError,
    OutputWriteError,
)
from hanzicrawl.common.logging import (
    log,
    log_debug,
    log_error,
    log_verbose,
    set_log_context,
    clear_log_context,
)
from hanzicrawl.common.utils import (
    unique_preserve_order,
    clean_text,
    is_unsigned_int,
)

__all__ = [
    # config
    "CrawlConfig",
    "load_crawl_config",
    "read_config_file",
    "DEFAULT_BASE_URLS",
    "DEFAULT_END_OF_PAGES_THRESHOLD",
    # errors
    "CrawlError",
    "FetchError",
    "PageSchemaError",
    "PronunciationError",
    "OutputWriteError",
    # logging
    "log",
    "log_debug",
    "log_error",
    "log_verbose",
    "set_log_context",
    "clear_log_context",
    # utils
    "unique_preserve_order",
    "clean_text",
    "is_unsigned_int",
]
