"""Run configuration for the hanzidb crawler.

A crawl can be configured from the command line, from a JSON file, or both.
The JSON file may contain any of:
- base_urls: list of listing URLs; the page number is appended to each
- start_page: first page to fetch (default: 1)
- max_page: page to stop before (default: 101)
- end_of_pages_threshold: failed fetches past this page end a listing (default: 82)
- timeout: per-request timeout in seconds (default: 20)
- delay: seconds to sleep between page fetches (default: 0)
- user_agent: User-Agent header sent with every request
"""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


DEFAULT_BASE_URLS: Tuple[str, ...] = (
    "http://hanzidb.org/character-list/by-frequency?page=",
    "http://hanzidb.org/character-list/general-standard?page=",
)
DEFAULT_START_PAGE = 1
DEFAULT_MAX_PAGE = 101

# hanzidb does not expose its last page number. The General Standard list has
# 82 pages, so a failed fetch past that point is read as "no more pages".
DEFAULT_END_OF_PAGES_THRESHOLD = 82

DEFAULT_TIMEOUT = 20.0
DEFAULT_USER_AGENT = "hanzicrawl/1.0 (+https://example.local)"


@dataclass(frozen=True)
class CrawlConfig:
    """Immutable parameters for one crawl run."""
    output_path: Path
    base_urls: Tuple[str, ...] = DEFAULT_BASE_URLS
    start_page: int = DEFAULT_START_PAGE
    max_page: int = DEFAULT_MAX_PAGE  # exclusive
    end_of_pages_threshold: int = DEFAULT_END_OF_PAGES_THRESHOLD
    timeout: float = DEFAULT_TIMEOUT
    delay: float = 0.0
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self):
        # Normalise types without breaking immutability
        object.__setattr__(self, "output_path", Path(self.output_path))
        object.__setattr__(self, "base_urls", tuple(self.base_urls))
        if not self.base_urls:
            raise ValueError("at least one base URL is required")
        if any(not isinstance(u, str) or not u for u in self.base_urls):
            raise ValueError(f"base URLs must be non-empty strings, got {list(self.base_urls)!r}")
        if self.start_page < 1:
            raise ValueError(f"start_page must be >= 1, got {self.start_page}")
        if self.max_page < self.start_page:
            raise ValueError(
                f"max_page ({self.max_page}) must not be smaller than start_page ({self.start_page})"
            )
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.delay < 0:
            raise ValueError(f"delay must not be negative, got {self.delay}")

    def pages(self) -> range:
        """Page numbers to fetch for each base URL, in order."""
        return range(self.start_page, self.max_page)

    def is_past_end(self, page: int) -> bool:
        """Whether a failed fetch of this page means the listing has ended."""
        return page > self.end_of_pages_threshold


# Keys a config file may set; output_path only ever comes from the command line
_FILE_KEYS = {f.name for f in fields(CrawlConfig)} - {"output_path"}


def _coerce(key: str, value: Any) -> Any:
    if key == "base_urls":
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, list):
            raise ValueError(f"base_urls must be a list of strings, got {type(value).__name__}")
        return tuple(value)
    if key in ("start_page", "max_page", "end_of_pages_threshold"):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{key} must be an integer, got {value!r}")
        return value
    if key in ("timeout", "delay"):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{key} must be a number, got {value!r}")
        return float(value)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def read_config_file(config_path: Path) -> Dict[str, Any]:
    """Read overrides from a JSON config file.

    Unknown keys are rejected so typos don't silently fall back to defaults.
    """
    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a JSON object")

    unknown = sorted(set(data) - _FILE_KEYS)
    if unknown:
        raise ValueError(f"unknown config keys in {config_path}: {', '.join(unknown)}")

    return {key: _coerce(key, value) for key, value in data.items()}


def load_crawl_config(
    output_path: Path,
    config_path: Optional[Path] = None,
    **overrides: Any,
) -> CrawlConfig:
    """Build a CrawlConfig from defaults, an optional config file and overrides.

    Overrides whose value is None are ignored, so argparse results can be
    passed through directly.
    """
    config = CrawlConfig(output_path=Path(output_path))
    if config_path is not None:
        config = replace(config, **read_config_file(Path(config_path)))
    explicit = {k: v for k, v in overrides.items() if v is not None}
    unknown = sorted(set(explicit) - _FILE_KEYS)
    if unknown:
        raise ValueError(f"unknown config options: {', '.join(unknown)}")
    if "base_urls" in explicit:
        explicit["base_urls"] = tuple(explicit["base_urls"])
    if explicit:
        config = replace(config, **explicit)
    return config
