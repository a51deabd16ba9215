"""Logging utilities for the crawler.

Messages are printed with a bracketed status tag, e.g. ``[fetch] GET ...``.
While a page is being processed, a context prefix naming the listing and page
(``[by-frequency p3]``) is prepended so interleaved lines stay traceable.
"""

import sys
from typing import Optional, TextIO
from urllib.parse import urlsplit


# Module-level state
_LOG_CONTEXT: str = ""

_TAG_EMOJI = {
    "fetch": "🌐",
    "row": "📝",
    "skip": "⏭️",
    "dup": "♻️",
    "end": "🏁",
    "error": "💥",
}


def listing_name(base_url: str) -> str:
    """Short name for a listing URL: the last path segment, e.g. 'by-frequency'."""
    path = urlsplit(base_url).path.rstrip("/")
    name = path.rsplit("/", 1)[-1] if path else ""
    return name or base_url


def set_log_context(base_url: str, page: int) -> None:
    """Set the listing/page prefix for subsequent messages."""
    global _LOG_CONTEXT
    _LOG_CONTEXT = f"{listing_name(base_url)} p{page}"


def clear_log_context() -> None:
    global _LOG_CONTEXT
    _LOG_CONTEXT = ""


def format_message(tag: str, message: str) -> str:
    """Build one log line: optional context, tag, optional emoji, message."""
    prefix = f"[{_LOG_CONTEXT}] " if _LOG_CONTEXT else ""
    emoji = _TAG_EMOJI.get(tag, "")
    emoji_spacer = (emoji + " ") if emoji else ""
    return f"{prefix}[{tag}] {emoji_spacer}{message}"


def log(tag: str, message: str, file: Optional[TextIO] = None) -> None:
    """Print a tagged message to stdout (or the given stream)."""
    print(format_message(tag, message), file=file or sys.stdout, flush=True)


def log_verbose(enabled: bool, tag: str, message: str) -> None:
    """Print a tagged message if verbose output is enabled."""
    if enabled:
        log(tag, message)


def log_debug(enabled: bool, message: str) -> None:
    """Print a debug message if debugging is enabled."""
    if enabled:
        log("debug", message)


def log_error(message: str) -> None:
    """Print an error message to stderr."""
    log("error", message, file=sys.stderr)
