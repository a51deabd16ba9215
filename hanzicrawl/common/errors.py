"""Fatal crawl errors.

Anything raised from here stops the whole crawl. Row-level noise (header rows,
characters outside the General Standard list) is skipped instead and never
reaches these classes.
"""

from pathlib import Path
from typing import Optional


class CrawlError(RuntimeError):
    """Base class for errors that abort a crawl."""


class FetchError(CrawlError):
    """A listing page could not be fetched before the end-of-pages threshold."""

    def __init__(self, url: str, status: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status = status
        self.reason = reason
        if status is not None:
            message = f"GET {url} returned HTTP {status}"
        else:
            message = f"GET {url} failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class PageSchemaError(CrawlError):
    """A numeric cell held text that is not a number; the page layout changed."""

    def __init__(self, field: str, text: str, character: str = ""):
        self.field = field
        self.text = text
        self.character = character
        where = f" for {character}" if character else ""
        super().__init__(f"non-numeric {field}{where}: {text!r}")


class PronunciationError(CrawlError):
    """No pinyin reading is known for a character."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"no pronunciation found for {character!r}")


class OutputWriteError(CrawlError):
    """The output file could not be opened or written."""

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"cannot write to {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
