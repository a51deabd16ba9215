"""HTTP fetching of hanzidb listing pages."""

from dataclasses import dataclass
from typing import Optional

import requests

from hanzicrawl.common.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from hanzicrawl.common.errors import FetchError


def page_url(base_url: str, page: int) -> str:
    """Listing URL for a page: the page number is appended to the base URL."""
    return f"{base_url}{page}"


@dataclass(frozen=True)
class FetchedPage:
    url: str
    status: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class PageFetcher:
    """Blocking GET of listing pages over one reused session. No retries."""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": user_agent})

    def fetch(self, url: str) -> FetchedPage:
        """Fetch a URL and return its status and body.

        Non-2xx responses are returned, not raised; the caller decides whether
        they end the listing. Transport failures raise FetchError.
        """
        try:
            resp = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(url, reason=str(e)) from e
        text = resp.text if resp.text is not None else ""
        return FetchedPage(url=url, status=resp.status_code, text=text)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
