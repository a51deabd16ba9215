import pytest
import requests

from hanzicrawl.common.errors import FetchError
from hanzicrawl.input.fetch import FetchedPage, PageFetcher, page_url


class _Response:
    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text


def test_page_url_appends_page_number():
    assert page_url("http://hanzidb.org/character-list/by-frequency?page=", 3) == (
        "http://hanzidb.org/character-list/by-frequency?page=3"
    )


@pytest.mark.parametrize("status,ok", [(200, True), (204, True), (301, False), (404, False), (500, False)])
def test_fetched_page_ok(status, ok):
    assert FetchedPage(url="u", status=status, text="").ok is ok


def test_fetch_returns_status_and_body(monkeypatch):
    session = requests.Session()
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _Response(404, "gone")

    monkeypatch.setattr(session, "get", fake_get)
    fetcher = PageFetcher(timeout=3.0, user_agent="test-agent", session=session)
    page = fetcher.fetch("http://example.test/?page=1")
    assert page == FetchedPage(url="http://example.test/?page=1", status=404, text="gone")
    assert calls == [("http://example.test/?page=1", 3.0)]
    assert session.headers["User-Agent"] == "test-agent"


def test_transport_errors_raise_fetch_error(monkeypatch):
    session = requests.Session()

    def fake_get(url, timeout):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(session, "get", fake_get)
    with PageFetcher(session=session) as fetcher:
        with pytest.raises(FetchError) as exc:
            fetcher.fetch("http://example.test/?page=1")
    assert exc.value.status is None
    assert "connection refused" in str(exc.value)
