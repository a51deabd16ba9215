import textwrap
from typing import Dict, List, Optional

import pytest

from hanzicrawl.input.fetch import FetchedPage
from hanzicrawl.output.enrich import Resolver


def row_html(
    character: Optional[str],
    hsk: Optional[str] = "",
    standard: Optional[str] = "",
    frequency: Optional[str] = "",
    link: bool = True,
) -> str:
    """One hanzidb-style <tr>. A cell value of None drops that cell and the ones after it."""
    if character is None:
        first = "<td></td>"
    elif link:
        first = f'<td><a href="/character/{character}">{character}</a></td>'
    else:
        first = f"<td>{character}</td>"
    cells = [first, "<td>pīnyīn</td>", "<td>meaning</td>", "<td>口</td>", "<td>6</td>"]
    for value in (hsk, standard, frequency):
        if value is None:
            break
        cells.append(f"<td>{value}</td>")
    return "<tr>" + "".join(cells) + "</tr>"


def page_html(*rows: str) -> str:
    header = (
        "<tr><th>Character</th><th>Pinyin</th><th>Definition</th><th>Radical</th>"
        "<th>Stroke count</th><th>HSK level</th><th>General Standard#</th><th>Frequency rank</th></tr>"
    )
    body = "".join(rows)
    return textwrap.dedent(
        f"""
        <html><body>
          <table>
            {header}
            {body}
          </table>
        </body></html>
        """
    )


class FakeFetcher:
    """Serves canned pages by URL; anything else is a 404."""

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.requested: List[str] = []

    def fetch(self, url: str) -> FetchedPage:
        self.requested.append(url)
        if url in self.pages:
            return FetchedPage(url=url, status=200, text=self.pages[url])
        return FetchedPage(url=url, status=404, text="Not Found")


TRADITIONAL = {"国": "國", "汉": "漢", "字": "字"}
SHINJITAI = {"國": "国", "漢": "漢"}
READINGS = {"国": [["guó"]], "汉": [["hàn"]], "字": [["zì"]], "的": [["de", "dí", "dì"]]}


def fake_resolver() -> Resolver:
    return Resolver(
        to_traditional=lambda s: TRADITIONAL.get(s, s),
        to_shinjitai=lambda s: SHINJITAI.get(s, s),
        readings=lambda s: READINGS.get(s, []),
    )


@pytest.fixture
def resolver() -> Resolver:
    return fake_resolver()
