"""Parsing of hanzidb character-list table rows.

hanzidb listing pages hold one table whose rows look like:

    <tr>
      <td><a href="/character/的">的</a></td>   character
      <td>de</td>                                pinyin
      <td>possessive particle</td>               definition
      <td>白</td>                                radical
      <td>8</td>                                 stroke count
      <td>1</td>                                 HSK level
      <td>37</td>                                General Standard #
      <td>1</td>                                 frequency rank
    </tr>

Header rows and characters outside the General Standard list are skipped;
numeric cells containing anything other than digits abort the crawl, since
that means the page layout changed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Container, Iterator, List, Optional

from bs4 import BeautifulSoup  # type: ignore
from bs4.element import Tag  # type: ignore

from hanzicrawl.common.errors import PageSchemaError
from hanzicrawl.common.utils import clean_text
from hanzicrawl.input.fields import FieldOutcome, unsigned_field


# Zero-based cell positions within a row
CHARACTER_CELL = 0
HSK_LEVEL_CELL = 5
STANDARD_INDEX_CELL = HSK_LEVEL_CELL + 1
FREQUENCY_RANK_CELL = STANDARD_INDEX_CELL + 1


@dataclass(frozen=True)
class RawRow:
    """Fields read from one table row, before enrichment."""
    character: str
    hsk_level: int
    standard_index: int
    frequency_rank: int


class RowStatus(Enum):
    PARSED = "parsed"
    SKIPPED = "skipped"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class ParsedRow:
    status: RowStatus
    row: Optional[RawRow] = None
    character: str = ""
    reason: str = ""


def iter_table_rows(html: str) -> Iterator[Tag]:
    """Yield every <tr> of a page in document order."""
    soup = BeautifulSoup(html, "html.parser")
    yield from soup.find_all("tr")


def row_cells(row: Tag) -> List[Tag]:
    """Return the row's own <td> cells (not those of nested tables)."""
    return row.find_all("td", recursive=False)


def _cell_text(cells: List[Tag], index: int) -> Optional[str]:
    if index >= len(cells):
        return None
    return cells[index].get_text()


def character_field(cells: List[Tag]) -> FieldOutcome:
    """Read the character from the link inside the first cell."""
    if len(cells) <= CHARACTER_CELL:
        return FieldOutcome.skip("no character cell")
    link = cells[CHARACTER_CELL].find("a")
    if link is None:
        return FieldOutcome.skip("no character link")
    text = clean_text(link.get_text())
    if not text:
        return FieldOutcome.skip("empty character link")
    return FieldOutcome.of(text)


def hsk_level_field(cells: List[Tag]) -> FieldOutcome:
    """HSK level; 0 when the character is not part of HSK."""
    return unsigned_field(_cell_text(cells, HSK_LEVEL_CELL), default=0)


def standard_index_field(cells: List[Tag]) -> FieldOutcome:
    """General Standard number; rows without one are skipped."""
    outcome = unsigned_field(_cell_text(cells, STANDARD_INDEX_CELL))
    if outcome.is_skip:
        return FieldOutcome.skip("not in the General Standard list")
    return outcome


def frequency_rank_field(cells: List[Tag]) -> FieldOutcome:
    """Frequency rank; 0 when unranked."""
    return unsigned_field(_cell_text(cells, FREQUENCY_RANK_CELL), default=0)


def _require(outcome: FieldOutcome, field: str, character: str) -> None:
    if outcome.is_fatal:
        raise PageSchemaError(field, outcome.reason, character)


def parse_row(row: Tag, seen: Optional[Container[str]] = None) -> ParsedRow:
    """Extract a RawRow from one <tr>.

    ``seen`` holds characters already written this run; a row whose character
    is in it is reported as DUPLICATE before any other cell is read.

    Raises PageSchemaError if a numeric cell holds non-numeric text.
    """
    cells = row_cells(row)

    character = character_field(cells)
    if not character.is_value:
        return ParsedRow(RowStatus.SKIPPED, reason=character.reason)
    ch = character.value

    if seen is not None and ch in seen:
        return ParsedRow(RowStatus.DUPLICATE, character=ch)

    hsk = hsk_level_field(cells)
    _require(hsk, "HSK level", ch)

    standard = standard_index_field(cells)
    _require(standard, "General Standard index", ch)
    if standard.is_skip:
        return ParsedRow(RowStatus.SKIPPED, character=ch, reason=standard.reason)

    frequency = frequency_rank_field(cells)
    _require(frequency, "frequency rank", ch)

    raw = RawRow(
        character=ch,
        hsk_level=hsk.value,
        standard_index=standard.value,
        frequency_rank=frequency.value,
    )
    return ParsedRow(RowStatus.PARSED, row=raw, character=ch)
