"""The enriched output row."""

from dataclasses import dataclass
from typing import Tuple


FIELD_SEPARATOR = "\t"


@dataclass(frozen=True)
class CharacterRecord:
    """One fully enriched character, ready to be written."""
    character: str
    traditional: str
    shinjitai: str
    pronunciation: str  # readings joined with ", "
    hsk_level: int  # 0 = not in HSK
    standard_index: int
    frequency_rank: int  # 0 = unranked

    def fields(self) -> Tuple[str, ...]:
        """The 7 output columns, in file order."""
        return (
            self.character,
            self.traditional,
            self.shinjitai,
            self.pronunciation,
            str(self.hsk_level),
            str(self.standard_index),
            str(self.frequency_rank),
        )

    def to_tsv_line(self) -> str:
        return FIELD_SEPARATOR.join(self.fields()) + "\n"
