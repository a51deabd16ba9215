"""Enrichment of parsed rows with script variants and pinyin.

Two conversions are chained: simplified -> traditional (hanziconv), then
traditional -> Japanese shinjitai (OpenCC's t2jp profile). Pinyin is looked up
on the original character with every known reading.
"""

from typing import Callable, List, Optional

import opencc
from hanziconv import HanziConv
from pypinyin import Style, pinyin

from hanzicrawl.common.errors import PronunciationError
from hanzicrawl.common.utils import unique_preserve_order
from hanzicrawl.input.rows import RawRow
from hanzicrawl.output.record import CharacterRecord


READING_SEPARATOR = ", "
SHINJITAI_PROFILE = "t2jp"

Converter = Callable[[str], str]
ReadingLookup = Callable[[str], List[List[str]]]


def simplified_to_traditional(text: str) -> str:
    """Convert simplified Chinese text to traditional Chinese.

    Characters hanziconv doesn't know are returned unchanged.
    """
    if not text:
        return text
    return HanziConv.toTraditional(text)


def tone_mark_readings(character: str) -> List[List[str]]:
    """All tone-marked pinyin readings, one list per input character."""
    return pinyin(character, style=Style.TONE, heteronym=True, errors=lambda _: [])


def join_readings(reading_sets: List[List[str]]) -> str:
    """Flatten reading sets, drop repeats and blanks, join with ', '."""
    readings = [r.strip() for group in reading_sets for r in group if r and r.strip()]
    return READING_SEPARATOR.join(unique_preserve_order(readings))


class Resolver:
    """Derives traditional, shinjitai and pinyin for a parsed row.

    The three lookups are plain callables so they can be swapped out; the
    defaults use hanziconv, OpenCC and pypinyin.
    """

    def __init__(
        self,
        to_traditional: Optional[Converter] = None,
        to_shinjitai: Optional[Converter] = None,
        readings: Optional[ReadingLookup] = None,
    ):
        self.to_traditional = to_traditional or simplified_to_traditional
        if to_shinjitai is None:
            to_shinjitai = opencc.OpenCC(SHINJITAI_PROFILE).convert
        self.to_shinjitai = to_shinjitai
        self.readings = readings or tone_mark_readings

    def pronunciation(self, character: str) -> str:
        """Joined readings for a character; raises PronunciationError if none."""
        reading_sets = self.readings(character)
        joined = join_readings(reading_sets or [])
        if not joined:
            raise PronunciationError(character)
        return joined

    def resolve(self, raw: RawRow) -> CharacterRecord:
        pronunciation = self.pronunciation(raw.character)
        traditional = self.to_traditional(raw.character)
        # Shinjitai is derived from the traditional form, not the original
        shinjitai = self.to_shinjitai(traditional)
        return CharacterRecord(
            character=raw.character,
            traditional=traditional,
            shinjitai=shinjitai,
            pronunciation=pronunciation,
            hsk_level=raw.hsk_level,
            standard_index=raw.standard_index,
            frequency_rank=raw.frequency_rank,
        )
