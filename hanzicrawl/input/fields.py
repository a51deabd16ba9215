"""Per-field extraction outcomes.

Every cell the row parser reads resolves to exactly one of:
- SKIP: the data is structurally absent and the whole row should be dropped
- VALUE: the field parsed (possibly to a default such as 0)
- FATAL: the data is present but malformed; the crawl must stop
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from hanzicrawl.common.utils import clean_text, is_unsigned_int


class Outcome(Enum):
    SKIP = "skip"
    VALUE = "value"
    FATAL = "fatal"


@dataclass(frozen=True)
class FieldOutcome:
    """Result of extracting one field from a table row."""
    outcome: Outcome
    value: Any = None
    reason: str = ""

    @classmethod
    def skip(cls, reason: str = "") -> "FieldOutcome":
        return cls(Outcome.SKIP, reason=reason)

    @classmethod
    def of(cls, value: Any) -> "FieldOutcome":
        return cls(Outcome.VALUE, value=value)

    @classmethod
    def fatal(cls, reason: str) -> "FieldOutcome":
        return cls(Outcome.FATAL, reason=reason)

    @property
    def is_skip(self) -> bool:
        return self.outcome is Outcome.SKIP

    @property
    def is_value(self) -> bool:
        return self.outcome is Outcome.VALUE

    @property
    def is_fatal(self) -> bool:
        return self.outcome is Outcome.FATAL


def unsigned_field(text: Optional[str], default: Optional[int] = None) -> FieldOutcome:
    """Parse a numeric cell's text.

    Missing or blank text yields ``default`` when one is given, SKIP otherwise.
    Text that is present but not an unsigned integer is FATAL.
    """
    cleaned = clean_text(text or "")
    if not cleaned:
        if default is None:
            return FieldOutcome.skip("empty cell")
        return FieldOutcome.of(default)
    if not is_unsigned_int(cleaned):
        return FieldOutcome.fatal(cleaned)
    return FieldOutcome.of(int(cleaned))
