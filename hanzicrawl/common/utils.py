"""Common utility functions shared across the library."""

import re
from typing import Iterable, List, Set


_WS_RE = re.compile(r"\s+")
_UNSIGNED_RE = re.compile(r"^[0-9]+$")


def unique_preserve_order(items: Iterable[str]) -> List[str]:
    """Return unique items while preserving order."""
    seen: Set[str] = set()
    ordered: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def clean_text(text: str) -> str:
    """Collapse whitespace runs (including nbsp) and strip the ends."""
    if not text:
        return ""
    return _WS_RE.sub(" ", text.replace("\xa0", " ")).strip()


def is_unsigned_int(text: str) -> bool:
    """Check if text is a plain unsigned decimal integer (ASCII digits only)."""
    return bool(_UNSIGNED_RE.match(text))
