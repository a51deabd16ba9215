"""Characters already written during the current run."""

from typing import Iterator, Set


class Ledger:
    """Grow-only set of emitted characters, scoped to one run."""

    def __init__(self):
        self._seen: Set[str] = set()

    def contains(self, character: str) -> bool:
        return character in self._seen

    def record(self, character: str) -> None:
        self._seen.add(character)

    def __contains__(self, character: object) -> bool:
        return character in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def __iter__(self) -> Iterator[str]:
        return iter(self._seen)
