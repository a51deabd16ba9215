"""Append-only TSV output."""

from pathlib import Path
from typing import Optional, TextIO

from hanzicrawl.common.errors import OutputWriteError
from hanzicrawl.output.record import CharacterRecord


class TsvSink:
    """Appends one tab-separated line per record to the output file.

    The file is created if missing and never truncated. Each line is flushed
    as soon as it is written.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self.written = 0
        self._fh: Optional[TextIO] = None

    def open(self) -> "TsvSink":
        try:
            self._fh = open(self.path, "a", encoding="utf-8", newline="")
        except OSError as e:
            raise OutputWriteError(self.path, e.strerror or str(e)) from e
        return self

    def write(self, record: CharacterRecord) -> None:
        if self._fh is None:
            raise OutputWriteError(self.path, "sink is not open")
        try:
            self._fh.write(record.to_tsv_line())
            self._fh.flush()
        except OSError as e:
            raise OutputWriteError(self.path, e.strerror or str(e)) from e
        self.written += 1

    def close(self) -> None:
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def __enter__(self) -> "TsvSink":
        if self._fh is None:
            self.open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_sink(path: Path) -> TsvSink:
    """Open the output file for appending; raises OutputWriteError if it can't be."""
    return TsvSink(path).open()
