"""Line storage for line_engine buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

Snapshot = Tuple[str, ...]


def _non_empty(lines: Iterable[str]) -> List[str]:
    result = list(lines)
    return result or [""]


@dataclass(slots=True)
class BufferDocument:
    """Immutable-ish text storage built on a plain list-of-lines model.

    Every editing helper returns a new document with a bumped ``version``;
    the line list is never shared between documents, so a snapshot taken
    from one document stays valid after the next edit. A document always
    holds at least one (possibly empty) line.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        return cls(_lines=_non_empty(lines))

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        lines = text.split("\n")
        return cls(_lines=_non_empty(lines))

    def snapshot(self) -> Snapshot:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace(self, lines: Iterable[str]) -> "BufferDocument":
        """Return a new document holding ``lines`` with a bumped version."""

        return BufferDocument(_lines=_non_empty(lines), version=self.version + 1)

    def update_lines(
        self, start: int, end: int, new_lines: Iterable[str]
    ) -> "BufferDocument":
        """Return a document with ``[start:end]`` replaced by ``new_lines``."""

        lines = list(self._lines)
        lines[start:end] = list(new_lines)
        return BufferDocument(_lines=_non_empty(lines), version=self.version + 1)

    def split_line(
        self, row: int, col: int, inserted: Sequence[str] = ()
    ) -> "BufferDocument":
        """Split ``row`` at ``col`` and place ``inserted`` between head and tail."""

        line = self._lines[row]
        return self.update_lines(row, row + 1, [line[:col], *inserted, line[col:]])

    def set_line(self, row: int, text: str) -> "BufferDocument":
        return self.update_lines(row, row + 1, [text])

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def last_row(self) -> int:
        return len(self._lines) - 1

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_length(self, index: int) -> int:
        return len(self._lines[index])
