"""Line layouts answering offset -> line questions for one tracked field."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Callable, List

TextSource = Callable[[], str]


class SingleLineLayout:
    """Default layout: the whole text is line 0."""

    def __init__(self, source: TextSource) -> None:
        self._source = source

    def line_index_of(self, offset: int) -> int:
        del offset
        return 0

    def line_start(self, line: int) -> int:
        del line
        return 0

    def line_end(self, line: int) -> int:
        del line
        return len(self._source())


@dataclass(slots=True)
class LineLayout:
    """Hard-break layout built from a list-of-lines model.

    Each instance belongs to exactly one field. The host marks it stale when the
    field text changes; the line table is rebuilt lazily on the next lookup.
    """

    source: TextSource
    _lines: List[str] = field(default_factory=list)
    _starts: List[int] = field(default_factory=list)
    stale: bool = True

    def mark_stale(self) -> None:
        self.stale = True

    def _ensure_current(self) -> None:
        if not self.stale:
            return
        self._lines = self.source().split("\n")
        starts = []
        offset = 0
        for line in self._lines:
            starts.append(offset)
            offset += len(line) + 1
        self._starts = starts
        self.stale = False

    def line_index_of(self, offset: int) -> int:
        self._ensure_current()
        if offset <= 0:
            return 0
        return max(bisect_right(self._starts, offset) - 1, 0)

    def line_start(self, line: int) -> int:
        self._ensure_current()
        return self._starts[_bounded(line, len(self._starts))]

    def line_end(self, line: int) -> int:
        self._ensure_current()
        index = _bounded(line, len(self._lines))
        return self._starts[index] + len(self._lines[index])


def _bounded(line: int, count: int) -> int:
    return min(max(line, 0), count - 1)


__all__ = ["LineLayout", "SingleLineLayout", "TextSource"]
