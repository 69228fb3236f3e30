"""Boundary protocols between the engine and its host collaborators."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class LineIndexProvider(Protocol):
    """Maps character offsets to (possibly soft-wrapped) lines."""

    def line_index_of(self, offset: int) -> int:
        """Return the 0-based line containing ``offset``."""
        ...

    def line_start(self, line: int) -> int:
        """Return the offset of the first character of ``line``."""
        ...

    def line_end(self, line: int) -> int:
        """Return the offset just past the last character of ``line``."""
        ...


@runtime_checkable
class SpeechSink(Protocol):
    """Speech backend receiving finished utterances."""

    def speak(self, text: str, queue_mode: Any, properties: Mapping[str, Any]) -> None:
        """Speak ``text``; ``queue_mode`` decides flush vs queue."""
        ...


class InvariantViolation(RuntimeError):
    """Raised when an event or snapshot carries out-of-range offsets."""

    def __init__(
        self,
        message: str,
        *,
        start: int | None = None,
        end: int | None = None,
        length: int | None = None,
    ) -> None:
        super().__init__(message)
        self.start = start
        self.end = end
        self.length = length
