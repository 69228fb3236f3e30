"""Text, cursor, and selection snapshots for a tracked field."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Tuple

Span = Tuple[int, int]  # (start, end) character offsets


@dataclass(frozen=True, slots=True)
class TextState:
    """Immutable snapshot of a field; replaced whole on every transition."""

    text: str = ""
    start: int = 0
    end: int = 0
    is_password: bool = False
    multiline: bool = False

    @property
    def is_cursor(self) -> bool:
        return self.start == self.end

    @property
    def span(self) -> Span:
        return (self.start, self.end)

    def same_as(self, value: str, start: int, end: int) -> bool:
        return self.text == value and self.start == start and self.end == end

    def adopt(self, value: str, start: int, end: int) -> "TextState":
        """Return a state with new content; password/multiline flags carry over."""

        return replace(self, text=value, start=start, end=end)


@dataclass(frozen=True, slots=True)
class TextChangeEvent:
    """Candidate field contents reported by an adapter."""

    value: str
    start: int
    end: int
    triggered_by_user: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TextChangeEvent":
        """Accept the boundary shape ``{value, start, end, triggeredByUser}``."""

        triggered = data.get("triggered_by_user", data.get("triggeredByUser", False))
        return cls(
            value=str(data["value"]),
            start=int(data["start"]),
            end=int(data["end"]),
            triggered_by_user=bool(triggered),
        )


@dataclass(frozen=True, slots=True)
class FieldSnapshot:
    """Opaque checkpoint returned by ``save_state``."""

    value: str
    start: int
    end: int

    def as_dict(self) -> dict[str, Any]:
        return {"value": self.value, "start": self.start, "end": self.end}

    @classmethod
    def coerce(cls, data: "FieldSnapshot | Mapping[str, Any]") -> "FieldSnapshot":
        if isinstance(data, FieldSnapshot):
            return data
        return cls(value=str(data["value"]), start=int(data["start"]), end=int(data["end"]))
