"""Suppress the selection echo that follows a full field read-out."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from edit_echo.field import FieldSnapshot, TextChangeEvent, TextState
from edit_echo.runtime import telemetry
from edit_echo.speech import Utterance

from .engine import DiffEngine


class DuplicateSuppressor:
    """Wraps a ``DiffEngine`` and swallows one selection-only change after a read-out.

    Focusing a field typically produces the full description followed a moment
    later by a selection event (the browser or toolkit selecting the content).
    That second event would repeat what was just said, so it is adopted
    silently. Text changes are never swallowed.
    """

    def __init__(self, engine: DiffEngine) -> None:
        self.engine = engine
        self.just_spoke_description = False

    @property
    def state(self) -> TextState:
        return self.engine.state

    @property
    def last_change_described(self) -> bool:
        return self.engine.last_change_described

    @property
    def suppressing(self) -> bool:
        return self.just_spoke_description

    def change(self, event: TextChangeEvent) -> Optional[Utterance]:
        if self.just_spoke_description and event.value == self.engine.state.text:
            self.engine.restore_state(
                FieldSnapshot(value=event.value, start=event.start, end=event.end)
            )
            self.just_spoke_description = False
            self.engine.last_change_described = False
            telemetry.record_event(
                "echo.suppressed",
                level="debug",
                data={"field": self.engine.name, "start": event.start, "end": event.end},
            )
            return None
        return self.engine.change(event)

    def describe(self) -> str:
        """Return the full read-out and arm suppression of the next selection echo."""

        self.just_spoke_description = True
        return self.engine.describe()

    def speak_description(self, *, triggered_by_user: bool = True) -> Optional[Utterance]:
        return self.engine.speak(self.describe(), triggered_by_user=triggered_by_user)

    def save_state(self) -> FieldSnapshot:
        return self.engine.save_state()

    def restore_state(self, snapshot: FieldSnapshot | Mapping[str, Any]) -> None:
        self.engine.restore_state(snapshot)


__all__ = ["DuplicateSuppressor"]
