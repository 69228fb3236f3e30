"""Diff engine that turns successive field snapshots into speech."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from edit_echo.config import EchoConfig
from edit_echo.field import (
    FieldSnapshot,
    LineIndexProvider,
    LineLayout,
    SingleLineLayout,
    SpeechSink,
    TextChangeEvent,
    TextState,
    check_offsets,
)
from edit_echo.runtime import telemetry
from edit_echo.speech import QueueMode, Utterance

from .selection import describe_selection_change, line_text
from .text_change import describe_text_change


class DiffEngine:
    """Owns the last known state of one field and announces each change."""

    def __init__(
        self,
        text: str = "",
        start: int = 0,
        end: int = 0,
        *,
        sink: SpeechSink,
        is_password: bool = False,
        multiline: bool = False,
        layout: Optional[LineIndexProvider] = None,
        config: Optional[EchoConfig] = None,
        name: str = "field",
        properties: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.name = name
        self.sink = sink
        self.config = config or EchoConfig()
        self.properties: Dict[str, Any] = dict(properties or {})
        start, end = self._checked(text, start, end)
        self._state = TextState(
            text=text,
            start=start,
            end=end,
            is_password=is_password,
            multiline=multiline,
        )
        self._owns_layout = layout is None
        if layout is None:
            layout = LineLayout(self._current_text) if multiline else SingleLineLayout(
                self._current_text
            )
        self.layout = layout
        self.last_change_described = False

    @property
    def state(self) -> TextState:
        return self._state

    def _current_text(self) -> str:
        return self._state.text

    def change(self, event: TextChangeEvent) -> Optional[Utterance]:
        """Adopt ``event`` and speak what changed, if anything did."""

        with telemetry.span(
            "echo::change",
            component="engine",
            metadata={"field": self.name, "user": event.triggered_by_user},
        ) as handle:
            start, end = self._checked(event.value, event.start, event.end)
            if (start, end) != (event.start, event.end):
                event = TextChangeEvent(
                    event.value, start, end, event.triggered_by_user
                )

            if self._state.same_as(event.value, event.start, event.end):
                self.last_change_described = False
                handle.add_metadata("kind", "noop")
                return None

            if event.value == self._state.text:
                handle.add_metadata("kind", "selection")
                text = describe_selection_change(
                    self._state,
                    event.start,
                    event.end,
                    layout=self.layout,
                    config=self.config,
                )
            else:
                handle.add_metadata("kind", "text")
                text = describe_text_change(self._state, event, config=self.config)

            utterance = self.speak(text, triggered_by_user=event.triggered_by_user)
            self.last_change_described = True
            self._adopt(event.value, event.start, event.end)
            return utterance

    def speak(self, text: str, *, triggered_by_user: bool = False) -> Optional[Utterance]:
        """Hand ``text`` to the sink; empty text is never spoken."""

        if not text:
            return None
        utterance = Utterance(
            text=text,
            queue_mode=QueueMode.for_trigger(triggered_by_user),
            properties=dict(self.properties),
        )
        self.sink.speak(utterance.text, utterance.queue_mode, utterance.properties)
        telemetry.record_event(
            "echo.utterance",
            level="debug",
            data={"field": self.name, "text": text, "mode": utterance.queue_mode.value},
        )
        return utterance

    def describe(self) -> str:
        """Build a read-out of the whole field rather than a delta."""

        state = self._state
        messages = self.config.messages
        if state.multiline:
            speech = messages.multiline_editable_text
            if state.is_cursor and not state.is_password:
                line = self.layout.line_index_of(state.start)
                speech += line_text(state.text, self.layout, line) or messages.blank_description
            return speech

        limit = self.config.max_short_phrase_len
        if state.is_password:
            # Only whole placeholder tokens fit under the limit.
            count = min(len(state.text), (limit + 1) // (len(messages.password_placeholder) + 1))
            value = " ".join([messages.password_placeholder] * count)
        else:
            value = state.text[:limit]
        return value + messages.editable_text

    def save_state(self) -> FieldSnapshot:
        return FieldSnapshot(
            value=self._state.text, start=self._state.start, end=self._state.end
        )

    def restore_state(self, snapshot: FieldSnapshot | Mapping[str, Any]) -> None:
        """Adopt a saved snapshot silently, without running the diff."""

        snapshot = FieldSnapshot.coerce(snapshot)
        start, end = self._checked(snapshot.value, snapshot.start, snapshot.end)
        self._adopt(snapshot.value, start, end)

    def _adopt(self, value: str, start: int, end: int) -> None:
        text_changed = value != self._state.text
        self._state = self._state.adopt(value, start, end)
        if text_changed and self._owns_layout and isinstance(self.layout, LineLayout):
            self.layout.mark_stale()

    def _checked(self, text: str, start: int, end: int) -> tuple[int, int]:
        clamped = check_offsets(text, start, end, strict=self.config.strict)
        if clamped != (start, end):
            telemetry.record_event(
                "echo.clamped",
                level="warning",
                data={
                    "field": self.name,
                    "requested": (start, end),
                    "clamped": clamped,
                    "length": len(text),
                },
            )
        return clamped


__all__ = ["DiffEngine"]
