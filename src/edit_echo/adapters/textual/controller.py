"""Field readers that feed Textual widgets into the announcement engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, Tuple

from edit_echo.announce import DiffEngine, DuplicateSuppressor
from edit_echo.config import EchoConfig
from edit_echo.field import LineIndexProvider, LineLayout, SpeechSink, TextChangeEvent
from edit_echo.speech import QueueMode, Utterance

Reading = Tuple[str, int, int]


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


class FieldReader(Protocol):
    """Reads the live value and selection of one widget."""

    is_password: bool
    multiline: bool
    layout: Optional[LineIndexProvider]

    def read(self) -> Reading:
        ...


class InputFieldReader:
    """Reader for a single-line ``textual.widgets.Input``."""

    multiline = False
    layout: Optional[LineIndexProvider] = None

    def __init__(self, widget: Any) -> None:
        self.widget = widget

    @property
    def is_password(self) -> bool:
        return bool(getattr(self.widget, "password", False))

    def read(self) -> Reading:
        value = str(self.widget.value)
        # Older Input widgets only expose the caret.
        selection = getattr(self.widget, "selection", None)
        if selection is None:
            cursor = int(self.widget.cursor_position)
            return value, cursor, cursor
        start, end = sorted((int(selection.start), int(selection.end)))
        return value, start, end


class TextAreaFieldReader:
    """Reader for a multi-line ``textual.widgets.TextArea``.

    Selections arrive as ``(row, column)`` locations and are converted to
    offsets through a line layout owned by this reader alone; the layout is
    marked stale whenever the widget text differs from the previous read.
    """

    is_password = False
    multiline = True

    def __init__(self, widget: Any) -> None:
        self.widget = widget
        self._last_text: Optional[str] = None
        self.layout = LineLayout(self._text)

    def _text(self) -> str:
        return str(self.widget.text)

    def read(self) -> Reading:
        text = self._text()
        if text != self._last_text:
            self.layout.mark_stale()
            self._last_text = text
        selection = self.widget.selection
        start, end = sorted((self._offset(selection.start), self._offset(selection.end)))
        return text, start, end

    def _offset(self, location: Tuple[int, int]) -> int:
        row, column = location
        line_start = self.layout.line_start(row)
        line_end = self.layout.line_end(row)
        return min(line_start + max(column, 0), line_end)


class FocusGatedSink:
    """Drops speech for a widget that does not currently have focus."""

    def __init__(self, sink: SpeechSink, widget: Any) -> None:
        self.sink = sink
        self.widget = widget

    def speak(self, text: str, queue_mode: QueueMode, properties: Mapping[str, Any]) -> None:
        if not getattr(self.widget, "has_focus", True):
            return
        self.sink.speak(text, queue_mode, properties)


@dataclass(slots=True)
class EchoHooks:
    """Optional callbacks a host UI can use to mirror announcer activity."""

    log: Callable[[str], None] = _noop


class FieldAnnouncer:
    """Binds one widget reader to its own engine and duplicate suppressor."""

    def __init__(
        self,
        reader: FieldReader,
        sink: SpeechSink,
        *,
        config: Optional[EchoConfig] = None,
        name: str = "field",
        hooks: Optional[EchoHooks] = None,
    ) -> None:
        self.reader = reader
        self.hooks = hooks or EchoHooks()
        value, start, end = reader.read()
        self.engine = DiffEngine(
            value,
            start,
            end,
            sink=sink,
            is_password=reader.is_password,
            multiline=reader.multiline,
            layout=reader.layout,
            config=config,
            name=name,
        )
        self.suppressor = DuplicateSuppressor(self.engine)

    @property
    def name(self) -> str:
        return self.engine.name

    def update(self, triggered_by_user: bool = False) -> Optional[Utterance]:
        """Re-read the widget and announce whatever changed."""

        value, start, end = self.reader.read()
        utterance = self.suppressor.change(
            TextChangeEvent(value, start, end, triggered_by_user)
        )
        self._log("update", start=start, end=end, spoke=utterance.text if utterance else None)
        return utterance

    def focus(self) -> Optional[Utterance]:
        """Speak the full field description, as on gaining focus."""

        value, start, end = self.reader.read()
        self.suppressor.restore_state({"value": value, "start": start, "end": end})
        utterance = self.suppressor.speak_description(triggered_by_user=True)
        self._log("focus", spoke=utterance.text if utterance else None)
        return utterance

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix, f"field={self.name!r}"]
        parts.extend(f"{key}={value!r}" for key, value in fields.items() if value is not None)
        self.hooks.log(" ".join(parts))


__all__ = [
    "EchoHooks",
    "FieldAnnouncer",
    "FieldReader",
    "FocusGatedSink",
    "InputFieldReader",
    "TextAreaFieldReader",
]
