"""Executable Textual demo that voices edits into an on-screen speech log."""

from __future__ import annotations

import argparse
from typing import Dict, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widget import Widget
    from textual.widgets import Footer, Header, Input, Log, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use edit_echo.adapters.textual.app"
    ) from exc

from edit_echo.config import CursorModel, EchoConfig
from edit_echo.runtime import telemetry
from edit_echo.speech import CallbackSpeechSink, Utterance

from .controller import (
    EchoHooks,
    FieldAnnouncer,
    FieldReader,
    FocusGatedSink,
    InputFieldReader,
    TextAreaFieldReader,
)


class EchoDemoApp(App[None]):
    """Three editable fields whose changes are written to a speech log."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#fields {
		height: 1fr;
	}

	#notes {
		height: 1fr;
		border: round $accent;
	}

	#speech-log {
		height: 10;
		border: round $secondary;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("f2", "describe", "Read field"),
    ]

    def __init__(self, *, config: Optional[EchoConfig] = None, poll_interval: float = 0.2) -> None:
        super().__init__()
        self.config = config or EchoConfig.from_env()
        self.poll_interval = poll_interval
        self._announcers: Dict[str, FieldAnnouncer] = {}
        self._speech_log: Log | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="fields"):
            yield Input(placeholder="Name", id="name")
            yield Input(placeholder="Password", password=True, id="secret")
            yield TextArea("", id="notes")
        self._speech_log = Log(id="speech-log")
        yield self._speech_log
        yield Footer()

    def on_mount(self) -> None:
        hooks = EchoHooks(log=self._debug_line)
        sink = CallbackSpeechSink(self._show_utterance)
        for widget in self.query(Input):
            self._track(widget.id or "input", InputFieldReader(widget), sink, widget, hooks)
        notes = self.query_one("#notes", TextArea)
        self._track("notes", TextAreaFieldReader(notes), sink, notes, hooks)
        # Input has no selection message, so caret moves are picked up by polling.
        self.set_interval(self.poll_interval, self._poll)

    def _track(
        self,
        name: str,
        reader: FieldReader,
        sink: CallbackSpeechSink,
        widget: Widget,
        hooks: EchoHooks,
    ) -> None:
        self._announcers[name] = FieldAnnouncer(
            reader,
            FocusGatedSink(sink, widget),
            config=self.config,
            name=name,
            hooks=hooks,
        )

    def _announcer_for_focus(self) -> Optional[FieldAnnouncer]:
        focused = self.focused
        if focused is None or focused.id is None:
            return None
        return self._announcers.get(focused.id)

    def _poll(self) -> None:
        announcer = self._announcer_for_focus()
        if announcer:
            announcer.update(triggered_by_user=False)

    def on_input_changed(self, event: Input.Changed) -> None:
        announcer = self._announcers.get(event.input.id or "")
        if announcer:
            announcer.update(triggered_by_user=True)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        del event
        self._announcers["notes"].update(triggered_by_user=True)

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        del event
        self._announcers["notes"].update(triggered_by_user=True)

    def on_descendant_focus(self) -> None:
        announcer = self._announcer_for_focus()
        if announcer:
            announcer.focus()

    def action_describe(self) -> None:
        announcer = self._announcer_for_focus()
        if announcer:
            announcer.focus()

    def _show_utterance(self, utterance: Utterance) -> None:
        if self._speech_log:
            self._speech_log.write_line(f"[{utterance.queue_mode.value}] {utterance.text}")

    def _debug_line(self, line: str) -> None:
        telemetry.record_event("demo.field", level="debug", data={"line": line})


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the edit_echo Textual demo.")
    parser.add_argument(
        "--cursor-model",
        choices=[model.value for model in CursorModel],
        default=None,
        help="How one-character caret moves are voiced (default: i-beam)",
    )
    parser.add_argument(
        "--max-short-phrase-len",
        type=int,
        default=None,
        help="Longest new text spoken whole before word diffing kicks in",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject out-of-range offsets instead of clamping them",
    )
    parser.add_argument(
        "--telemetry-preset",
        choices=["development", "production", "quiet"],
        default="quiet",
        help="telelog preset; console output would draw over the TUI",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.telemetry_preset)
    overrides: Dict[str, object] = {}
    if args.cursor_model:
        overrides["cursor_model"] = CursorModel.parse(args.cursor_model)
    if args.max_short_phrase_len is not None:
        overrides["max_short_phrase_len"] = args.max_short_phrase_len
    if args.strict:
        overrides["strict"] = True
    EchoDemoApp(config=EchoConfig.from_env(**overrides)).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
