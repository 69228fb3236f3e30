from __future__ import annotations

from types import SimpleNamespace
from typing import List

from edit_echo.adapters.textual import (
    EchoHooks,
    FieldAnnouncer,
    FocusGatedSink,
    InputFieldReader,
    TextAreaFieldReader,
)
from edit_echo.speech import CallbackSpeechSink, QueueMode, Utterance


def make_input(value: str = "", cursor: int = 0, **extra: object) -> SimpleNamespace:
    fields = {"value": value, "cursor_position": cursor, "password": False, "has_focus": True}
    fields.update(extra)
    return SimpleNamespace(**fields)


def make_text_area(text: str, start=(0, 0), end=None) -> SimpleNamespace:
    return SimpleNamespace(
        text=text,
        selection=SimpleNamespace(start=start, end=end or start),
        has_focus=True,
    )


def select(widget: SimpleNamespace, start, end) -> None:
    widget.selection = SimpleNamespace(start=start, end=end)


def test_input_reader_prefers_selection_and_orders_it() -> None:
    widget = make_input("hello", 5, selection=SimpleNamespace(start=5, end=1))

    assert InputFieldReader(widget).read() == ("hello", 1, 5)


def test_input_reader_falls_back_to_cursor_position() -> None:
    widget = make_input("hello", 2)

    assert InputFieldReader(widget).read() == ("hello", 2, 2)


def test_announcer_speaks_typing_in_input() -> None:
    spoken: List[Utterance] = []
    widget = make_input("cat", 3)
    announcer = FieldAnnouncer(InputFieldReader(widget), CallbackSpeechSink(spoken.append))

    widget.value, widget.cursor_position = "cats", 4
    announcer.update(triggered_by_user=True)

    assert [(u.text, u.queue_mode) for u in spoken] == [("s", QueueMode.FLUSH)]


def test_password_input_is_masked() -> None:
    spoken: List[Utterance] = []
    widget = make_input("pw", 2, password=True)
    announcer = FieldAnnouncer(InputFieldReader(widget), CallbackSpeechSink(spoken.append))

    widget.value, widget.cursor_position = "pwd", 3
    announcer.update()

    assert [u.text for u in spoken] == ["dot"]


def test_focus_description_suppresses_following_selection_echo() -> None:
    spoken: List[Utterance] = []
    lines: List[str] = []
    widget = make_input("hello", 0)
    announcer = FieldAnnouncer(
        InputFieldReader(widget),
        CallbackSpeechSink(spoken.append),
        name="name",
        hooks=EchoHooks(log=lines.append),
    )

    announcer.focus()
    widget.selection = SimpleNamespace(start=0, end=5)
    announcer.update(triggered_by_user=True)

    assert [u.text for u in spoken] == ["hello, editable text."]
    assert lines[0].startswith("focus field='name'")


def test_focus_gated_sink_drops_unfocused_speech() -> None:
    spoken: List[Utterance] = []
    widget = make_input("ab", 0, has_focus=False)
    announcer = FieldAnnouncer(
        InputFieldReader(widget),
        FocusGatedSink(CallbackSpeechSink(spoken.append), widget),
    )

    widget.cursor_position = 1
    assert announcer.update() is not None
    assert spoken == []

    widget.has_focus = True
    widget.cursor_position = 2
    announcer.update()
    assert [u.text for u in spoken] == ["b"]


def test_text_area_reader_converts_locations_to_offsets() -> None:
    widget = make_text_area("ab\ncde", start=(1, 2), end=(0, 1))

    assert TextAreaFieldReader(widget).read() == ("ab\ncde", 1, 5)


def test_text_area_announces_line_moves_and_edits() -> None:
    spoken: List[Utterance] = []
    widget = make_text_area("first\nsecond")
    announcer = FieldAnnouncer(
        TextAreaFieldReader(widget), CallbackSpeechSink(spoken.append), name="notes"
    )

    select(widget, (1, 6), (1, 6))
    announcer.update(triggered_by_user=True)

    widget.text = "first\nsecond\nthird"
    select(widget, (2, 5), (2, 5))
    announcer.update(triggered_by_user=True)

    select(widget, (0, 0), (0, 0))
    announcer.update(triggered_by_user=True)
    select(widget, (2, 0), (2, 0))
    announcer.update(triggered_by_user=True)

    assert [u.text for u in spoken] == ["second", "\nthird", "first", "third"]


def test_text_area_focus_reads_current_line() -> None:
    spoken: List[Utterance] = []
    widget = make_text_area("one\ntwo", start=(1, 1))
    announcer = FieldAnnouncer(TextAreaFieldReader(widget), CallbackSpeechSink(spoken.append))

    announcer.focus()

    assert spoken[0].text == "multiline editable text. two"
