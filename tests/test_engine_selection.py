from __future__ import annotations

from typing import List, Optional

from edit_echo.announce import DiffEngine
from edit_echo.config import CursorModel, EchoConfig
from edit_echo.field import TextChangeEvent
from edit_echo.speech import CallbackSpeechSink, QueueMode, Utterance


def make_engine(
    text: str,
    start: int = 0,
    end: Optional[int] = None,
    *,
    config: Optional[EchoConfig] = None,
    **kwargs: object,
) -> tuple[DiffEngine, List[Utterance]]:
    spoken: List[Utterance] = []
    engine = DiffEngine(
        text,
        start,
        start if end is None else end,
        sink=CallbackSpeechSink(spoken.append),
        config=config,
        **kwargs,  # type: ignore[arg-type]
    )
    return engine, spoken


def move(engine: DiffEngine, start: int, end: Optional[int] = None) -> Optional[str]:
    utterance = engine.change(
        TextChangeEvent(engine.state.text, start, start if end is None else end)
    )
    return utterance.text if utterance else None


def test_identical_event_is_a_noop() -> None:
    engine, spoken = make_engine("hello", 2)

    assert engine.change(TextChangeEvent("hello", 2, 2)) is None

    assert spoken == []
    assert engine.last_change_described is False
    assert engine.state.span == (2, 2)


def test_select_all_from_cursor() -> None:
    engine, spoken = make_engine("hello world", 0)

    assert move(engine, 0, 11) == "hello world, selected."
    assert engine.last_change_described is True
    assert engine.state.span == (0, 11)
    assert [u.text for u in spoken] == ["hello world, selected."]


def test_collapse_selection_says_unselected() -> None:
    engine, _ = make_engine("hello world", 0, 5)

    assert move(engine, 0) == "Unselected."


def test_ibeam_reads_crossed_character() -> None:
    engine, _ = make_engine("abc", 0)

    assert move(engine, 1) == "a"
    assert move(engine, 2) == "b"
    assert move(engine, 1) == "b"


def test_block_cursor_reads_character_to_the_right() -> None:
    config = EchoConfig(cursor_model=CursorModel.BLOCK)
    engine, _ = make_engine("abc", 0, config=config)

    assert move(engine, 1) == "b"
    assert move(engine, 2) == "c"
    assert move(engine, 3) == "end"
    assert move(engine, 2) == "c"


def test_long_jump_reads_everything_crossed() -> None:
    engine, _ = make_engine("hello world", 0)

    assert move(engine, 5) == "hello"
    assert move(engine, 11) == " world"
    assert move(engine, 6) == "world"


def test_extend_and_shrink_selection_from_anchor() -> None:
    engine, _ = make_engine("hello world", 0, 5)

    assert move(engine, 0, 11) == " world, added to selection."
    assert move(engine, 0, 5) == " world, removed from selection."


def test_extend_and_shrink_selection_from_end() -> None:
    engine, _ = make_engine("hello world", 6, 11)

    assert move(engine, 0, 11) == "hello , added to selection."
    assert move(engine, 6, 11) == "hello , removed from selection."


def test_unrelated_range_reads_new_selection() -> None:
    engine, _ = make_engine("hello world", 0, 2)

    assert move(engine, 6, 8) == "wo, selected."


def test_autocomplete_selection_typed_over() -> None:
    engine, _ = make_engine("google", 3, 6)

    assert move(engine, 4, 6) == "g, le"


def test_password_selection_speaks_placeholder_only() -> None:
    engine, spoken = make_engine("cat", 0, is_password=True)

    assert move(engine, 0, 3) == "dot"
    assert move(engine, 1) == "dot"
    assert all("cat" not in u.text for u in spoken)


def test_multiline_moves_read_whole_line() -> None:
    text = "first\n  second  \n\nfourth"
    engine, _ = make_engine(text, 2, multiline=True)

    assert move(engine, 9) == "second"
    assert move(engine, 17) == "blank"
    assert move(engine, 20) == "fourth"


def test_multiline_same_line_move_reads_character() -> None:
    engine, _ = make_engine("one\ntwo", 4, multiline=True)

    assert move(engine, 5) == "t"


def test_single_line_never_reads_lines() -> None:
    engine, _ = make_engine("one\ntwo", 0)

    assert move(engine, 5) == "one\nt"


def test_user_trigger_flushes_and_otherwise_queues() -> None:
    engine, spoken = make_engine("abc", 0)

    engine.change(TextChangeEvent("abc", 1, 1, triggered_by_user=True))
    engine.change(TextChangeEvent("abc", 2, 2))

    assert [u.queue_mode for u in spoken] == [QueueMode.FLUSH, QueueMode.QUEUE]
    assert spoken[0].flush is True


def test_properties_are_forwarded_to_sink() -> None:
    engine, spoken = make_engine("abc", 0, properties={"pitch": 1.2})

    move(engine, 1)

    assert spoken[0].properties == {"pitch": 1.2}
