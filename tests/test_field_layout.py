from __future__ import annotations

import pytest

from edit_echo.field import (
    InvariantViolation,
    LineLayout,
    SingleLineLayout,
    TextState,
    clamp_offsets,
    ensure_offsets,
)


def test_single_line_layout_spans_whole_text() -> None:
    text = {"value": "hello"}
    layout = SingleLineLayout(lambda: text["value"])

    assert layout.line_index_of(3) == 0
    assert layout.line_start(0) == 0
    assert layout.line_end(0) == 5

    text["value"] = "hi"
    assert layout.line_end(0) == 2


def test_line_layout_maps_offsets_to_lines() -> None:
    layout = LineLayout(lambda: "ab\ncd\n")

    assert [layout.line_index_of(i) for i in range(7)] == [0, 0, 0, 1, 1, 1, 2]
    assert (layout.line_start(1), layout.line_end(1)) == (3, 5)
    assert (layout.line_start(2), layout.line_end(2)) == (6, 6)


def test_line_layout_only_rebuilds_when_stale() -> None:
    text = {"value": "one"}
    layout = LineLayout(lambda: text["value"])
    assert layout.line_end(1) == 3

    text["value"] = "one\ntwo"
    assert layout.line_index_of(5) == 0

    layout.mark_stale()
    assert (layout.line_start(1), layout.line_end(1)) == (4, 7)
    assert layout.stale is False


def test_line_layout_clamps_line_numbers() -> None:
    layout = LineLayout(lambda: "ab\ncd")

    assert layout.line_start(-1) == 0
    assert layout.line_end(9) == 5


def test_ensure_offsets_reports_violation_details() -> None:
    assert ensure_offsets("abc", 1, 3) == (1, 3)

    with pytest.raises(InvariantViolation) as excinfo:
        ensure_offsets("abc", -1, 2)
    assert excinfo.value.start == -1

    with pytest.raises(InvariantViolation):
        ensure_offsets("abc", 2, 1)


def test_clamp_offsets_orders_and_bounds() -> None:
    assert clamp_offsets("abc", -4, 10) == (0, 3)
    assert clamp_offsets("abc", 3, 1) == (1, 3)


def test_text_state_adopt_keeps_field_flags() -> None:
    state = TextState("secret", 0, 0, is_password=True, multiline=False)

    updated = state.adopt("secrets", 7, 7)

    assert updated.is_password is True
    assert updated.span == (7, 7)
    assert state.text == "secret"
