"""Describe cursor and selection moves over unchanged text."""

from __future__ import annotations

from edit_echo.config import EchoConfig, Messages
from edit_echo.field import LineIndexProvider, TextState


def line_text(text: str, layout: LineIndexProvider, line: int) -> str:
    """Return ``line`` with surrounding whitespace removed."""

    return text[layout.line_start(line) : layout.line_end(line)].strip()


def describe_selection_change(
    state: TextState,
    start: int,
    end: int,
    *,
    layout: LineIndexProvider,
    config: EchoConfig,
) -> str:
    """Return the phrase for moving from ``state``'s selection to ``(start, end)``.

    The text is assumed unchanged. Cursor moves announce what was crossed (or
    the new line when the line changed); range changes announce only the part
    that was added or removed when the new range extends or shrinks the old
    one from a shared edge.
    """

    if state.is_password:
        return config.messages.password_placeholder
    if start == end:
        return _describe_cursor_move(state, start, layout=layout, config=config)
    return _describe_range(state, start, end, config.messages)


def _describe_cursor_move(
    state: TextState,
    cursor: int,
    *,
    layout: LineIndexProvider,
    config: EchoConfig,
) -> str:
    text = state.text
    messages = config.messages

    if not state.is_cursor:
        return messages.unselected

    line = layout.line_index_of(cursor)
    if layout.line_index_of(state.start) != line:
        return line_text(text, layout, line) or messages.blank_line

    if abs(state.start - cursor) == 1:
        if config.cursor_is_block:
            if cursor == len(text):
                return messages.end_of_text
            return text[cursor]
        return text[min(state.start, cursor)]

    low, high = sorted((state.start, cursor))
    return text[low:high]


def _describe_range(state: TextState, start: int, end: int, messages: Messages) -> str:
    text = state.text
    length = len(text)
    old_start, old_end = state.span

    if old_start + 1 == start and old_end == length and end == length:
        # One more character of an autocompleted suggestion was typed over.
        return text[old_start] + messages.joiner + text[start:end]
    if state.is_cursor:
        return text[start:end] + messages.selected
    if old_start == start and old_end < end:
        return text[old_end:end] + messages.added_to_selection
    if old_start == start and old_end > end:
        return text[end:old_end] + messages.removed_from_selection
    if old_end == end and old_start > start:
        return text[start:old_start] + messages.added_to_selection
    if old_end == end and old_start < start:
        return text[old_start:start] + messages.removed_from_selection
    return text[start:end] + messages.selected


__all__ = ["describe_selection_change", "line_text"]
