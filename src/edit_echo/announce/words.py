"""Character classes used to keep announcements on whole words."""

from __future__ import annotations

WORD_BREAK_CHARS = frozenset(" \n\r\t,./")


def is_word_break(ch: str) -> bool:
    return ch in WORD_BREAK_CHARS


def word_start_before(text: str, index: int) -> int:
    """Walk back from ``index`` to just after the previous word break."""

    while index > 0 and not is_word_break(text[index - 1]):
        index -= 1
    return index


__all__ = ["WORD_BREAK_CHARS", "is_word_break", "word_start_before"]
