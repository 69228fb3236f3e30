"""Change classification and utterance synthesis."""

from .engine import DiffEngine
from .selection import describe_selection_change
from .suppressor import DuplicateSuppressor
from .text_change import TextDelta, compose_delta, describe_text_change
from .words import WORD_BREAK_CHARS, is_word_break

__all__ = [
    "DiffEngine",
    "DuplicateSuppressor",
    "TextDelta",
    "WORD_BREAK_CHARS",
    "compose_delta",
    "describe_selection_change",
    "describe_text_change",
    "is_word_break",
]
