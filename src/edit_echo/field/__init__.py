"""Field snapshots, boundary protocols, and line layouts."""

from .layout import LineLayout, SingleLineLayout
from .state import FieldSnapshot, Span, TextChangeEvent, TextState
from .sync import InvariantViolation, LineIndexProvider, SpeechSink
from .validation import check_offsets, clamp_offsets, ensure_offsets

__all__ = [
    "FieldSnapshot",
    "InvariantViolation",
    "LineIndexProvider",
    "LineLayout",
    "SingleLineLayout",
    "Span",
    "SpeechSink",
    "TextChangeEvent",
    "TextState",
    "check_offsets",
    "clamp_offsets",
    "ensure_offsets",
]
