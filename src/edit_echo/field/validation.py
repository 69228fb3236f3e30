"""Offset checks applied before the engine adopts new field contents."""

from __future__ import annotations

from typing import Tuple

from .sync import InvariantViolation


def ensure_offsets(text: str, start: int, end: int) -> Tuple[int, int]:
    length = len(text)
    if start < 0 or end < 0:
        raise InvariantViolation(
            "Negative selection offset", start=start, end=end, length=length
        )
    if start > end:
        raise InvariantViolation(
            "Selection start after end", start=start, end=end, length=length
        )
    if end > length:
        raise InvariantViolation(
            "Selection past end of text", start=start, end=end, length=length
        )
    return start, end


def clamp_offsets(text: str, start: int, end: int) -> Tuple[int, int]:
    """Force ``0 <= start <= end <= len(text)``."""

    length = len(text)
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    if start > end:
        start, end = end, start
    return start, end


def check_offsets(text: str, start: int, end: int, *, strict: bool) -> Tuple[int, int]:
    """Reject (``strict``) or clamp offsets that fall outside ``text``."""

    if strict:
        return ensure_offsets(text, start, end)
    return clamp_offsets(text, start, end)
