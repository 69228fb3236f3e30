"""Describe edits that change the field text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from edit_echo.config import EchoConfig, Messages
from edit_echo.field import TextChangeEvent, TextState

from .words import is_word_break, word_start_before


@dataclass(frozen=True, slots=True)
class TextDelta:
    """Common prefix/suffix lengths framing one contiguous edit."""

    prefix_len: int
    suffix_len: int
    autocomplete: str = ""
    trim: bool = False


def describe_text_change(
    state: TextState, event: TextChangeEvent, *, config: EchoConfig
) -> str:
    """Return the phrase announcing the edit from ``state`` to ``event``.

    Typing, pasting, and deleting at the caret are recognised from the old
    selection; anything else falls back to a plain text diff. An empty string
    means there is nothing worth speaking.
    """

    if state.is_password:
        return config.messages.password_placeholder

    old = state.text
    messages = config.messages
    value, start, end = event.value, event.start, event.end

    # A selection running to the end of the new text is autocomplete output.
    autocomplete = ""
    if start < end and end == len(value):
        autocomplete = value[start:]
        value = value[:start]
        end = start

    # The old selection was replaced by typed or pasted text.
    prefix_len = state.start
    suffix_len = len(old) - state.end
    if len(value) >= prefix_len + suffix_len + (end - start) and shares_edges(
        old, value, prefix_len, suffix_len
    ):
        delta = TextDelta(prefix_len, suffix_len, autocomplete)
        return compose_delta(old, value, delta, messages)

    # Characters were removed around a caret that stayed a caret.
    if state.is_cursor and start == end:
        prefix_len = start
        suffix_len = len(value) - end
        if shares_edges(old, value, prefix_len, suffix_len):
            delta = TextDelta(prefix_len, suffix_len, autocomplete)
            return compose_delta(old, value, delta, messages)

    # Not a recognisable editing gesture: diff the texts alone.
    value += autocomplete
    edge = edge_character(old, value)
    if edge is not None:
        return edge

    if len(value) <= config.max_short_phrase_len:
        return compose_delta(old, value, TextDelta(0, 0), messages)

    prefix_len, suffix_len = word_aligned_edges(old, value)
    return compose_delta(old, value, TextDelta(prefix_len, suffix_len, trim=True), messages)


def shares_edges(old: str, new: str, prefix_len: int, suffix_len: int) -> bool:
    """True when ``new`` keeps ``old``'s first ``prefix_len`` and last ``suffix_len`` chars."""

    if prefix_len < 0 or suffix_len < 0:
        return False
    if max(prefix_len, suffix_len) > min(len(old), len(new)):
        return False
    if new[:prefix_len] != old[:prefix_len]:
        return False
    return new[len(new) - suffix_len :] == old[len(old) - suffix_len :]


def edge_character(old: str, new: str) -> Optional[str]:
    """Return the single character added or removed at either end, if any."""

    if len(new) == len(old) + 1:
        if new.startswith(old):
            return new[-1]
        if new[1:] == old:
            return new[0]
    elif len(new) + 1 == len(old):
        if old.startswith(new):
            return old[-1]
        if old[1:] == new:
            return old[0]
    return None


def word_aligned_edges(old: str, new: str) -> Tuple[int, int]:
    """Longest common prefix/suffix, shrunk so neither cuts through a word."""

    old_len, new_len = len(old), len(new)

    prefix_len = 0
    limit = min(old_len, new_len)
    while prefix_len < limit and old[prefix_len] == new[prefix_len]:
        prefix_len += 1
    prefix_len = word_start_before(old, prefix_len)

    suffix_len = 0
    limit = min(old_len, new_len) - prefix_len
    while (
        suffix_len < limit
        and old[old_len - suffix_len - 1] == new[new_len - suffix_len - 1]
    ):
        suffix_len += 1
    while suffix_len > 0 and not _suffix_on_boundary(old, new, suffix_len):
        suffix_len -= 1

    return prefix_len, suffix_len


def _suffix_on_boundary(old: str, new: str, suffix_len: int) -> bool:
    if is_word_break(old[len(old) - suffix_len]):
        return True
    # The edit stops right after a break character in both texts.
    before_old = len(old) - suffix_len - 1
    before_new = len(new) - suffix_len - 1
    return (
        before_old >= 0
        and before_new >= 0
        and is_word_break(old[before_old])
        and is_word_break(new[before_new])
    )


def compose_delta(old: str, new: str, delta: TextDelta, messages: Messages) -> str:
    """Turn the region between ``delta``'s prefix and suffix into a phrase."""

    prefix_len, suffix_len = delta.prefix_len, delta.suffix_len
    deleted_len = len(old) - prefix_len - suffix_len
    inserted_len = len(new) - prefix_len - suffix_len
    deleted = old[prefix_len : prefix_len + max(deleted_len, 0)]
    inserted = new[prefix_len : prefix_len + max(inserted_len, 0)]
    if delta.trim:
        deleted = deleted.strip() or deleted
        inserted = inserted.strip() or inserted

    if inserted_len > 1:
        utterance = inserted
    elif inserted_len == 1:
        utterance = inserted
        if (
            is_word_break(inserted)
            and prefix_len > 0
            and not is_word_break(new[prefix_len - 1])
        ):
            # A word was just finished: say it together with the break.
            word_start = word_start_before(new, prefix_len)
            if word_start < prefix_len:
                utterance = new[word_start : prefix_len + 1]
    elif deleted_len > 1 and not delta.autocomplete:
        utterance = deleted + messages.deleted
    elif deleted_len == 1:
        utterance = deleted
    else:
        utterance = ""

    if delta.autocomplete:
        if utterance:
            return utterance + messages.joiner + delta.autocomplete
        return delta.autocomplete
    return utterance


__all__ = [
    "TextDelta",
    "compose_delta",
    "describe_text_change",
    "edge_character",
    "shares_edges",
    "word_aligned_edges",
]
