"""Utterance records and speech sink helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping


class QueueMode(str, Enum):
    """Whether an utterance interrupts pending speech or waits behind it."""

    FLUSH = "flush"
    QUEUE = "queue"

    @classmethod
    def for_trigger(cls, triggered_by_user: bool) -> "QueueMode":
        return cls.FLUSH if triggered_by_user else cls.QUEUE


@dataclass(frozen=True, slots=True)
class Utterance:
    """A finished phrase handed to the speech sink."""

    text: str
    queue_mode: QueueMode = QueueMode.QUEUE
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def flush(self) -> bool:
        return self.queue_mode is QueueMode.FLUSH


class CallbackSpeechSink:
    """Speech sink forwarding each utterance to a plain callable."""

    def __init__(self, callback: Callable[[Utterance], None]) -> None:
        self._callback = callback

    def speak(
        self,
        text: str,
        queue_mode: QueueMode,
        properties: Mapping[str, Any],
    ) -> None:
        self._callback(
            Utterance(text=text, queue_mode=queue_mode, properties=dict(properties))
        )


__all__ = ["CallbackSpeechSink", "QueueMode", "Utterance"]
