"""Textual widget adapters; the demo app lives in ``.app``."""

from .controller import (
    EchoHooks,
    FieldAnnouncer,
    FieldReader,
    FocusGatedSink,
    InputFieldReader,
    TextAreaFieldReader,
)

__all__ = [
    "EchoHooks",
    "FieldAnnouncer",
    "FieldReader",
    "FocusGatedSink",
    "InputFieldReader",
    "TextAreaFieldReader",
]
