"""Spoken feedback for edits, cursor moves, and selections in text fields."""

__all__ = [
    "adapters",
    "announce",
    "config",
    "field",
    "runtime",
    "speech",
]

__version__ = "0.1.0"
