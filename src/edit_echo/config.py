"""Announcement configuration and the table of spoken phrases."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from edit_echo.runtime.telemetry import env, env_flag


class CursorModel(str, Enum):
    """How a one-character cursor move is voiced."""

    BLOCK = "block"
    I_BEAM = "i-beam"

    @classmethod
    def parse(cls, value: "str | CursorModel") -> "CursorModel":
        if isinstance(value, CursorModel):
            return value
        key = value.strip().lower().replace("_", "-")
        if key == "ibeam":
            key = "i-beam"
        for model in cls:
            if model.value == key:
                return model
        raise ValueError(f"Unknown cursor model '{value}'")


@dataclass(frozen=True, slots=True)
class Messages:
    """Every fixed phrase the engine can speak."""

    password_placeholder: str = "dot"
    unselected: str = "Unselected."
    blank_line: str = "blank"
    end_of_text: str = "end"
    selected: str = ", selected."
    added_to_selection: str = ", added to selection."
    removed_from_selection: str = ", removed from selection."
    deleted: str = ", deleted."
    joiner: str = ", "
    editable_text: str = ", editable text."
    multiline_editable_text: str = "multiline editable text. "
    blank_description: str = "blank."


@dataclass(frozen=True, slots=True)
class EchoConfig:
    """Construction-time knobs for a tracked field."""

    max_short_phrase_len: int = 60
    cursor_model: CursorModel = CursorModel.I_BEAM
    # Debug builds reject out-of-range offsets instead of clamping them.
    strict: bool = False
    messages: Messages = field(default_factory=Messages)

    def __post_init__(self) -> None:
        if self.max_short_phrase_len < 0:
            raise ValueError("max_short_phrase_len cannot be negative")
        object.__setattr__(self, "cursor_model", CursorModel.parse(self.cursor_model))

    @property
    def cursor_is_block(self) -> bool:
        return self.cursor_model is CursorModel.BLOCK

    @classmethod
    def from_env(cls, **overrides: object) -> "EchoConfig":
        """Build a config from ``EDIT_ECHO_*`` variables, then apply overrides."""

        values: dict[str, object] = {}
        raw_len = env("MAX_SHORT_PHRASE_LEN")
        if raw_len:
            values["max_short_phrase_len"] = int(raw_len)
        raw_model = env("CURSOR_MODEL")
        if raw_model:
            values["cursor_model"] = CursorModel.parse(raw_model)
        values["strict"] = env_flag("STRICT", False)
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]


__all__ = ["CursorModel", "EchoConfig", "Messages"]
