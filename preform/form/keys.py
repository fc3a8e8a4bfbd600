"""Key events understood by the form engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyKind(Enum):
    """Discrete keys routed by the form."""

    CHAR = "char"
    BACKSPACE = "backspace"
    DELETE = "delete"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    UP = "up"
    DOWN = "down"
    TAB = "tab"
    ENTER = "enter"
    ESCAPE = "escape"


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``char`` is set only for CHAR events."""

    kind: KeyKind
    char: Optional[str] = None

    def __post_init__(self):
        if self.kind == KeyKind.CHAR and (self.char is None or len(self.char) != 1):
            raise ValueError(f"CHAR events need exactly one character, got {self.char!r}")

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, char)


def keys_from_text(text: str) -> list[KeyEvent]:
    """Turn a string into one CHAR event per character."""
    return [KeyEvent.character(c) for c in text]
