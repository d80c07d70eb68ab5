"""Logical key events and readchar decoding.

readchar turns raw terminal bytes into key strings. This module maps those
strings onto the small set of logical keys the prompt understands, so the
controller never deals with terminal-specific sequences.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum, auto

import readchar


class KeyKind(Enum):
    """Logical key classes recognised by the prompt."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    TAB = auto()
    BACKSPACE = auto()
    CLEAR = auto()
    SUBMIT = auto()
    SKIP = auto()
    INTERRUPT = auto()
    CHAR = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single logical key press.

    Attributes:
        kind: Logical key class.
        char: The typed character for CHAR events, empty otherwise.
    """

    kind: KeyKind
    char: str = ""

    @classmethod
    def of(cls, char: str) -> "KeyEvent":
        """Build a CHAR event for a typed character."""
        return cls(KeyKind.CHAR, char)

    @property
    def is_printable(self) -> bool:
        return self.kind is KeyKind.CHAR and is_typed_char(self.char)


_NAMED_KEYS: dict[str, KeyKind] = {
    readchar.key.UP: KeyKind.UP,
    readchar.key.DOWN: KeyKind.DOWN,
    readchar.key.LEFT: KeyKind.LEFT,
    readchar.key.RIGHT: KeyKind.RIGHT,
    readchar.key.PAGE_UP: KeyKind.PAGE_UP,
    readchar.key.PAGE_DOWN: KeyKind.PAGE_DOWN,
    readchar.key.HOME: KeyKind.HOME,
    readchar.key.END: KeyKind.END,
    readchar.key.TAB: KeyKind.TAB,
    readchar.key.CTRL_W: KeyKind.CLEAR,
    readchar.key.CTRL_X: KeyKind.CLEAR,
    readchar.key.CTRL_C: KeyKind.INTERRUPT,
}


def is_typed_char(key: str) -> bool:
    """Check if key is a single non-control character."""
    return len(key) == 1 and unicodedata.category(key) != "Cc"


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def decode_key(key: str) -> KeyEvent:
    """Map a readchar key string to a logical KeyEvent."""
    if is_enter(key):
        return KeyEvent(KeyKind.SUBMIT)
    if is_escape(key):
        return KeyEvent(KeyKind.SKIP)
    if is_backspace(key):
        return KeyEvent(KeyKind.BACKSPACE)

    kind = _NAMED_KEYS.get(key)
    if kind is not None:
        return KeyEvent(kind)

    if is_typed_char(key):
        return KeyEvent.of(key)

    return KeyEvent(KeyKind.UNKNOWN)
