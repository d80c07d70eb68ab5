"""Filter text editing by grapheme cluster."""

from __future__ import annotations

import grapheme

from .keys import KeyEvent, KeyKind


class FilterInput:
    """Mutable filter text stored as a list of grapheme clusters.

    Backspace removes one user-perceived character, so "é" typed as
    "e" + U+0301 or a flag emoji disappear with a single key press.
    """

    def __init__(self, content: str = ""):
        self._clusters: list[str] = list(grapheme.graphemes(content))

    def __len__(self) -> int:
        return len(self._clusters)

    def __bool__(self) -> bool:
        return bool(self._clusters)

    def __repr__(self) -> str:
        return f"FilterInput({self.content!r})"

    @property
    def content(self) -> str:
        return "".join(self._clusters)

    @property
    def clusters(self) -> tuple[str, ...]:
        return tuple(self._clusters)

    def append_char(self, char: str) -> None:
        # A combining mark joins the previous cluster instead of starting one
        tail = self._clusters.pop() if self._clusters else ""
        self._clusters.extend(grapheme.graphemes(tail + char))

    def backspace(self) -> bool:
        """Drop the last grapheme cluster. Returns False when already empty."""
        if not self._clusters:
            return False
        self._clusters.pop()
        return True

    def clear(self) -> bool:
        """Empty the text. Returns False when there was nothing to clear."""
        if not self._clusters:
            return False
        self._clusters.clear()
        return True

    def handle_key(self, event: KeyEvent) -> bool:
        """Apply an editing key. Returns True if the content changed."""
        if event.kind is KeyKind.BACKSPACE:
            return self.backspace()
        if event.kind is KeyKind.CLEAR:
            return self.clear()
        if event.is_printable:
            self.append_char(event.char)
            return True
        return False
