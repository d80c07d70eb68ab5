"""Pytest fixtures for rich-multiselect tests."""

from __future__ import annotations

import pytest

from rich_multiselect.backend import Backend, Frame
from rich_multiselect.keys import KeyEvent, KeyKind
from rich_multiselect.themes import set_theme


class Keys:
    """Logical key events used to script prompts."""

    UP = KeyEvent(KeyKind.UP)
    DOWN = KeyEvent(KeyKind.DOWN)
    LEFT = KeyEvent(KeyKind.LEFT)
    RIGHT = KeyEvent(KeyKind.RIGHT)
    PAGE_UP = KeyEvent(KeyKind.PAGE_UP)
    PAGE_DOWN = KeyEvent(KeyKind.PAGE_DOWN)
    HOME = KeyEvent(KeyKind.HOME)
    END = KeyEvent(KeyKind.END)
    TAB = KeyEvent(KeyKind.TAB)
    BACKSPACE = KeyEvent(KeyKind.BACKSPACE)
    CLEAR = KeyEvent(KeyKind.CLEAR)
    ENTER = KeyEvent(KeyKind.SUBMIT)
    ESC = KeyEvent(KeyKind.SKIP)
    CTRL_C = KeyEvent(KeyKind.INTERRUPT)
    SPACE = KeyEvent.of(" ")

    @staticmethod
    def type(text: str) -> list[KeyEvent]:
        return [KeyEvent.of(ch) for ch in text]


class ScriptedBackend(Backend):
    """Backend that replays key events and records every frame."""

    def __init__(self, *events):
        self.events: list[KeyEvent] = []
        for event in events:
            if isinstance(event, list):
                self.events.extend(event)
            else:
                self.events.append(event)
        self.frames: list[Frame] = []
        self.entered = False
        self.closed = False
        self.outcome: tuple[str, str | None] | None = None

    def __enter__(self):
        self.entered = True
        return self

    def render(self, frame: Frame) -> None:
        self.frames.append(frame)

    def read_key(self) -> KeyEvent:
        if not self.events:
            raise AssertionError("Scripted backend ran out of keys")
        return self.events.pop(0)

    def finish(self, message: str, answer: str) -> None:
        self.outcome = ("finished", answer)

    def skip(self, message: str) -> None:
        self.outcome = ("skipped", None)

    def cancel(self, message: str) -> None:
        self.outcome = ("cancelled", None)

    def close(self) -> None:
        self.closed = True

    @property
    def last_frame(self) -> Frame:
        return self.frames[-1]


@pytest.fixture
def keys():
    """Key event helpers."""
    return Keys


@pytest.fixture
def scripted():
    """Factory for backends that replay the given keys."""
    return ScriptedBackend


@pytest.fixture(autouse=True)
def reset_theme(monkeypatch):
    """Keep global theme state and theme env vars out of every test."""
    monkeypatch.delenv("RICH_MULTISELECT_THEME", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    set_theme(None)
    yield
    set_theme(None)
