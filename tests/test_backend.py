"""Tests for the Rich rendering backend."""

from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text

from rich_multiselect import backend as backend_module
from rich_multiselect.backend import Frame, OptionRow, RichBackend
from rich_multiselect.keys import KeyKind
from rich_multiselect.pagination import paginate
from rich_multiselect.themes import PLAIN_THEME, IndexPrefix, Theme


def _console() -> Console:
    return Console(file=io.StringIO(), width=80, force_terminal=False, color_system=None)


def _frame(rows, cursor=0, page_size=7, **kwargs) -> Frame:
    defaults = dict(
        message="Pick fruit",
        filter_text="",
        error=None,
        help_message="type to filter",
        option_count=len(rows),
    )
    defaults.update(kwargs)
    return Frame(page=paginate(page_size, rows, cursor), **defaults)


def _plain(backend: RichBackend, frame: Frame) -> list[str]:
    return Text.from_markup(backend.build(frame)).plain.split("\n")


ROWS = [
    OptionRow(0, "Banana", True, True),
    OptionRow(1, "[Apple]", False, False),
]


def test_build_plain_layout():
    backend = RichBackend(console=_console(), theme=PLAIN_THEME)
    lines = _plain(backend, _frame(ROWS, filter_text="a"))
    assert lines == [
        "? Pick fruit a",
        "› [x] Banana",
        "  [ ] [Apple]",
        "[type to filter]",
    ]


def test_build_error_and_empty_view():
    backend = RichBackend(console=_console(), theme=PLAIN_THEME)
    lines = _plain(backend, _frame([], error="Too few", help_message=None, option_count=2))
    assert lines == ["# Too few", "? Pick fruit", "  (no matches)"]


def test_build_scroll_indicators():
    rows = [OptionRow(i, f"item {i}", False, i == 10) for i in range(20)]
    backend = RichBackend(console=_console(), theme=PLAIN_THEME)
    lines = _plain(backend, _frame(rows, cursor=10, help_message=None))
    assert lines[1] == "  ↑ 7 more"
    assert lines[-1] == "  ↓ 6 more"
    assert "› [ ] item 10" in lines


def test_build_new_option_row():
    rows = [OptionRow(2, "Kiwi", False, True, is_new=True)]
    backend = RichBackend(console=_console(), theme=PLAIN_THEME)
    assert _plain(backend, _frame(rows, help_message=None))[1] == "› + Kiwi (new)"


def test_index_prefixes():
    rows = [OptionRow(0, "a", False, False), OptionRow(9, "j", False, False)]
    simple = RichBackend(console=_console(), theme=Theme(index_prefix=IndexPrefix.SIMPLE))
    padded = RichBackend(console=_console(), theme=Theme(index_prefix=IndexPrefix.PADDED))
    frame = _frame(rows, help_message=None, option_count=12)
    assert _plain(simple, frame)[1] == "  [ ] 1) a"
    assert _plain(padded, frame)[1] == "  [ ]  1) a"
    assert _plain(padded, frame)[2] == "  [ ] 10) j"


def test_render_without_live_prints():
    console = _console()
    RichBackend(console=console, theme=PLAIN_THEME).render(_frame(ROWS))
    assert "Banana" in console.file.getvalue()


def test_finish_prints_answer():
    console = _console()
    with RichBackend(console=console, theme=PLAIN_THEME) as rich_backend:
        rich_backend.render(_frame(ROWS))
        rich_backend.finish("Pick fruit", "Banana")
    assert "? Pick fruit Banana" in console.file.getvalue()


def test_skip_and_cancel_markers():
    console = _console()
    rich_backend = RichBackend(console=console, theme=PLAIN_THEME)
    rich_backend.skip("Pick fruit")
    rich_backend.cancel("Pick fruit")
    output = console.file.getvalue()
    assert "<skipped>" in output
    assert "<canceled>" in output


def test_read_key_decodes(monkeypatch):
    monkeypatch.setattr(backend_module.readchar, "readkey", lambda: " ")
    event = RichBackend(console=_console()).read_key()
    assert event.kind is KeyKind.CHAR
    assert event.char == " "


def test_read_key_maps_keyboard_interrupt(monkeypatch):
    def _raise():
        raise KeyboardInterrupt

    monkeypatch.setattr(backend_module.readchar, "readkey", _raise)
    assert RichBackend(console=_console()).read_key().kind is KeyKind.INTERRUPT
