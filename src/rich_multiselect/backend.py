"""Render boundary between the prompt controller and the terminal.

Each loop iteration the controller pushes a Frame to a Backend and pulls
exactly one KeyEvent back. RichBackend draws frames with Rich.Live and
reads keys with readchar; tests substitute their own Backend.
"""

from __future__ import annotations

from dataclasses import dataclass

import readchar
from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from .keys import KeyEvent, KeyKind, decode_key
from .pagination import Page
from .themes import IndexPrefix, Theme, get_theme


@dataclass(frozen=True)
class OptionRow:
    """One rendered row of the page window.

    Attributes:
        index: Stable index of the entry (registry length for a new entry).
        display_text: Label of the row.
        checked: Whether the entry is selected.
        highlighted: Whether the cursor is on this row.
        is_new: True for the pending-creation row.
    """

    index: int
    display_text: str
    checked: bool
    highlighted: bool
    is_new: bool = False


@dataclass(frozen=True)
class Frame:
    """Everything needed to draw one state of the prompt."""

    message: str
    filter_text: str
    error: str | None
    page: Page[OptionRow]
    help_message: str | None
    option_count: int


class Backend:
    """Base render boundary.

    Subclasses implement render() and read_key(). The controller uses the
    backend as a context manager around the whole interaction.
    """

    def __enter__(self) -> "Backend":
        return self

    def __exit__(self, *exc_info) -> bool:
        self.close()
        return False

    def render(self, frame: Frame) -> None:
        raise NotImplementedError

    def read_key(self) -> KeyEvent:
        """Block until the next key press."""
        raise NotImplementedError

    def finish(self, message: str, answer: str) -> None:
        """Show the submitted answer."""

    def skip(self, message: str) -> None:
        """Show that the prompt was skipped."""

    def cancel(self, message: str) -> None:
        """Show that the prompt was interrupted."""

    def close(self) -> None:
        """Release terminal resources."""


class RichBackend(Backend):
    """Flicker-free backend built on Rich.Live and readchar.

    Args:
        console: Rich Console to draw on (creates one if None).
        theme: Visual theme (global theme if None).
        refresh_per_second: Live refresh rate.
    """

    def __init__(
        self,
        console: Console | None = None,
        theme: Theme | None = None,
        refresh_per_second: int = 20,
    ):
        self.console = console or Console(highlight=False)
        self.theme = theme or get_theme()
        self.refresh_per_second = refresh_per_second
        self._live: Live | None = None

    def __enter__(self) -> "RichBackend":
        if self._live is None:
            self._live = Live(
                Text(""),
                console=self.console,
                refresh_per_second=self.refresh_per_second,
                transient=True,
            )
            self._live.start()
        return self

    def close(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def _prompt_prefix(self, message: str) -> str:
        theme = self.theme
        icon = theme.style(theme.prompt_color, escape(theme.prompt_icon))
        return f"{icon} {theme.style(theme.message_color, escape(message))}"

    def _index_prefix(self, row: OptionRow, option_count: int) -> str:
        mode = self.theme.index_prefix
        if mode is IndexPrefix.NONE or row.is_new:
            return ""
        if mode is IndexPrefix.SIMPLE:
            return f"{row.index + 1}) "
        width = len(str(option_count))
        return f"{row.index + 1:>{width}}) "

    def _render_row(self, row: OptionRow, option_count: int) -> str:
        theme = self.theme
        cursor = theme.style(theme.highlight_color, escape(theme.cursor_icon)) if row.highlighted else " "

        if row.is_new:
            label = escape(f"{theme.new_option_icon} {row.display_text} (new)")
            return f"{cursor} {theme.style(theme.new_option_color, label)}"

        if row.checked:
            checkbox = theme.style(theme.checked_color, escape(theme.checked_icon))
        else:
            checkbox = escape(theme.unchecked_icon)

        label = escape(self._index_prefix(row, option_count) + row.display_text)
        if row.highlighted:
            label = theme.style(theme.highlight_color, label)
        return f"{cursor} {checkbox} {label}"

    def build(self, frame: Frame) -> str:
        """Build the Rich markup for a frame."""
        theme = self.theme
        lines: list[str] = []

        if frame.error:
            error = escape(f"{theme.error_icon} {frame.error}")
            lines.append(theme.style(theme.error_color, error))

        prompt = self._prompt_prefix(frame.message)
        if frame.filter_text:
            prompt += " " + theme.style(theme.filter_color, escape(frame.filter_text))
        lines.append(prompt)

        page = frame.page
        if page.is_empty:
            lines.append(theme.style(theme.muted_color, "  (no matches)"))

        if page.hidden_above > 0:
            lines.append(
                theme.style(theme.muted_color, f"  {theme.scroll_up_icon} {page.hidden_above} more")
            )

        for row in page.items:
            lines.append(self._render_row(row, frame.option_count))

        if page.hidden_below > 0:
            lines.append(
                theme.style(theme.muted_color, f"  {theme.scroll_down_icon} {page.hidden_below} more")
            )

        if frame.help_message:
            lines.append(theme.style(theme.muted_color, escape(f"[{frame.help_message}]")))

        return "\n".join(lines)

    def render(self, frame: Frame) -> None:
        markup = Text.from_markup(self.build(frame))
        if self._live is None:
            self.console.print(markup)
        else:
            self._live.update(markup, refresh=True)

    def read_key(self) -> KeyEvent:
        try:
            key = readchar.readkey()
        except (KeyboardInterrupt, EOFError):
            return KeyEvent(KeyKind.INTERRUPT)
        return decode_key(key)

    def _print_outcome(self, message: str, outcome: str) -> None:
        self.close()
        self.console.print(f"{self._prompt_prefix(message)} {outcome}")

    def finish(self, message: str, answer: str) -> None:
        self._print_outcome(message, self.theme.style(self.theme.answer_color, escape(answer)))

    def skip(self, message: str) -> None:
        self._print_outcome(message, self.theme.style(self.theme.muted_color, escape("<skipped>")))

    def cancel(self, message: str) -> None:
        self._print_outcome(message, self.theme.style(self.theme.muted_color, escape("<canceled>")))
