"""Configurable themes for multi-select prompts.

The Theme dataclass holds every visual knob the Rich backend uses (colors,
icons, index prefixes). A global theme is picked from an explicit override,
the RICH_MULTISELECT_THEME environment variable, or NO_COLOR, in that order.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum

from .config import NO_COLOR_ENV_VAR, THEME_ENV_VAR


class IndexPrefix(str, Enum):
    """How option indexes are shown in front of each row."""

    NONE = "none"
    SIMPLE = "simple"
    PADDED = "padded"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Theme:
    """Visual theme for multi-select prompts.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").
    An empty color string renders the text unstyled.

    Attributes:
        name: Theme identifier, used for environment lookups.
        prompt_color: Color of the leading prompt marker.
        message_color: Color of the prompt message.
        filter_color: Color of the typed filter text.
        highlight_color: Color of the row under the cursor.
        checked_color: Color of checked checkboxes.
        muted_color: Color for help text, scroll hints and unchecked rows.
        error_color: Color of validation messages.
        answer_color: Color of the final formatted answer.
        new_option_color: Color of the pending-creation row.

        prompt_icon: Marker shown before the message.
        cursor_icon: Marker shown next to the highlighted row.
        checked_icon: Checkbox for checked rows.
        unchecked_icon: Checkbox for unchecked rows.
        error_icon: Marker shown before validation messages.
        new_option_icon: Marker for the pending-creation row.
        scroll_up_icon: Marker for rows hidden above the window.
        scroll_down_icon: Marker for rows hidden below the window.

        index_prefix: Option index display mode.
    """

    name: str = "default"

    # Colors
    prompt_color: str = "green"
    message_color: str = "bold"
    filter_color: str = ""
    highlight_color: str = "cyan"
    checked_color: str = "green"
    muted_color: str = "dim"
    error_color: str = "red"
    answer_color: str = "cyan"
    new_option_color: str = "yellow"

    # Icons
    prompt_icon: str = "?"
    cursor_icon: str = "›"
    checked_icon: str = "[x]"
    unchecked_icon: str = "[ ]"
    error_icon: str = "#"
    new_option_icon: str = "+"
    scroll_up_icon: str = "↑"
    scroll_down_icon: str = "↓"

    index_prefix: IndexPrefix = IndexPrefix.NONE

    def style(self, color: str, text: str) -> str:
        """Wrap text in Rich markup for the given color (no-op when empty)."""
        if not color:
            return text
        return f"[{color}]{text}[/{color}]"


DEFAULT_THEME = Theme()

PLAIN_THEME = Theme(
    name="plain",
    prompt_color="",
    message_color="",
    filter_color="",
    highlight_color="",
    checked_color="",
    muted_color="",
    error_color="",
    answer_color="",
    new_option_color="",
)

_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "plain": PLAIN_THEME,
    "ocean": replace(
        DEFAULT_THEME,
        name="ocean",
        prompt_color="blue",
        highlight_color="bold blue",
        checked_color="cyan",
        answer_color="blue",
    ),
    "ember": replace(
        DEFAULT_THEME,
        name="ember",
        prompt_color="color(130)",
        highlight_color="bold color(130)",
        checked_color="color(136)",
        answer_color="color(130)",
        cursor_icon="❯",
        checked_icon="●",
        unchecked_icon="○",
    ),
}

_override: Theme | None = None


def _normalize_theme_key(value: str) -> str:
    return value.strip().lower().replace("_", "-")


def register_theme(theme: Theme) -> None:
    """Make a theme selectable through the environment variable."""
    _THEMES[_normalize_theme_key(theme.name)] = theme


def set_theme(theme: Theme | None) -> None:
    """Force the global theme (None restores environment-based selection)."""
    global _override
    _override = theme


def get_theme() -> Theme:
    """Return the active global theme."""
    if _override is not None:
        return _override

    env_theme = os.environ.get(THEME_ENV_VAR)
    if env_theme:
        return _THEMES.get(_normalize_theme_key(env_theme), DEFAULT_THEME)

    if os.environ.get(NO_COLOR_ENV_VAR):
        return PLAIN_THEME

    return DEFAULT_THEME
