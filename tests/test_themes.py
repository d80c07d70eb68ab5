"""Tests for theme selection."""

from __future__ import annotations

from dataclasses import replace

from rich_multiselect import themes
from rich_multiselect.themes import DEFAULT_THEME, PLAIN_THEME, Theme


def test_default_theme_without_env():
    assert themes.get_theme() is DEFAULT_THEME


def test_no_color_selects_plain_theme(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert themes.get_theme() is PLAIN_THEME


def test_env_theme_wins_over_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("RICH_MULTISELECT_THEME", "Ocean")
    assert themes.get_theme().name == "ocean"


def test_unknown_env_theme_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("RICH_MULTISELECT_THEME", "nope")
    assert themes.get_theme() is DEFAULT_THEME


def test_set_theme_overrides_env(monkeypatch):
    monkeypatch.setenv("RICH_MULTISELECT_THEME", "ember")
    custom = Theme(name="custom", cursor_icon=">")
    themes.set_theme(custom)
    assert themes.get_theme() is custom
    themes.set_theme(None)
    assert themes.get_theme().name == "ember"


def test_register_theme(monkeypatch):
    themes.register_theme(replace(DEFAULT_THEME, name="High_Contrast", highlight_color="bold white"))
    monkeypatch.setenv("RICH_MULTISELECT_THEME", "high-contrast")
    assert themes.get_theme().highlight_color == "bold white"


def test_style_skips_empty_color():
    assert PLAIN_THEME.style("", "text") == "text"
    assert DEFAULT_THEME.style("red", "text") == "[red]text[/red]"
