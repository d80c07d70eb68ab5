"""Tests for validators and formatters."""

from __future__ import annotations

from rich_multiselect.options import SelectedOption
from rich_multiselect.validation import (
    Invalid,
    Valid,
    always_valid,
    default_formatter,
    max_selected,
    min_selected,
)

ANSWERS = [SelectedOption(0, "New York"), SelectedOption(3, "Seattle"), SelectedOption(7, "Vancouver")]


def test_default_formatter_joins_with_commas():
    assert default_formatter(ANSWERS[:1]) == "New York"
    assert default_formatter(ANSWERS) == "New York, Seattle, Vancouver"
    assert default_formatter([]) == ""


def test_always_valid():
    assert always_valid([]) == Valid()


def test_min_selected():
    validator = min_selected(2)
    assert validator(ANSWERS[:1]) == Invalid("Please select at least 2 options")
    assert validator(ANSWERS[:2]) == Valid()


def test_max_selected_with_message():
    validator = max_selected(1, "Only one city")
    assert validator(ANSWERS) == Invalid("Only one city")
    assert validator(ANSWERS[:1]) == Valid()
