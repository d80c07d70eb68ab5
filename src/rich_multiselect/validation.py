"""Submit-time validation and answer formatting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union

from .options import SelectedOption


@dataclass(frozen=True)
class Valid:
    """The current selection may be submitted."""


@dataclass(frozen=True)
class Invalid:
    """The current selection is refused.

    Attributes:
        message: Shown to the user until the next submit attempt.
    """

    message: str


Validation = Union[Valid, Invalid]

Validator = Callable[[Sequence[SelectedOption[Any]]], Validation]
Formatter = Callable[[Sequence[SelectedOption[Any]]], str]


def always_valid(selected: Sequence[SelectedOption[Any]]) -> Validation:
    return Valid()


def default_formatter(selected: Sequence[SelectedOption[Any]]) -> str:
    """Join the display text of each checked option with commas."""
    return ", ".join(str(option) for option in selected)


def min_selected(count: int, message: str | None = None) -> Validator:
    """Build a validator requiring at least `count` checked options."""
    text = message or f"Please select at least {count} option{'s' if count != 1 else ''}"

    def validate(selected: Sequence[SelectedOption[Any]]) -> Validation:
        if len(selected) < count:
            return Invalid(text)
        return Valid()

    return validate


def max_selected(count: int, message: str | None = None) -> Validator:
    """Build a validator allowing at most `count` checked options."""
    text = message or f"Please select at most {count} option{'s' if count != 1 else ''}"

    def validate(selected: Sequence[SelectedOption[Any]]) -> Validation:
        if len(selected) > count:
            return Invalid(text)
        return Valid()

    return validate
