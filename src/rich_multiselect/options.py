"""Option entries and the registry that owns them.

Every entry keeps the index it was given when it entered the registry.
Indexes are never reused or renumbered, so they double as the permanent
identity used to order the final answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, TypeVar

from .errors import ConfigurationError, MultiSelectError

T = TypeVar("T")


@dataclass
class OptionEntry(Generic[T]):
    """A candidate the user can check.

    Attributes:
        index: Stable index, assigned once on entry into the registry.
        display_text: Text shown to the user and matched by filters.
        value: Caller-supplied value returned when the entry is checked.
        checked: Whether the entry is currently selected.
    """

    index: int
    display_text: str
    value: T
    checked: bool = False


@dataclass(frozen=True)
class SelectedOption(Generic[T]):
    """A checked option in the final answer.

    Attributes:
        index: Index relative to the original (full) option list.
        value: Value of the selected option.
    """

    index: int
    value: T

    def __str__(self) -> str:
        return str(self.value)


class OptionRegistry(Generic[T]):
    """Owns the full list of option entries and their checked state."""

    def __init__(self, options: Iterable[T], defaults: Iterable[int] | None = None):
        values = list(options)
        if not values:
            raise ConfigurationError("Available options can not be empty")

        checked = set(defaults or ())
        for i in sorted(checked):
            if i < 0 or i >= len(values):
                raise ConfigurationError(
                    f"Index {i} is out-of-bounds for length {len(values)} of options"
                )

        self._entries: list[OptionEntry[T]] = [
            OptionEntry(index=i, display_text=str(value), value=value, checked=i in checked)
            for i, value in enumerate(values)
        ]
        self._drained = False

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OptionEntry[T]]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> OptionEntry[T]:
        return self._entries[index]

    @property
    def entries(self) -> tuple[OptionEntry[T], ...]:
        """Read-only snapshot of every known entry, in index order."""
        return tuple(self._entries)

    def _ensure_open(self) -> None:
        if self._drained:
            raise MultiSelectError("Option registry was already drained")

    def toggle(self, index: int) -> bool:
        """Flip the checked state of an entry. Returns the new state."""
        self._ensure_open()
        entry = self._entries[index]
        entry.checked = not entry.checked
        return entry.checked

    def set_all(self, checked: bool) -> None:
        """Check or uncheck every entry currently in the registry."""
        self._ensure_open()
        for entry in self._entries:
            entry.checked = checked

    def append(self, value: T, checked: bool = True) -> int:
        """Add a new entry at the end and return its stable index."""
        self._ensure_open()
        index = len(self._entries)
        self._entries.append(
            OptionEntry(index=index, display_text=str(value), value=value, checked=checked)
        )
        return index

    def checked_refs(self) -> list[SelectedOption[Any]]:
        """Checked entries as SelectedOption views, in index order."""
        return [SelectedOption(e.index, e.value) for e in self._entries if e.checked]

    def checked_count(self) -> int:
        return sum(1 for e in self._entries if e.checked)

    def drain_checked(self) -> list[SelectedOption[T]]:
        """Hand the checked values back to the caller and close the registry.

        Results are ordered by stable index, independent of the order in
        which selections were made.
        """
        self._ensure_open()
        self._drained = True
        entries, self._entries = self._entries, []
        return [SelectedOption(e.index, e.value) for e in entries if e.checked]
