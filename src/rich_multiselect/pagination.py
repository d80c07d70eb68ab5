"""Cursor movement and page windows over the filtered view.

Positions here are offsets into the filtered view, never stable indexes.
Callers translate a position to a stable index before touching the registry.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

# Block moves to the very start or end
UNBOUNDED = sys.maxsize


def clamp_cursor(cursor: int, total: int) -> int:
    """Pull a cursor back inside a view of the given length (0 when empty)."""
    if total <= 0:
        return 0
    return max(0, min(cursor, total - 1))


def move_up(cursor: int, qty: int, total: int, wrap: bool) -> int:
    """Move the cursor towards the start of the view.

    Wrapping moves come back in from the end; block moves stop at 0.
    """
    if total <= 0:
        return 0
    if wrap:
        return (cursor - qty) % total
    return max(0, cursor - qty)


def move_down(cursor: int, qty: int, total: int, wrap: bool) -> int:
    """Move the cursor towards the end of the view.

    Wrapping moves come back in from the start; block moves stop at the
    last row.
    """
    if total <= 0:
        return 0
    if wrap:
        return (cursor + qty) % total
    return min(total - 1, cursor + qty)


@dataclass(frozen=True)
class Page(Generic[T]):
    """The slice of the view that is actually rendered.

    Attributes:
        items: Rows inside the window.
        start: Position of the first row within the full view.
        cursor: Cursor position relative to start (0 when empty).
        total: Length of the full view.
    """

    items: Sequence[T]
    start: int
    cursor: int
    total: int

    @property
    def hidden_above(self) -> int:
        return self.start

    @property
    def hidden_below(self) -> int:
        return self.total - self.start - len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items


def paginate(page_size: int, items: Sequence[T], cursor: int) -> Page[T]:
    """Cut a window of at most page_size rows that contains the cursor.

    The window is kept centered on the cursor where possible and is clamped
    so it never starts before the first row or runs past the last one.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    total = len(items)
    if total == 0:
        return Page(items=[], start=0, cursor=0, total=0)

    cursor = clamp_cursor(cursor, total)
    size = min(page_size, total)
    start = cursor - page_size // 2
    start = max(0, min(start, total - size))
    window = list(items[start : start + size])
    return Page(items=window, start=start, cursor=cursor - start, total=total)
