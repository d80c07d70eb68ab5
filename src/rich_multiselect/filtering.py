"""Filtered view computation and dynamic option creation.

The filtered view is a list of stable indexes visible under the current
filter text. When dynamic options are enabled it may end with a sentinel
equal to the registry length, meaning "an entry will be created here if
the user selects this row".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Sequence, TypeVar

from .errors import CallbackError, ConfigurationError
from .options import OptionEntry, OptionRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (filter_text, value, display_text, stable_index) -> visible
FilterFn = Callable[[str, Any, str, int], bool]
# (filter_text, entries) -> offer a new entry
ConditionFn = Callable[[str, Sequence[OptionEntry[Any]]], bool]
# filter_text -> value of the new entry
CreatorFn = Callable[[str], Any]


def default_filter(filter_text: str, value: Any, display_text: str, index: int) -> bool:
    """Case-insensitive substring match on the display text."""
    return filter_text.lower() in display_text.lower()


def invoke_callback(
    name: str,
    fn: Callable[..., Any],
    *args: Any,
    passthrough: tuple[type[Exception], ...] = (),
) -> Any:
    """Call a caller-supplied function, wrapping failures in CallbackError.

    Exceptions listed in passthrough are re-raised unchanged.
    """
    try:
        return fn(*args)
    except CallbackError:
        raise
    except passthrough:
        raise
    except Exception as exc:
        logger.warning(f"{name} callback raised {type(exc).__name__}: {exc}")
        raise CallbackError(name, exc) from exc


@dataclass(frozen=True)
class DynamicOption(Generic[T]):
    """Lets the user create entries that are not in the option list.

    Attributes:
        condition: Decides whether to offer a new entry for the filter text.
        creator: Builds the value of the new entry from the filter text.
            Called once, when the user selects the offered row.
        enabled: Switch to keep the hooks configured but inactive.
    """

    condition: ConditionFn
    creator: CreatorFn
    enabled: bool = field(default=True)

    def __post_init__(self):
        if not callable(self.condition) or not callable(self.creator):
            raise ConfigurationError("Dynamic option condition and creator must be callable")

    @staticmethod
    def absent_from(filter_text: str, entries: Sequence[OptionEntry[Any]]) -> bool:
        """Offer a new entry when the text is not already an option."""
        if not filter_text:
            return False
        return not any(e.display_text == filter_text for e in entries)

    def create(self, filter_text: str) -> T:
        return invoke_callback("creator", self.creator, filter_text)


def compute_filtered_view(
    filter_text: str,
    registry: OptionRegistry[Any],
    predicate: FilterFn = default_filter,
    dynamic: DynamicOption[Any] | None = None,
) -> list[int]:
    """Return the stable indexes visible for the filter text.

    Pure with respect to its inputs: the same text and registry state always
    give the same ordered list.
    """
    if filter_text:
        visible = [
            entry.index
            for entry in registry
            if invoke_callback(
                "filter", predicate, filter_text, entry.value, entry.display_text, entry.index
            )
        ]
    else:
        visible = [entry.index for entry in registry]

    if dynamic is not None and dynamic.enabled:
        offer = invoke_callback("condition", dynamic.condition, filter_text, registry.entries)
        if offer and filter_text:
            if not any(registry[i].display_text == filter_text for i in visible):
                visible.append(len(registry))

    return visible


def is_sentinel(index: int, registry: OptionRegistry[Any]) -> bool:
    """True when a view slot is the pending-creation placeholder."""
    return index >= len(registry)
