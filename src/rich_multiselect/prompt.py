"""Interactive multi-select prompt.

This module provides the MultiSelect configuration object and the
controller that runs the read-key, mutate, re-filter, re-render loop.

Example:
    from rich_multiselect import MultiSelect

    fruits = MultiSelect(
        "Select the fruits for your shopping list:",
        ["Banana", "Apple", "Strawberry", "Grapes"],
        defaults=[1],
    ).prompt()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, Iterable, Sequence, TypeVar

from . import config
from .backend import Backend, Frame, OptionRow, RichBackend
from .errors import CallbackError, ConfigurationError, SubmissionRejected, UserCancelled, UserSkipped
from .filtering import (
    DynamicOption,
    FilterFn,
    compute_filtered_view,
    default_filter,
    invoke_callback,
    is_sentinel,
)
from .input import FilterInput
from .keys import KeyEvent, KeyKind
from .options import OptionRegistry, SelectedOption
from .pagination import UNBOUNDED, clamp_cursor, move_down, move_up, paginate
from .validation import Formatter, Invalid, Valid, Validator, always_valid, default_formatter

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class MultiSelect(Generic[T]):
    """Prompt letting the user check any number of options from a list.

    Keyboard controls:
        - Up/Down (or Tab; j/k in vim mode): move one row, wrapping around
        - PageUp/PageDown, Home/End: jump, stopping at the ends
        - Space: toggle the highlighted option
        - Right/Left: check/uncheck every option
        - Typing: filter the list; Backspace deletes one character,
          Ctrl+W/Ctrl+X clears the filter
        - Enter: submit (runs the validator)
        - Esc: skip; Ctrl+C: cancel

    Args:
        message: Prompt message shown before the filter text.
        options: Non-empty list of values; each is displayed with str().
        defaults: Indexes of options checked from the start.
        starting_cursor: Index of the row highlighted first.
        page_size: Rows visible at once.
        vim_mode: Enable j/k navigation aliases.
        keep_filter: Keep the filter text after (de)selecting options.
        help_message: Hint shown under the list (None hides it).
        filter: Visibility predicate (filter_text, value, display_text, index).
        formatter: Turns the checked options into the final answer line.
        validator: Checked on Enter; Invalid(message) blocks submission.
        dynamic_option: Lets the user create options from the filter text.

    Raises:
        ConfigurationError: If any argument is invalid. Checked when the
            object is created, before anything is rendered.

    Example:
        ans = MultiSelect("Toppings:", ["cheese", "ham", "olives"]).raw_prompt()
        # [SelectedOption(index=0, value='cheese'), SelectedOption(index=2, value='olives')]
    """

    message: str
    options: Sequence[T]
    defaults: Iterable[int] | None = None
    starting_cursor: int = config.DEFAULT_STARTING_CURSOR
    page_size: int = config.DEFAULT_PAGE_SIZE
    vim_mode: bool = config.DEFAULT_VIM_MODE
    keep_filter: bool = config.DEFAULT_KEEP_FILTER
    help_message: str | None = config.DEFAULT_HELP_MESSAGE
    filter: FilterFn = field(default=default_filter)
    formatter: Formatter = field(default=default_formatter)
    validator: Validator = field(default=always_valid)
    dynamic_option: DynamicOption[T] | None = None

    def __post_init__(self):
        # Take ownership so later caller mutations never leak into the prompt
        object.__setattr__(self, "options", list(self.options))
        object.__setattr__(self, "defaults", sorted(set(self.defaults or ())))

        if not self.options:
            raise ConfigurationError("Available options can not be empty")
        for i in self.defaults:
            if i < 0 or i >= len(self.options):
                raise ConfigurationError(
                    f"Index {i} is out-of-bounds for length {len(self.options)} of options"
                )
        if self.starting_cursor < 0 or self.starting_cursor >= len(self.options):
            raise ConfigurationError(
                f"Starting cursor {self.starting_cursor} is out-of-bounds for length "
                f"{len(self.options)} of options"
            )
        if self.page_size < 1:
            raise ConfigurationError(f"Page size must be a positive integer, got {self.page_size}")
        for name in ("filter", "formatter", "validator"):
            if not callable(getattr(self, name)):
                raise ConfigurationError(f"{name} must be callable")
        if self.dynamic_option is not None and not isinstance(self.dynamic_option, DynamicOption):
            raise ConfigurationError("dynamic_option must be a DynamicOption")

    def raw_prompt(self, backend: Backend | None = None) -> list[SelectedOption[T]]:
        """Run the prompt and return the checked options with their indexes.

        Raises:
            UserSkipped: The user pressed Esc.
            UserCancelled: The user pressed Ctrl+C.
            CallbackError: A caller-supplied function failed.
        """
        return MultiSelectPrompt(self).run(backend or RichBackend())

    def prompt(self, backend: Backend | None = None) -> list[T]:
        """Run the prompt and return the checked values in list order."""
        return [option.value for option in self.raw_prompt(backend)]

    def raw_prompt_skippable(self, backend: Backend | None = None) -> list[SelectedOption[T]] | None:
        """Like raw_prompt(), but returns None when the user skips."""
        try:
            return self.raw_prompt(backend)
        except UserSkipped:
            return None

    def prompt_skippable(self, backend: Backend | None = None) -> list[T] | None:
        """Like prompt(), but returns None when the user skips."""
        try:
            return self.prompt(backend)
        except UserSkipped:
            return None


class MultiSelectPrompt(Generic[T]):
    """State machine behind a single MultiSelect interaction.

    Keeps three coordinate spaces apart: stable indexes in the registry,
    positions in the filtered view (the cursor) and positions in the page
    window (computed on render only).
    """

    def __init__(self, settings: MultiSelect[T]):
        self.settings = settings
        self.registry: OptionRegistry[T] = OptionRegistry(settings.options, settings.defaults)
        self.input = FilterInput()
        self.cursor = settings.starting_cursor
        self.filtered: list[int] = []
        self.error: str | None = None

    # -- filtered view -------------------------------------------------

    def refresh(self) -> None:
        """Recompute the filtered view and clamp the cursor into it."""
        self.filtered = compute_filtered_view(
            self.input.content,
            self.registry,
            self.settings.filter,
            self.settings.dynamic_option,
        )
        self.cursor = clamp_cursor(self.cursor, len(self.filtered))

    def current_index(self) -> int | None:
        """Stable index (or sentinel) under the cursor, None for an empty view."""
        if not self.filtered:
            return None
        return self.filtered[self.cursor]

    # -- mutations -----------------------------------------------------

    def _clear_filter_after_selection(self) -> None:
        if not self.settings.keep_filter:
            self.input.clear()

    def toggle_cursor_selection(self) -> bool:
        """Toggle the entry under the cursor, creating it if it is pending."""
        index = self.current_index()
        if index is None:
            return False

        if is_sentinel(index, self.registry):
            self._create_dynamic_option()
        else:
            self.registry.toggle(index)

        self._clear_filter_after_selection()
        return True

    def _create_dynamic_option(self) -> None:
        dynamic = self.settings.dynamic_option
        if dynamic is None or not dynamic.enabled:
            return
        text = self.input.content
        value = dynamic.create(text)
        index = self.registry.append(value, checked=True)
        logger.debug(f"Created option {index} from filter text {text!r}")

    def set_all(self, checked: bool) -> bool:
        """Check or uncheck every known entry, filtered out or not."""
        self.registry.set_all(checked)
        self._clear_filter_after_selection()
        return True

    def on_change(self, event: KeyEvent) -> None:
        """Apply a non-terminal key and recompute the view if needed."""
        settings = self.settings
        total = len(self.filtered)
        kind = event.kind
        dirty = False

        vim_up = settings.vim_mode and event == KeyEvent.of("k")
        vim_down = settings.vim_mode and event == KeyEvent.of("j")

        if kind is KeyKind.UP or vim_up:
            self.cursor = move_up(self.cursor, 1, total, wrap=True)
        elif kind in (KeyKind.DOWN, KeyKind.TAB) or vim_down:
            self.cursor = move_down(self.cursor, 1, total, wrap=True)
        elif kind is KeyKind.PAGE_UP:
            self.cursor = move_up(self.cursor, settings.page_size, total, wrap=False)
        elif kind is KeyKind.PAGE_DOWN:
            self.cursor = move_down(self.cursor, settings.page_size, total, wrap=False)
        elif kind is KeyKind.HOME:
            self.cursor = move_up(self.cursor, UNBOUNDED, total, wrap=False)
        elif kind is KeyKind.END:
            self.cursor = move_down(self.cursor, UNBOUNDED, total, wrap=False)
        elif event == KeyEvent.of(" "):
            dirty = self.toggle_cursor_selection()
        elif kind is KeyKind.RIGHT:
            dirty = self.set_all(True)
        elif kind is KeyKind.LEFT:
            dirty = self.set_all(False)
        else:
            dirty = self.input.handle_key(event)

        if dirty:
            self.refresh()

    # -- submission ----------------------------------------------------

    def validate_current_answer(self) -> None:
        """Run the validator on the checked entries.

        Raises:
            SubmissionRejected: The validator refused the selection.
            CallbackError: The validator itself failed.
        """
        selected = self.registry.checked_refs()
        result = invoke_callback(
            "validator", self.settings.validator, selected, passthrough=(SubmissionRejected,)
        )
        if isinstance(result, Invalid):
            raise SubmissionRejected(result.message)
        if not isinstance(result, Valid):
            raise CallbackError(
                "validator",
                TypeError(f"expected Valid or Invalid, got {type(result).__name__}"),
            )

    # -- rendering -----------------------------------------------------

    def _rows(self) -> list[OptionRow]:
        rows = []
        for position, index in enumerate(self.filtered):
            highlighted = position == self.cursor
            if is_sentinel(index, self.registry):
                rows.append(OptionRow(index, self.input.content, False, highlighted, is_new=True))
            else:
                entry = self.registry[index]
                rows.append(OptionRow(index, entry.display_text, entry.checked, highlighted))
        return rows

    def frame(self) -> Frame:
        return Frame(
            message=self.settings.message,
            filter_text=self.input.content,
            error=self.error,
            page=paginate(self.settings.page_size, self._rows(), self.cursor),
            help_message=self.settings.help_message,
            option_count=len(self.registry),
        )

    # -- main loop -----------------------------------------------------

    def run(self, backend: Backend) -> list[SelectedOption[T]]:
        """Drive the interaction until the user submits, skips or cancels."""
        message = self.settings.message

        with backend:
            self.refresh()

            while True:
                backend.render(self.frame())
                event = backend.read_key()

                if event.kind is KeyKind.INTERRUPT:
                    logger.debug(f"Prompt {message!r} cancelled")
                    backend.cancel(message)
                    raise UserCancelled()
                if event.kind is KeyKind.SKIP:
                    logger.debug(f"Prompt {message!r} skipped")
                    backend.skip(message)
                    raise UserSkipped()
                if event.kind is KeyKind.SUBMIT:
                    try:
                        self.validate_current_answer()
                    except SubmissionRejected as exc:
                        logger.debug(f"Submission rejected: {exc.message}")
                        self.error = exc.message
                        continue
                    break

                self.on_change(event)

            answer = self.registry.drain_checked()
            formatted = invoke_callback("formatter", self.settings.formatter, answer)
            logger.debug(f"Prompt {message!r} finished with {len(answer)} option(s)")
            backend.finish(message, str(formatted))

        return answer
