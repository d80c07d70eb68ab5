"""Rich.Live-based interactive multi-select prompt.

Lets a terminal user filter, navigate and (de)select entries from a list,
optionally creating new entries from the filter text, then submit a
validated subset.

Example:
    from rich_multiselect import Invalid, MultiSelect, Valid

    def at_least_two(selected):
        return Valid() if len(selected) >= 2 else Invalid("Pick at least two")

    toppings = MultiSelect(
        "Toppings:",
        ["cheese", "ham", "olives", "peppers"],
        validator=at_least_two,
    ).prompt()  # Returns: ["cheese", "olives"]
"""

from .backend import Backend, Frame, OptionRow, RichBackend
from .errors import (
    CallbackError,
    ConfigurationError,
    MultiSelectError,
    SubmissionRejected,
    UserCancelled,
    UserSkipped,
)
from .filtering import DynamicOption, default_filter
from .keys import KeyEvent, KeyKind, decode_key
from .options import OptionEntry, SelectedOption
from .prompt import MultiSelect
from .themes import DEFAULT_THEME, IndexPrefix, Theme, get_theme, register_theme, set_theme
from .validation import (
    Invalid,
    Valid,
    Validation,
    default_formatter,
    max_selected,
    min_selected,
)

__version__ = "0.3.0"

__all__ = [
    # Main classes
    "MultiSelect",
    "SelectedOption",
    "OptionEntry",
    "DynamicOption",
    # Validation
    "Valid",
    "Invalid",
    "Validation",
    "min_selected",
    "max_selected",
    "default_filter",
    "default_formatter",
    # Errors
    "MultiSelectError",
    "ConfigurationError",
    "CallbackError",
    "UserCancelled",
    "UserSkipped",
    "SubmissionRejected",
    # Rendering
    "Backend",
    "RichBackend",
    "Frame",
    "OptionRow",
    "KeyEvent",
    "KeyKind",
    "decode_key",
    # Theming
    "Theme",
    "IndexPrefix",
    "DEFAULT_THEME",
    "get_theme",
    "set_theme",
    "register_theme",
]
