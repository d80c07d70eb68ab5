"""Library-wide defaults shared by every prompt."""

# Rows shown at once before the list starts paging
DEFAULT_PAGE_SIZE = 7

# j/k navigation is opt-in so those letters can be typed into the filter
DEFAULT_VIM_MODE = False

DEFAULT_KEEP_FILTER = True
DEFAULT_STARTING_CURSOR = 0

DEFAULT_HELP_MESSAGE = "↑↓ to move, space to select one, → to all, ← to none, type to filter"

# Environment variables consulted when picking the global theme
THEME_ENV_VAR = "RICH_MULTISELECT_THEME"
NO_COLOR_ENV_VAR = "NO_COLOR"
