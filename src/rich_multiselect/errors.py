"""Error taxonomy for multi-select prompts."""

from __future__ import annotations


class MultiSelectError(RuntimeError):
    """Base error for multi-select prompt operations."""


class ConfigurationError(MultiSelectError):
    """Raised when a prompt is built with invalid arguments.

    Always raised before anything is rendered.
    """


class CallbackError(MultiSelectError):
    """Raised when a caller-supplied function fails during the prompt."""

    def __init__(self, callback: str, error: BaseException):
        self.callback = callback
        self.error = error
        super().__init__(f"{callback} callback failed: {error}")


class UserCancelled(MultiSelectError):
    """Raised when the user presses the interrupt key (Ctrl+C)."""

    def __init__(self):
        super().__init__("Operation was interrupted by the user")


class UserSkipped(MultiSelectError):
    """Raised when the user skips the prompt with Escape."""

    def __init__(self):
        super().__init__("Operation was skipped by the user")


class SubmissionRejected(MultiSelectError):
    """Raised when the validator refuses the current selection.

    The prompt catches this, shows the message and keeps running.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
