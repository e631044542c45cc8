"""Custom exceptions for ansi-picker.

This module defines a hierarchy of exceptions for different error types:
- PickerError: Base exception for all ansi-picker errors
- CursorPositionUnavailable: Terminal did not report a parsable cursor row
- EmptyOptionsError: Nothing to choose from
- ConfigurationError: Configuration related errors
"""

from typing import Optional


class PickerError(Exception):
    """Base exception for all ansi-picker errors.

    All picker-specific exceptions inherit from this class, allowing
    callers to catch all picker errors with a single except clause.
    """

    pass


class CursorPositionUnavailable(PickerError):
    """Terminal did not answer the cursor position request.

    Raised when the reply to ``ESC[6n`` is absent or malformed, such as:
    - Non-ANSI terminals
    - Redirected or closed standard input

    Attributes:
        response: Raw reply read from the terminal, if any
    """

    def __init__(self, message: str, response: Optional[str] = None):
        super().__init__(message)
        self.response = response


class EmptyOptionsError(PickerError, ValueError):
    """Raised when a selection is requested over zero options."""

    pass


class ConfigurationError(PickerError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unknown color names
    """

    pass
