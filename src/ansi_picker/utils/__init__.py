"""Utilities for ansi-picker."""

from ansi_picker.utils.colors import Color, sgr
from ansi_picker.utils.exceptions import (
    ConfigurationError,
    CursorPositionUnavailable,
    EmptyOptionsError,
    PickerError,
)

__all__ = [
    "Color",
    "sgr",
    "ConfigurationError",
    "CursorPositionUnavailable",
    "EmptyOptionsError",
    "PickerError",
]
