"""ansi-picker - Arrow-key option picker for ANSI terminals."""

from importlib.metadata import version

__version__ = version("ansi-picker")

from ansi_picker.picker import Picker, PickerConfiguration, choose
from ansi_picker.utils.colors import Color
from ansi_picker.utils.exceptions import (
    CursorPositionUnavailable,
    EmptyOptionsError,
    PickerError,
)

__all__ = [
    "choose",
    "Picker",
    "PickerConfiguration",
    "Color",
    "PickerError",
    "CursorPositionUnavailable",
    "EmptyOptionsError",
]
