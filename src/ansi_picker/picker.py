"""Interactive single-choice picker for ANSI terminals.

Prints the options in place, tracks where the block starts with a
cursor position request and redraws only that block as the user moves
the highlight with the arrow keys. Enter (or Return) confirms.
"""

import os
import re
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO

from ansi_picker.keys import Key, KeyMatcher
from ansi_picker.terminal import TerminalModeController
from ansi_picker.utils.colors import Color
from ansi_picker.utils.constants import (
    CURSOR_POSITION_REQUEST,
    CURSOR_POSITION_TERMINATOR,
    DEFAULT_ITEM_INDICATOR,
    DEFAULT_SELECTION_INDICATOR,
    MAX_CURSOR_RESPONSE_LENGTH,
    RESET,
    cursor_move,
)
from ansi_picker.utils.debug import debug_cursor, debug_keys, debug_picker
from ansi_picker.utils.exceptions import CursorPositionUnavailable, EmptyOptionsError

# ESC[row;colR
_CURSOR_REPORT = re.compile(r"\x1b\[(\d+);(\d+)R")


@dataclass(frozen=True)
class PickerConfiguration:
    """How options are drawn.

    Colors are escape sequences, usually one of the Color presets.
    """

    item_indicator: str = DEFAULT_ITEM_INDICATOR
    item_color: str = Color.DEFAULT
    selection_indicator: str = DEFAULT_SELECTION_INDICATOR
    selection_color: str = Color.GREEN


def parse_cursor_row(response: str) -> Optional[int]:
    """Extract the row from the last cursor position report in response."""
    matches = _CURSOR_REPORT.findall(response)
    if not matches:
        return None
    row, _ = matches[-1]
    return int(row)


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # Closed stream
        return False


class Picker:
    """Draws options and runs the arrow-key selection loop.

    One Picker may be reused; all session state is reset at the start
    of each choose() call.
    """

    def __init__(
        self,
        config: Optional[PickerConfiguration] = None,
        input_fd: Optional[int] = None,
        output: Optional[TextIO] = None,
    ):
        self.config = config or PickerConfiguration()
        self._input_fd = input_fd
        self._output = output
        self._matcher = KeyMatcher()
        self.current_selection = 0
        self.anchor_line = 0

    @property
    def input_fd(self) -> int:
        return sys.stdin.fileno() if self._input_fd is None else self._input_fd

    @property
    def output(self) -> TextIO:
        return sys.stdout if self._output is None else self._output

    def choose(self, options: Sequence[str]) -> str:
        """Show options and block until one is confirmed.

        Args:
            options: Non-empty sequence of display strings

        Returns:
            The confirmed option

        Raises:
            EmptyOptionsError: If options is empty
            CursorPositionUnavailable: If the terminal does not report
                the cursor position
            EOFError: If standard input closes before a confirmation
        """
        options = list(options)
        if not options:
            raise EmptyOptionsError("cannot choose from an empty list of options")

        self.current_selection = 0
        self.anchor_line = 0
        self._matcher.reset()
        debug_picker("session started", count=len(options))

        with TerminalModeController(self.input_fd):
            self.render_initial(options)
            self.anchor_line = self.locate_anchor(len(options))
            self.redraw(options)

            while True:
                key = self.read_control_input()
                if key is Key.ENTER:
                    break
                if self.move(key, len(options)):
                    self.redraw(options)

        choice = options[self.current_selection]
        debug_picker("session finished", index=self.current_selection, choice=choice)
        return choice

    def move(self, key: Key, count: int) -> bool:
        """Apply a navigation key. Returns True if the selection changed."""
        previous = self.current_selection
        if key is Key.UP:
            self.current_selection = max(0, self.current_selection - 1)
        elif key is Key.DOWN:
            self.current_selection = min(count - 1, self.current_selection + 1)
        return self.current_selection != previous

    def format_option(self, option: str, index: int) -> str:
        """Render one option line, including the trailing color reset."""
        if index == self.current_selection:
            color = self.config.selection_color
            indicator = self.config.selection_indicator
        else:
            color = self.config.item_color
            indicator = self.config.item_indicator
        return f"{color}{indicator} {option}{RESET}\n"

    def render_initial(self, options: Sequence[str]) -> None:
        """Print every option once, below the current cursor position."""
        for index, option in enumerate(options):
            self.output.write(self.format_option(option, index))
        self.output.flush()

    def redraw(self, options: Sequence[str]) -> None:
        """Reprint the option block in place, starting at the anchor row."""
        for index, option in enumerate(options):
            self.output.write(cursor_move(self.anchor_line + index))
            self.output.write(self.format_option(option, index))
        self.output.flush()

    def locate_anchor(self, count: int) -> int:
        """Ask the terminal where the cursor is and derive the block's first row.

        Raises:
            CursorPositionUnavailable: If no parsable report comes back, or
                if input is a terminal but output is not (the terminal
                would never see the request)
        """
        if os.isatty(self.input_fd) and not _is_tty(self.output):
            debug_cursor("output is not a terminal", input_fd=self.input_fd)
            raise CursorPositionUnavailable(
                "cannot query the cursor position: output is not a terminal"
            )

        self.output.flush()
        self.output.write(CURSOR_POSITION_REQUEST)
        self.output.flush()

        response = self._read_cursor_response()
        row = parse_cursor_row(response)
        if row is None:
            debug_cursor("unparsable cursor report", response=response)
            raise CursorPositionUnavailable(
                "terminal returned an unreadable cursor position", response
            )

        anchor = row - count
        debug_cursor("cursor located", row=row, anchor=anchor)
        return anchor

    def _read_cursor_response(self) -> str:
        """Read bytes up to and including the report terminator."""
        response = ""
        while not response.endswith(CURSOR_POSITION_TERMINATOR):
            data = os.read(self.input_fd, 1)
            if not data:
                raise CursorPositionUnavailable(
                    "input closed before the terminal reported the cursor position",
                    response,
                )
            response += data.decode("latin-1")
            if len(response) > MAX_CURSOR_RESPONSE_LENGTH:
                raise CursorPositionUnavailable(
                    "terminal did not answer the cursor position request", response
                )
        return response

    def read_control_input(self) -> Key:
        """Block until a recognized key arrives, dropping everything else.

        Raises:
            EOFError: If standard input closes
        """
        while True:
            data = os.read(self.input_fd, 1)
            if not data:
                raise EOFError("input closed before a choice was made")
            key = self._matcher.feed(data[0])
            if key is not None:
                debug_keys("key", key=key.name)
                return key
            if not self._matcher.pending:
                debug_keys("ignored input", byte=data)


def choose(options: Sequence[str], config: Optional[PickerConfiguration] = None) -> str:
    """Present options in the terminal and return the one the user picks.

    Blocks until the user confirms with Enter. Uses the default indicators
    and colors unless a configuration is given.

    Example:

        selection = choose(["Apples", "Bananas", "Oranges", "Grapefruit"])
        print("Selection:", selection)
    """
    return Picker(config).choose(options)
