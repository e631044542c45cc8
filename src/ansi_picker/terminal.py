"""Terminal mode controller.

Puts standard input into non-canonical, no-echo mode for one selection
session and guarantees the original attributes come back, whether the
session returns, raises, or is interrupted with Ctrl+C.
"""

import os
import signal
import sys
import termios
from types import FrameType
from typing import Any, Optional

from ansi_picker.utils.debug import debug_terminal


class TerminalModeController:
    """Owns the saved terminal attributes for a single session.

    Usable as a context manager:

        with TerminalModeController(fd):
            ...  # raw input here

    The snapshot lifecycle is unset -> set on enter_raw_mode() -> cleared
    on restore_mode(). Not reentrant across threads.
    """

    def __init__(self, fd: Optional[int] = None):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved_attributes: Optional[list[Any]] = None
        self._previous_handler: Any = None

    @property
    def saved_attributes(self) -> Optional[list[Any]]:
        """Attributes captured on entry, or None outside a session."""
        return self._saved_attributes

    @property
    def is_raw(self) -> bool:
        return self._saved_attributes is not None

    def enter_raw_mode(self) -> bool:
        """Disable echo and line buffering, install the interrupt handler.

        Keeps an existing snapshot untouched when called twice, so the
        true original is what gets restored.

        Returns:
            True if the terminal is in raw mode after the call, False if
            the descriptor is not a terminal
        """
        if self._saved_attributes is not None:
            debug_terminal("raw mode already active", fd=self.fd)
            return True

        try:
            attributes = termios.tcgetattr(self.fd)
        except termios.error as e:
            # Not a tty (pipe, file, /dev/null); nothing to save or restore
            debug_terminal("not a terminal, raw mode skipped", fd=self.fd, error=e)
            return False

        self._saved_attributes = attributes

        raw = [list(a) if isinstance(a, list) else a for a in attributes]
        raw[3] &= ~(termios.ECHO | termios.ICANON)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSANOW, raw)

        try:
            self._previous_handler = signal.signal(
                signal.SIGINT, self._handle_interrupt
            )
        except ValueError:
            # signal.signal() only works in the main thread
            debug_terminal("interrupt handler not installed (not main thread)")
        debug_terminal("raw mode entered", fd=self.fd)
        return True

    def restore_mode(self) -> None:
        """Apply the saved attributes back. No-op without a snapshot."""
        if self._saved_attributes is None:
            return

        attributes, self._saved_attributes = self._saved_attributes, None
        termios.tcsetattr(self.fd, termios.TCSANOW, attributes)

        if self._previous_handler is not None:
            signal.signal(signal.SIGINT, self._previous_handler)
            self._previous_handler = None
        debug_terminal("terminal restored", fd=self.fd)

    def _handle_interrupt(self, signum: int, frame: Optional[FrameType]) -> None:
        """Restore the terminal and terminate right away. Never returns."""
        if self._saved_attributes is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._saved_attributes)
            self._saved_attributes = None
        debug_terminal("interrupted", signum=signum)
        try:
            sys.stdout.flush()
        except (OSError, ValueError):
            pass
        os._exit(128 + signum)

    def __enter__(self) -> "TerminalModeController":
        self.enter_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore_mode()
