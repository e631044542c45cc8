"""Byte-level matcher for the picker's control keys.

Input arrives one raw byte at a time. The matcher recognizes a fixed
alphabet taken from readchar's POSIX key table:

    ESC [ A   -> Key.UP
    ESC [ B   -> Key.DOWN
    LF, CR    -> Key.ENTER

Everything else is dropped and the matcher returns to IDLE.
"""

from enum import Enum
from typing import Optional

from readchar import key as keys


def _byte(sequence: str, index: int = 0) -> int:
    return ord(sequence[index])


ESCAPE = _byte(keys.ESC)
LEFT_BRACKET = _byte(keys.UP, 1)
LINE_FEED = _byte(keys.LF)
CARRIAGE_RETURN = _byte(keys.CR)


class Key(Enum):
    """Keys the picker reacts to."""

    UP = keys.UP
    DOWN = keys.DOWN
    ENTER = keys.ENTER


# Final byte of ESC [ x -> key
_DIRECTIONS: dict[int, Key] = {
    _byte(keys.UP, 2): Key.UP,
    _byte(keys.DOWN, 2): Key.DOWN,
}


class MatcherState(Enum):
    IDLE = "idle"
    SAW_ESCAPE = "saw_escape"
    SAW_BRACKET = "saw_bracket"


class KeyMatcher:
    """Small state machine turning raw bytes into Key events.

    A byte following a lone ESC is consumed as part of that sequence,
    so ESC followed by Enter does not confirm.
    """

    def __init__(self):
        self.state = MatcherState.IDLE

    def reset(self) -> None:
        self.state = MatcherState.IDLE

    def feed(self, byte: int) -> Optional[Key]:
        """Feed one byte.

        Returns:
            The completed Key, or None while a sequence is pending or
            after an unrecognized byte
        """
        if self.state is MatcherState.IDLE:
            if byte == ESCAPE:
                self.state = MatcherState.SAW_ESCAPE
            elif byte in (LINE_FEED, CARRIAGE_RETURN):
                return Key.ENTER
            return None

        if self.state is MatcherState.SAW_ESCAPE:
            if byte == LEFT_BRACKET:
                self.state = MatcherState.SAW_BRACKET
            else:
                self.state = MatcherState.IDLE
            return None

        # SAW_BRACKET: third byte decides, whatever it is
        self.state = MatcherState.IDLE
        return _DIRECTIONS.get(byte)

    @property
    def pending(self) -> bool:
        """True while in the middle of an escape sequence."""
        return self.state is not MatcherState.IDLE
