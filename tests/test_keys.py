"""Tests for the control-key matcher."""

import pytest
from readchar import key as keys

from ansi_picker.keys import Key, KeyMatcher, MatcherState


def feed_all(matcher: KeyMatcher, data: bytes) -> list[Key]:
    """Feed every byte and collect the keys produced."""
    produced = []
    for byte in data:
        result = matcher.feed(byte)
        if result is not None:
            produced.append(result)
    return produced


def test_arrow_keys_recognized():
    """ESC [ A / ESC [ B produce UP / DOWN."""
    matcher = KeyMatcher()
    assert feed_all(matcher, keys.UP.encode()) == [Key.UP]
    assert feed_all(matcher, keys.DOWN.encode()) == [Key.DOWN]


@pytest.mark.parametrize("byte", [b"\n", b"\r"])
def test_line_feed_and_carriage_return_confirm(byte):
    """Both LF and CR are Enter."""
    assert feed_all(KeyMatcher(), byte) == [Key.ENTER]


def test_escape_sequence_is_pending_until_complete():
    """Matcher walks IDLE -> SAW_ESCAPE -> SAW_BRACKET -> IDLE."""
    matcher = KeyMatcher()

    assert matcher.feed(0x1B) is None
    assert matcher.state is MatcherState.SAW_ESCAPE
    assert matcher.pending

    assert matcher.feed(ord("[")) is None
    assert matcher.state is MatcherState.SAW_BRACKET

    assert matcher.feed(ord("B")) is Key.DOWN
    assert matcher.state is MatcherState.IDLE
    assert not matcher.pending


@pytest.mark.parametrize(
    "sequence",
    [keys.LEFT, keys.RIGHT, keys.HOME, keys.END, keys.SHIFT_TAB, "\x1b[x"],
    ids=["left", "right", "home", "end", "shift-tab", "bracket-x"],
)
def test_unrecognized_three_byte_sequences_ignored(sequence):
    """Other ESC [ x sequences produce nothing and reset the matcher."""
    matcher = KeyMatcher()
    assert feed_all(matcher, sequence.encode()) == []
    assert matcher.state is MatcherState.IDLE


def test_lone_escape_swallows_next_byte():
    """The byte after a lone ESC belongs to that sequence, even Enter."""
    matcher = KeyMatcher()
    assert feed_all(matcher, b"\x1b\n") == []
    assert matcher.state is MatcherState.IDLE

    # Second ESC is consumed, so the "[A" that follows is just noise
    assert feed_all(matcher, b"\x1b\x1b[A") == []


def test_function_key_prefix_ignored():
    """ESC O P (F1) is not an arrow key."""
    matcher = KeyMatcher()
    assert feed_all(matcher, keys.F1.encode()) == []
    assert feed_all(matcher, keys.DOWN.encode()) == [Key.DOWN]


def test_every_idle_byte_outside_alphabet_ignored():
    """From IDLE, only ESC, LF and CR do anything."""
    for byte in range(256):
        matcher = KeyMatcher()
        result = matcher.feed(byte)
        if byte in (0x0A, 0x0D):
            assert result is Key.ENTER
        elif byte == 0x1B:
            assert result is None
            assert matcher.pending
        else:
            assert result is None, f"byte {byte:#04x}"
            assert not matcher.pending


def test_every_final_byte_other_than_a_and_b_ignored():
    """After ESC [, only A and B are directions."""
    for byte in range(256):
        matcher = KeyMatcher()
        matcher.feed(0x1B)
        matcher.feed(ord("["))
        result = matcher.feed(byte)
        expected = {ord("A"): Key.UP, ord("B"): Key.DOWN}.get(byte)
        assert result is expected
        assert matcher.state is MatcherState.IDLE


def test_stray_bytes_between_keys():
    """Noise between keys does not disturb recognition."""
    matcher = KeyMatcher()
    data = b"x" + keys.DOWN.encode() + b"qq" + keys.UP.encode() + b"\r"
    assert feed_all(matcher, data) == [Key.DOWN, Key.UP, Key.ENTER]


def test_reset_clears_pending_sequence():
    """reset() drops a half-read sequence."""
    matcher = KeyMatcher()
    matcher.feed(0x1B)
    matcher.reset()
    assert matcher.state is MatcherState.IDLE
    assert matcher.feed(ord("\r")) is Key.ENTER
