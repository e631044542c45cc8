"""Tests for color presets."""

import pytest

from ansi_picker.utils.colors import Color, sgr
from ansi_picker.utils.exceptions import ConfigurationError


def test_sgr_builds_escape_sequence():
    """sgr() wraps a code in ESC[...m."""
    assert sgr(32) == "\033[32m"


@pytest.mark.parametrize(
    "name,code",
    [
        ("DEFAULT", 39),
        ("BLACK", 30),
        ("RED", 31),
        ("GREEN", 32),
        ("YELLOW", 93),
        ("BLUE", 34),
        ("MAGENTA", 35),
        ("CYAN", 36),
        ("GRAY", 37),
        ("DARK_GRAY", 90),
        ("WHITE", 97),
    ],
)
def test_presets(name, code):
    """Each preset carries its SGR code."""
    assert getattr(Color, name) == sgr(code)


def test_from_name_variants():
    """Names are case-insensitive and accept dashes; codes and sequences pass through."""
    assert Color.from_name("green") == Color.GREEN
    assert Color.from_name("Dark-Gray") == Color.DARK_GRAY
    assert Color.from_name("dark_gray") == Color.DARK_GRAY
    assert Color.from_name(" cyan ") == Color.CYAN
    assert Color.from_name("93") == Color.YELLOW
    assert Color.from_name("\033[1;35m") == "\033[1;35m"


@pytest.mark.parametrize("name", ["chartreuse", "", "from_name", "names", "-1"])
def test_from_name_rejects_unknown(name):
    """Anything that is not a preset, code or sequence is rejected."""
    with pytest.raises(ConfigurationError):
        Color.from_name(name)


def test_names_lists_presets():
    """names() lists every preset in lowercase."""
    names = Color.names()
    assert "green" in names
    assert "dark_gray" in names
    assert len(names) == 11

