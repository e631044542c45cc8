"""Shared pytest fixtures."""

import os
import signal
import tempfile
import termios
from pathlib import Path

import pytest

from ansi_picker.utils.debug import reload_config
from tests.helpers.fake_terminal import FakeTerminal, make_input


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_picker_dir(temp_dir, monkeypatch):
    """Set up an isolated ansi-picker config directory."""
    picker_dir = temp_dir / ".ansi-picker"
    picker_dir.mkdir()
    for key in list(os.environ):
        if key.startswith("PICKER_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("PICKER_DIR", str(picker_dir))
    reload_config()
    yield picker_dir
    reload_config()


@pytest.fixture
def fake_terminal(monkeypatch):
    """Replace termios and SIGINT handling with an in-memory terminal."""
    fake = FakeTerminal()
    monkeypatch.setattr(termios, "tcgetattr", fake.tcgetattr)
    monkeypatch.setattr(termios, "tcsetattr", fake.tcsetattr)
    monkeypatch.setattr(signal, "signal", fake.signal)
    return fake


@pytest.fixture
def feed():
    """Return a factory for input pipes; read ends are closed afterwards."""
    fds = []

    def _feed(data: bytes) -> int:
        fd = make_input(data)
        fds.append(fd)
        return fd

    yield _feed
    for fd in fds:
        os.close(fd)
