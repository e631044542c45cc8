"""Debug logging utility.

Debug lines go to the log file only; stderr shares the terminal with
the option block.
"""

import sys
from datetime import datetime

from ansi_picker.utils.config import Config, get_picker_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_picker_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = get_picker_dir() / "debug.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'terminal', 'cursor', 'keys', 'picker'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    try:
        enabled = bool(_get_config().debug)
    except Exception:
        # Unreadable config: debug stays off
        return
    if not enabled:
        return

    extras = " ".join(f"{k}={v!r}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[picker:{category}] {_timestamp()} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def debug_terminal(message: str, **kwargs):
    """Log terminal-mode debug message."""
    debug("terminal", message, **kwargs)


def debug_cursor(message: str, **kwargs):
    """Log cursor-query debug message."""
    debug("cursor", message, **kwargs)


def debug_keys(message: str, **kwargs):
    """Log key-input debug message."""
    debug("keys", message, **kwargs)


def debug_picker(message: str, **kwargs):
    """Log picker session debug message."""
    debug("picker", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None, echo: bool = True):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'cli', 'cursor'
        message: Error message
        exc: Optional exception to include traceback
        echo: Also print to stderr
    """
    import traceback

    line = f"[picker:{category}] {_timestamp()} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    # Always log to file (errors should never be silent)
    _log_to_file(line)

    if not echo:
        return
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr
