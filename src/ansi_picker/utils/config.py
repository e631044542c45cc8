"""Configuration management."""

import json
import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ansi_picker.utils.colors import Color
from ansi_picker.utils.constants import (
    DEFAULT_ITEM_COLOR,
    DEFAULT_ITEM_INDICATOR,
    DEFAULT_SELECTION_COLOR,
    DEFAULT_SELECTION_INDICATOR,
    ENV_PREFIX,
)

if TYPE_CHECKING:
    from ansi_picker.picker import PickerConfiguration


def get_picker_dir() -> Path:
    """Get the ansi-picker data directory (XDG-compliant)."""
    if env_dir := os.environ.get("PICKER_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "ansi-picker"


class Config:
    """Application configuration."""

    # Persisted display settings (attr_name -> description)
    DISPLAY: dict[str, str] = {
        "item_indicator": "Indicator shown before unselected options",
        "item_color": "Color of unselected options",
        "selection_indicator": "Indicator shown before the selected option",
        "selection_color": "Color of the selected option",
    }

    def __init__(self, picker_dir: Optional[Path] = None):
        """Load config from directory."""
        self.picker_dir = picker_dir or get_picker_dir()
        self._config_file = self.picker_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        # Set defaults
        self.debug = False
        self.item_indicator = DEFAULT_ITEM_INDICATOR
        self.item_color = DEFAULT_ITEM_COLOR
        self.selection_indicator = DEFAULT_SELECTION_INDICATOR
        self.selection_color = DEFAULT_SELECTION_COLOR
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                if not isinstance(data, dict):
                    data = {}
                self.debug = data.get("debug", False)
                self.item_indicator = data.get("item_indicator", DEFAULT_ITEM_INDICATOR)
                self.item_color = data.get("item_color", DEFAULT_ITEM_COLOR)
                self.selection_indicator = data.get(
                    "selection_indicator", DEFAULT_SELECTION_INDICATOR
                )
                self.selection_color = data.get(
                    "selection_color", DEFAULT_SELECTION_COLOR
                )
                env = data.get("env", {})
                self.env = env if isinstance(env, dict) else {}
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell PICKER_* vars."""

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                attr_name = self.attr_for_env_key(key)
                if attr_name is None:
                    continue
                value = str(value)
                if isinstance(getattr(self, attr_name), bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                else:
                    setattr(self, attr_name, value)

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority); PICKER_DIR is not a setting
        shell_env = {
            k: v
            for k, v in os.environ.items()
            if k.startswith(ENV_PREFIX) and k != "PICKER_DIR"
        }
        apply_env_dict(shell_env)

    @classmethod
    def attr_for_env_key(cls, key: str) -> Optional[str]:
        """Map PICKER_FOO (or FOO) to a setting name, None if not a setting."""
        # Support both PICKER_FOO and FOO formats in config.env
        if key.startswith(ENV_PREFIX):
            attr_name = key[len(ENV_PREFIX) :].lower()
        else:
            attr_name = key.lower()
        if attr_name in cls.DISPLAY or attr_name == "debug":
            return attr_name
        return None

    def save(self):
        """Save config to file."""
        self.picker_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "item_indicator": self.item_indicator,
            "item_color": self.item_color,
            "selection_indicator": self.selection_indicator,
            "selection_color": self.selection_color,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2, ensure_ascii=False))

    def set_env(self, key: str, value: str):
        """Set an env var override in config."""
        self.env[key] = value
        self.save()
        # Re-apply to update attributes
        self._apply_env_overrides()

    def unset_env(self, key: str) -> bool:
        """Remove an env var override. Returns True if key existed."""
        if key in self.env:
            del self.env[key]
            self.save()
            return True
        return False

    def list_env(self) -> dict[str, str]:
        """List all env var overrides."""
        return self.env.copy()

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    @property
    def log_path(self) -> Path:
        """Path to debug log file."""
        return self.picker_dir / "debug.log"

    def display_configuration(self) -> "PickerConfiguration":
        """Resolve display settings into a PickerConfiguration.

        Raises:
            ConfigurationError: If a configured color is not recognized
        """
        from ansi_picker.picker import PickerConfiguration

        return PickerConfiguration(
            item_indicator=self.item_indicator,
            item_color=Color.from_name(self.item_color),
            selection_indicator=self.selection_indicator,
            selection_color=Color.from_name(self.selection_color),
        )
