"""SGR color presets for picker indicators."""

from ansi_picker.utils.exceptions import ConfigurationError

ESC = "\033"


def sgr(code: int) -> str:
    """Build an SGR escape sequence for a single color code."""
    return f"{ESC}[{code}m"


class Color:
    """Foreground color presets (escape sequences, ready to print)."""

    DEFAULT = sgr(39)
    BLACK = sgr(30)
    RED = sgr(31)
    GREEN = sgr(32)
    YELLOW = sgr(93)
    BLUE = sgr(34)
    MAGENTA = sgr(35)
    CYAN = sgr(36)
    GRAY = sgr(37)
    DARK_GRAY = sgr(90)
    WHITE = sgr(97)

    @classmethod
    def names(cls) -> list[str]:
        """Get preset names in lowercase, as accepted by from_name()."""
        return [
            attr.lower()
            for attr, value in vars(cls).items()
            if attr.isupper() and isinstance(value, str)
        ]

    @classmethod
    def from_name(cls, name: str) -> str:
        """Resolve a color name, SGR code or escape sequence.

        Args:
            name: Preset name ("green", "dark-gray"), numeric code ("93")
                or a literal escape sequence

        Returns:
            Escape sequence for the color

        Raises:
            ConfigurationError: If the name is not recognized
        """
        value = str(name).strip()
        if value.startswith(ESC):
            return value
        if value.isdigit():
            return sgr(int(value))

        attr = value.upper().replace("-", "_")
        preset = getattr(cls, attr, None) if attr.isupper() else None
        if not isinstance(preset, str):
            raise ConfigurationError(
                f"unknown color '{name}' (choose from: {', '.join(cls.names())})"
            )
        return preset
