"""Constants used throughout ansi-picker."""

from ansi_picker.utils.colors import ESC

# SGR reset, appended to every option line
RESET = f"{ESC}[0m"

# Cursor position request; the terminal answers with ESC[row;colR
CURSOR_POSITION_REQUEST = f"{ESC}[6n"
CURSOR_POSITION_TERMINATOR = "R"

# Give up on a cursor reply that grows past this without a terminator
MAX_CURSOR_RESPONSE_LENGTH = 32

# Default display configuration
DEFAULT_ITEM_INDICATOR = " "
DEFAULT_ITEM_COLOR = "default"
DEFAULT_SELECTION_INDICATOR = "➜"
DEFAULT_SELECTION_COLOR = "green"

# Env var prefix for config overrides
ENV_PREFIX = "PICKER_"


def cursor_move(row: int, column: int = 1) -> str:
    """Escape sequence moving the cursor to an absolute row/column."""
    return f"{ESC}[{row};{column}H"
