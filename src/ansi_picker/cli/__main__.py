"""Allow running the CLI with ``python -m ansi_picker.cli``."""

from ansi_picker.cli import cli_main

cli_main()
