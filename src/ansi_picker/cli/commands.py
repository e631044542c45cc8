"""CLI command handlers."""

import sys
from dataclasses import replace
from typing import Optional

import typer

from ansi_picker.cli.ui import console, err_console, print_error
from ansi_picker.utils.colors import Color
from ansi_picker.utils.config import Config, get_picker_dir
from ansi_picker.utils.debug import log_error, reload_config
from ansi_picker.utils.exceptions import ConfigurationError, PickerError

DEMO_OPTIONS = ["Apple", "Banana", "Orange", "Watermelon"]


def _run_picker(options: list[str], config, output=None) -> str:
    """Run one picker session, turning failures into a clean exit."""
    from ansi_picker.picker import Picker

    try:
        return Picker(config, output=output).choose(options)
    except PickerError as e:
        log_error("cli", str(e), exc=e, echo=False)
        print_error(str(e))
        raise typer.Exit(1)
    except EOFError:
        print_error("input closed before a choice was made")
        raise typer.Exit(1)


def _load_display_config(**overrides: Optional[str]):
    """Configured display defaults with CLI overrides applied."""
    try:
        display = Config(get_picker_dir()).display_configuration()
        changes = {}
        for field, value in overrides.items():
            if value is None:
                continue
            changes[field] = Color.from_name(value) if field.endswith("_color") else value
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(2)
    return replace(display, **changes)


def cmd_choose(
    options: list[str],
    prompt: Optional[str] = None,
    item_indicator: Optional[str] = None,
    item_color: Optional[str] = None,
    selection_indicator: Optional[str] = None,
    selection_color: Optional[str] = None,
):
    """Show options on stderr and print the choice on stdout."""
    display = _load_display_config(
        item_indicator=item_indicator,
        item_color=item_color,
        selection_indicator=selection_indicator,
        selection_color=selection_color,
    )

    if prompt:
        err_console.print(f"[bold]{prompt}[/bold]")
    choice = _run_picker(options, display, output=sys.stderr)
    console.print(choice, markup=False, highlight=False)


def cmd_demo():
    """Run the fruit picker twice: defaults, then custom indicators."""
    from ansi_picker.picker import PickerConfiguration

    console.print("Choose your favorite fruit:")
    fruit = _run_picker(DEMO_OPTIONS, PickerConfiguration())
    console.print(f"You chose: [green]{fruit}[/green]")

    console.print()
    console.print("⏵ Choose your favorite fruit:")
    custom = PickerConfiguration(
        item_indicator="○",
        item_color=Color.RED,
        selection_indicator="●",
        selection_color=Color.GREEN,
    )
    fruit = _run_picker(DEMO_OPTIONS, custom)
    console.print(f"You chose: [green]{fruit}[/green]")


def cmd_status():
    """Show current configuration."""
    from rich.table import Table

    picker_dir = get_picker_dir()
    config = Config(picker_dir)

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )
    console.print(f"[bold]Config:[/bold] [dim]{picker_dir}[/dim]")

    table = Table(title="Display defaults", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_column("Description", style="dim")
    for attr, desc in Config.DISPLAY.items():
        table.add_row(attr, repr(getattr(config, attr)), desc)
    console.print(table)


def cmd_debug(enabled: bool):
    """Enable or disable debug logging."""
    config = Config(get_picker_dir())
    config.set_debug(enabled)
    reload_config()
    if enabled:
        console.print(f"Debug mode enabled, logging to [dim]{config.log_path}[/dim]")
    else:
        console.print("Debug mode disabled")


def cmd_env_list():
    """List all env var overrides."""
    config = Config(get_picker_dir())
    env_vars = config.list_env()

    if not env_vars:
        console.print("No env var overrides set.")
        return

    for key, value in sorted(env_vars.items()):
        console.print(f"{key}={value}", markup=False, highlight=False)


def cmd_env_set(key: str, value: str):
    """Set an env var override."""
    attr = Config.attr_for_env_key(key)
    if attr is None:
        print_error(f"unknown setting '{key}'")
        raise typer.Exit(1)
    if attr.endswith("_color"):
        try:
            Color.from_name(value)
        except ConfigurationError as e:
            print_error(str(e))
            raise typer.Exit(1)

    config = Config(get_picker_dir())
    config.set_env(key, value)
    console.print(f"Set {key}={value}", markup=False, highlight=False)


def cmd_env_unset(key: str):
    """Unset an env var override."""
    config = Config(get_picker_dir())
    if config.unset_env(key):
        console.print(f"Unset {key}", markup=False, highlight=False)
    else:
        console.print(f"{key} not found", markup=False, highlight=False)
