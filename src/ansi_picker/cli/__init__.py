"""CLI entry point for ansi-picker.

Uses Typer for command routing; handlers are imported per command.
"""

from typing import Optional

import typer

__all__ = ["app", "cli_main"]

app = typer.Typer(
    name="ansi-picker",
    help="Pick one option with the arrow keys",
    no_args_is_help=True,
)


@app.command()
def choose(
    options: list[str] = typer.Argument(..., help="Options to choose from"),
    prompt: Optional[str] = typer.Option(
        None, "--prompt", "-p", help="Heading printed above the options"
    ),
    item_indicator: Optional[str] = typer.Option(
        None, "--item-indicator", help="Indicator before unselected options"
    ),
    item_color: Optional[str] = typer.Option(
        None, "--item-color", help="Color name or SGR code for unselected options"
    ),
    selection_indicator: Optional[str] = typer.Option(
        None, "--selection-indicator", help="Indicator before the selected option"
    ),
    selection_color: Optional[str] = typer.Option(
        None, "--selection-color", help="Color name or SGR code for the selection"
    ),
) -> None:
    """Show OPTIONS and print the one chosen."""
    from ansi_picker.cli.commands import cmd_choose

    cmd_choose(
        options,
        prompt=prompt,
        item_indicator=item_indicator,
        item_color=item_color,
        selection_indicator=selection_indicator,
        selection_color=selection_color,
    )


@app.command()
def demo() -> None:
    """Pick a fruit, first with defaults, then with custom indicators."""
    from ansi_picker.cli.commands import cmd_demo

    cmd_demo()


@app.command()
def status() -> None:
    """Show current configuration."""
    from ansi_picker.cli.commands import cmd_status

    cmd_status()


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from ansi_picker.cli.commands import cmd_debug

    cmd_debug(True)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from ansi_picker.cli.commands import cmd_debug

    cmd_debug(False)


# Env subcommand group
env_app = typer.Typer(help="Manage env var overrides")
app.add_typer(env_app, name="env")


@env_app.command("list")
def env_list() -> None:
    """List env var overrides."""
    from ansi_picker.cli.commands import cmd_env_list

    cmd_env_list()


@env_app.command("set")
def env_set(key: str, value: str) -> None:
    """Set an env var override."""
    from ansi_picker.cli.commands import cmd_env_set

    cmd_env_set(key, value)


@env_app.command("unset")
def env_unset(key: str) -> None:
    """Remove an env var override."""
    from ansi_picker.cli.commands import cmd_env_unset

    cmd_env_unset(key)


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
