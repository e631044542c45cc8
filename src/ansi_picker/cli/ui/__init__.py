"""Console output for the CLI."""

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    err_console.print(f"[red]Error:[/red] {message}", highlight=False)


__all__ = ["console", "err_console", "print_error"]
