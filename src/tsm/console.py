"""Rich console singletons and helpers for terminal output."""

from rich.console import Console
from rich.markup import escape

# Global console instances
console = Console()
err_console = Console(stderr=True)

RUNNING_MARKER = "[bold green]●[/bold green]"
STOPPED_MARKER = "[red]○[/red]"


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    err_console.print(f"[yellow]Warning: {escape(message)}[/yellow]", highlight=False)


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")


def print_session_line(name: str, running: bool, description: str | None = None) -> None:
    """Print one `list` line: running marker, session name and description."""
    marker = RUNNING_MARKER if running else STOPPED_MARKER
    line = f"{marker} [cyan]{escape(name)}[/cyan]"
    if description:
        line += f" [dim]-[/dim] {escape(description)}"
    console.print(line, highlight=False, emoji=False)

