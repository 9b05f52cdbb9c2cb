"""List command - show configured sessions and whether they are running."""

import typer

from tsm.console import console, print_error, print_session_line
from tsm.exceptions import TsmError
from tsm.services.config_store import ConfigStore, config_stem
from tsm.services.tmux import TmuxService


def list_sessions() -> None:
    """List configured sessions with a running marker and description."""
    store = ConfigStore()
    tmux_service = TmuxService()

    try:
        entries = store.list_configs()
        if not entries:
            console.print(f"[yellow]No session configs found in {store.config_dir}[/yellow]")
            return

        listing = tmux_service.list_running_session_names()
        for entry in entries:
            name = config_stem(entry)
            config = store.load_config(name)
            print_session_line(
                name,
                running=tmux_service.is_running(name, listing),
                description=config.description,
            )
    except TsmError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
