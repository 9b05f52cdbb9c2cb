"""View command - print a session config file as-is."""

from typing import Annotated

import typer

from tsm.console import print_error
from tsm.exceptions import ConfigFileUnreadableError
from tsm.services.config_store import ConfigStore


def view_config(
    session: Annotated[str, typer.Argument(help="Session whose config to show")],
) -> None:
    """Print the raw config file of a session."""
    try:
        text = ConfigStore().read_raw(session)
    except ConfigFileUnreadableError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    # Plain echo: rich would interpret brackets and :emoji: codes in YAML
    typer.echo(text, nl=False)
