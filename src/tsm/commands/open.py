"""Open command - attach to a session, building it from its config first if needed."""

from typing import Annotated

import typer

from tsm.console import print_error, print_info
from tsm.exceptions import TsmError
from tsm.logging_config import get_logger
from tsm.services.config_store import ConfigStore
from tsm.services.session_builder import SessionBuilder
from tsm.services.tmux import TmuxService

logger = get_logger("tsm.commands.open")


def open_session(
    session: Annotated[
        str | None,
        typer.Argument(help="Session to open (defaults to tmux's current session)"),
    ] = None,
) -> None:
    """Open a session.

    Attaches if the session is already running. Otherwise creates it, applies
    ~/.tsm/<session>.yml when that file exists, and attaches.
    """
    tmux_service = TmuxService()

    if session is None:
        tmux_service.attach()
        return

    if tmux_service.is_running(session):
        logger.info(f"Session '{session}' already running, attaching")
        tmux_service.attach(session)
        return

    store = ConfigStore()
    try:
        config = store.load_config(session) if store.config_exists(session) else None
    except TsmError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if config is None:
        print_info(f"No config for '{session}', opening a bare session")

    SessionBuilder.from_config(tmux_service).build(session, config)
