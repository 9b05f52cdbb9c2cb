"""Close command - kill a running session."""

from typing import Annotated

import typer

from tsm.console import print_error, print_success
from tsm.exceptions import SessionNotOpenError
from tsm.services.tmux import TmuxService


def close_session(
    session: Annotated[str, typer.Argument(help="Session to close")],
) -> None:
    """Close a running session."""
    tmux_service = TmuxService()

    if not tmux_service.is_running(session):
        error = SessionNotOpenError(session)
        print_error(str(error))
        raise typer.Exit(1) from error

    tmux_service.kill_session(session)
    print_success(f"Closed session '{session}'")
