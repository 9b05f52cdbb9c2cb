"""tsm CLI - open, close and list tmux sessions described in ~/.tsm."""

import typer

from tsm import __version__
from tsm.commands.close import close_session
from tsm.commands.help import show_help
from tsm.commands.listing import list_sessions
from tsm.commands.open import open_session
from tsm.commands.view import view_config
from tsm.console import console
from tsm.logging_config import cleanup_old_logs, get_logger, setup_logging
from tsm.models.config import set_config
from tsm.services.settings_loader import load_config_from_env

# Create the Typer app
app = typer.Typer(
    name="tsm",
    help="Open, close and list tmux sessions described by ~/.tsm/<session>.yml files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Commands, each with a hidden one-letter alias
app.command(name="open")(open_session)
app.command(name="o", hidden=True)(open_session)
app.command(name="close")(close_session)
app.command(name="c", hidden=True)(close_session)
app.command(name="list")(list_sessions)
app.command(name="l", hidden=True)(list_sessions)
app.command(name="view")(view_config)
app.command(name="v", hidden=True)(view_config)
app.command(name="help")(show_help)
app.command(name="h", hidden=True)(show_help)
app.command(name="attach", hidden=True)(open_session)
app.command(name="a", hidden=True)(open_session)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        is_eager=True,
    ),
) -> None:
    """tsm - named tmux sessions from small YAML files.

    Running tsm without a command lists the configured sessions.
    """
    if version:
        console.print(f"tsm version {__version__}")
        raise typer.Exit()

    config = load_config_from_env()
    set_config(config)

    setup_logging(config)
    cleanup_old_logs(config.log_dir)

    logger = get_logger("tsm.cli")
    if ctx.invoked_subcommand:
        logger.info(f"Command invoked: {ctx.invoked_subcommand}")
        return

    list_sessions()


if __name__ == "__main__":
    app()
