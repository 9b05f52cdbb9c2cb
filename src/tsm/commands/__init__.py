"""CLI commands for tsm."""

from tsm.commands.close import close_session
from tsm.commands.help import show_help
from tsm.commands.listing import list_sessions
from tsm.commands.open import open_session
from tsm.commands.view import view_config

__all__ = ["close_session", "list_sessions", "open_session", "show_help", "view_config"]
