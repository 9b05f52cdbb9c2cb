"""Service layer: config files, tmux access and session building."""

from tsm.services.config_store import ConfigStore
from tsm.services.session_builder import SessionBuilder
from tsm.services.tmux import TmuxService

__all__ = ["ConfigStore", "SessionBuilder", "TmuxService"]
