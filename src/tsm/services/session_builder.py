"""Builds a tmux session from a SessionConfig."""

import os
import shlex
from dataclasses import dataclass

from tsm.logging_config import get_logger
from tsm.models.config import get_config
from tsm.models.session_config import CommandValue, SessionConfig
from tsm.services.tmux import TmuxService

logger = get_logger("tsm.services.session_builder")

# A window command of "none" creates the window without typing anything
NO_COMMAND = "none"
FIRST_WINDOW = 1


@dataclass
class SessionBuilder:
    """Replays a session config as an ordered sequence of tmux commands.

    Steps run strictly in order and each must finish before the next:
    environment variables are set before the window churn that makes them
    visible, and windows exist before one of them is selected.
    """

    tmux: TmuxService
    legacy_default_path: bool = False

    @classmethod
    def from_config(cls, tmux: TmuxService) -> "SessionBuilder":
        """Create a builder using the global runtime config."""
        return cls(tmux=tmux, legacy_default_path=get_config().legacy_default_path)

    def build(self, name: str, config: SessionConfig | None) -> None:
        """Create, configure and attach to a session.

        Args:
            name: Session name
            config: Parsed config, or None for a bare session
        """
        self.create(name)
        if config is not None:
            self.configure(name, config)
        self.tmux.attach(name)

    def create(self, name: str) -> None:
        self.tmux.new_session(name)

    def configure(self, name: str, config: SessionConfig) -> None:
        """Apply every configured step between session creation and attach."""
        logger.info(f"Configuring session '{name}'")

        session_dir = os.path.expanduser(config.session_dir) if config.session_dir else None

        if session_dir:
            self.tmux.set_environment(name, "SESSION_DIR", session_dir)
        if config.session_url:
            self.tmux.set_environment(name, "SESSION_URL", f"http://{config.session_url}")
        if config.commands_before:
            self.replay_commands(config.commands_before)
        if session_dir:
            self.tmux.set_option(name, "default-path", self._default_path(session_dir))

        self.refresh_environment(name)

        if config.windows:
            self.construct_windows(name, config.windows)

        self.tmux.select_window(f"{name}:{config.select_window or FIRST_WINDOW}")

        if config.description:
            self.tmux.set_option(name, "set-titles-string", config.description)
        if config.commands_after:
            self.replay_commands(config.commands_after)

    def _default_path(self, session_dir: str) -> str:
        if self.legacy_default_path:
            return f"{session_dir} > /dev/null"
        return session_dir

    def replay_commands(self, commands: dict[str, CommandValue]) -> None:
        """Run each `command: arguments` entry as a raw tmux command line.

        Entries run in declared order. A sequence of arguments is joined with
        spaces. An entry with an empty command name is skipped; an empty
        argument still runs the bare command.
        """
        for command, arguments in commands.items():
            if not command:
                continue
            line = command
            argument_text = arguments.joined()
            if argument_text:
                line = f"{command} {argument_text}"
            logger.debug(f"Replaying tmux command: {line}")
            try:
                argv = shlex.split(line)
            except ValueError as e:
                logger.warning(f"Unbalanced quoting in '{line}' ({e}), splitting on whitespace")
                argv = line.split()
            self.tmux.run(argv)

    def refresh_environment(self, name: str) -> None:
        """Churn windows so the surviving first window picks up the new environment.

        The exact sequence (new 2, kill 1, new 1, kill 2) is required.
        """
        self.tmux.new_window(f"{name}:2")
        self.tmux.kill_window(f"{name}:1")
        self.tmux.new_window(f"{name}:1")
        self.tmux.kill_window(f"{name}:2")

    def construct_windows(self, name: str, windows: dict[str, CommandValue]) -> None:
        """Name windows in declared order and type their commands.

        The first window already exists after session creation; every later
        entry gets a new window at the next index.
        """
        for index, (window_name, commands) in enumerate(windows.items(), start=FIRST_WINDOW):
            target = f"{name}:{index}"
            if index > FIRST_WINDOW:
                self.tmux.new_window(target)
            self.tmux.rename_window(target, window_name)
            for command in commands.items:
                if command == NO_COMMAND:
                    continue
                self.tmux.send_keys(target, command)
