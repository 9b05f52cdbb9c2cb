"""Tmux command facade and running-session probe."""

import re
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field

from tsm.console import print_warning
from tsm.logging_config import get_logger, log_subprocess_result
from tsm.models.config import get_config

logger = get_logger("tsm.services.tmux")


def _default_tmux_command() -> str:
    return get_config().tmux_command


@dataclass
class TmuxService:
    """Single choke point for every tmux invocation.

    Arguments are always passed as an argv list, never through a shell.
    Failures are soft: a failed call yields empty output and a log entry.
    """

    tmux_command: str = field(default_factory=_default_tmux_command)
    _missing_reported: bool = field(default=False, init=False, repr=False)

    def run(self, args: Sequence[str], capture: bool = False) -> str:
        """Run one tmux subcommand.

        Args:
            args: Subcommand and its arguments, e.g. ["kill-session", "-t", "work"]
            capture: If True, capture stdout/stderr instead of showing them

        Returns:
            Captured stdout on success, "" otherwise (including normal mode).
        """
        cmd = [self.tmux_command, *args]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            if capture:
                result = subprocess.run(cmd, capture_output=True, check=False, text=True)
            else:
                result = subprocess.run(cmd, check=False)
        except OSError as e:
            logger.warning(f"Cannot run tmux binary {self.tmux_command}: {e}")
            if not self._missing_reported:
                print_warning(f"Cannot run '{self.tmux_command}'; is tmux installed?")
                self._missing_reported = True
            return ""

        stdout = result.stdout if capture else None
        stderr = result.stderr if capture else None
        success = result.returncode == 0
        log_subprocess_result(logger, cmd, result.returncode, stdout, stderr, success=success)

        if not success:
            return ""
        return stdout or ""

    # Session probe

    def list_running_session_names(self) -> str:
        """Return the raw `tmux ls` listing, or "" when no server is running."""
        return self.run(["ls"], capture=True)

    def is_running(self, name: str, listing: str | None = None) -> bool:
        """Check whether a session with exactly this name is running.

        A listing line must start with the name followed directly by a colon,
        so "foo" does not match a running "foobar".

        Args:
            name: Session name
            listing: Output of list_running_session_names() to reuse; queried
                     fresh when omitted

        Returns:
            True if the session is running
        """
        if listing is None:
            listing = self.list_running_session_names()
        running = re.search(rf"^{re.escape(name)}:", listing, re.MULTILINE) is not None
        logger.debug(f"is_running({name}): {running}")
        return running

    # Named wrappers

    def new_session(self, name: str) -> None:
        """Create a detached session."""
        logger.info(f"Creating tmux session: {name}")
        self.run(["new-session", "-d", "-s", name])

    def kill_session(self, name: str) -> None:
        """Kill a session."""
        logger.info(f"Killing tmux session: {name}")
        self.run(["kill-session", "-t", name])

    def attach(self, name: str | None = None) -> None:
        """Attach the controlling terminal to a session (tmux's default if None)."""
        logger.info(f"Attaching to tmux session: {name or '(default)'}")
        self.run(["attach"] if name is None else ["attach", "-t", name])

    def set_environment(self, name: str, variable: str, value: str) -> None:
        self.run(["set-environment", "-t", name, variable, value])

    def set_option(self, name: str, option: str, value: str) -> None:
        self.run(["set-option", "-t", name, option, value])

    def new_window(self, target: str) -> None:
        self.run(["new-window", "-t", target])

    def kill_window(self, target: str) -> None:
        self.run(["kill-window", "-t", target])

    def rename_window(self, target: str, window_name: str) -> None:
        self.run(["rename-window", "-t", target, window_name])

    def send_keys(self, target: str, command: str) -> None:
        """Type a command into a window and press Enter."""
        self.run(["send-keys", "-t", target, command, "C-m"])

    def select_window(self, target: str) -> None:
        self.run(["select-window", "-t", target])
