"""Environment overrides for the runtime Config."""

import os
from pathlib import Path

from tsm.logging_config import get_logger
from tsm.models.config import Config

logger = get_logger("tsm.services.settings_loader")

TRUTHY = ("1", "true", "yes")


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY


def load_config_from_env(base: Config | None = None) -> Config:
    """Build a Config with environment overrides applied.

    Environment variables:
    - TSM_TMUX: tmux binary to invoke
    - TSM_LOG_DIR: directory for tsm.log
    - TSM_VERBOSE: "1", "true" or "yes" for debug logging on stderr
    - TSM_LEGACY_DEFAULT_PATH: same values, to write default-path the old way

    The session config directory is always ~/.tsm and is not overridable.

    Args:
        base: Config to start from. Defaults to a fresh Config().

    Returns:
        A new Config with overrides applied.
    """
    config = base or Config()

    tmux_command = os.environ.get("TSM_TMUX") or config.tmux_command
    log_dir_env = os.environ.get("TSM_LOG_DIR")
    log_dir = Path(log_dir_env).expanduser() if log_dir_env else config.log_dir

    return Config(
        tmux_command=tmux_command,
        legacy_default_path=_env_flag("TSM_LEGACY_DEFAULT_PATH", config.legacy_default_path),
        verbose=_env_flag("TSM_VERBOSE", config.verbose),
        config_dir=config.config_dir,
        log_dir=log_dir,
    )
