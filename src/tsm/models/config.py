"""Runtime configuration for tsm."""

from dataclasses import dataclass, field
from pathlib import Path

from tsm.logging_config import default_log_dir


def config_dir_path() -> Path:
    """Return the directory holding session configs (`~/.tsm`)."""
    return Path.home() / ".tsm"


@dataclass
class Config:
    """Runtime configuration for tsm operations."""

    # Tmux settings
    tmux_command: str = "tmux"
    # Set default-path to "<dir> > /dev/null" like older tsm releases did
    legacy_default_path: bool = False

    # Output settings
    verbose: bool = False

    # Paths
    config_dir: Path = field(default_factory=config_dir_path)
    log_dir: Path = field(default_factory=default_log_dir)


# Global config instance (can be overridden via set_config)
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration, creating a default if none exists."""
    global _config  # noqa: PLW0603
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration (None resets to defaults on next get)."""
    global _config  # noqa: PLW0603
    _config = config
