"""Session config files under ~/.tsm."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from tsm.exceptions import ConfigDirUnreadableError, ConfigFileUnreadableError
from tsm.logging_config import get_logger
from tsm.models.config import get_config
from tsm.models.session_config import ConfigFormatError, SessionConfig

logger = get_logger("tsm.services.config_store")

CONFIG_SUFFIX = ".yml"


def config_stem(entry: str) -> str:
    """Strip the .yml extension from a config file name."""
    return entry.removesuffix(CONFIG_SUFFIX)


def _default_config_dir() -> Path:
    return get_config().config_dir


@dataclass
class ConfigStore:
    """Reads session configs from a single directory."""

    config_dir: Path = field(default_factory=_default_config_dir)

    def config_path(self, name: str) -> Path:
        """Return the config file path for a session name."""
        return self.config_dir / f"{name}{CONFIG_SUFFIX}"

    def list_configs(self) -> list[str]:
        """List entries of the config directory in enumeration order.

        Returns:
            Entry names as returned by the filesystem (no "." or "..").

        Raises:
            ConfigDirUnreadableError: If the directory cannot be opened.
        """
        try:
            entries = os.listdir(self.config_dir)
        except OSError as e:
            logger.warning(f"Failed to list config directory {self.config_dir}: {e}")
            raise ConfigDirUnreadableError(self.config_dir) from e
        logger.debug(f"Found {len(entries)} config entries in {self.config_dir}")
        return entries

    def config_exists(self, name: str) -> bool:
        """Check whether a config file exists for the session."""
        return self.config_path(name).exists()

    def read_raw(self, name: str) -> str:
        """Read a config file verbatim.

        Raises:
            ConfigFileUnreadableError: If the file is missing or unreadable.
        """
        path = self.config_path(name)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read config file {path}: {e}")
            raise ConfigFileUnreadableError(path) from e

    def load_config(self, name: str) -> SessionConfig:
        """Load and parse the config for a session.

        Args:
            name: Session name; the file read is <config_dir>/<name>.yml

        Returns:
            The parsed SessionConfig.

        Raises:
            ConfigFileUnreadableError: If the file is missing, unreadable,
                not valid YAML, or not shaped like a session config.
        """
        path = self.config_path(name)
        text = self.read_raw(name)

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            logger.warning(f"Invalid YAML in config file {path}: {e}")
            raise ConfigFileUnreadableError(path, "invalid YAML") from e

        try:
            config = SessionConfig.from_dict(data)
        except ConfigFormatError as e:
            logger.warning(f"Malformed config file {path}: {e}")
            raise ConfigFileUnreadableError(path, str(e)) from e

        logger.debug(f"Loaded config for '{name}' from {path}")
        return config
