"""Data models for tsm."""

from tsm.models.config import Config
from tsm.models.session_config import CommandValue, SessionConfig, ValueKind

__all__ = ["CommandValue", "Config", "SessionConfig", "ValueKind"]
