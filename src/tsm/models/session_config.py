"""Session config model parsed from `~/.tsm/<name>.yml`."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class ConfigFormatError(ValueError):
    """Raised when a parsed YAML document does not have the session config shape."""


class ValueKind(Enum):
    """Whether a YAML command value was written as a scalar or a list."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"


@dataclass(frozen=True)
class CommandValue:
    """A command or argument value: one scalar or an ordered list of texts."""

    kind: ValueKind
    items: tuple[str, ...]

    @classmethod
    def scalar(cls, text: str) -> CommandValue:
        """Create a scalar value."""
        return cls(ValueKind.SCALAR, (text,))

    @classmethod
    def sequence(cls, texts: list[str] | tuple[str, ...]) -> CommandValue:
        """Create a sequence value."""
        return cls(ValueKind.SEQUENCE, tuple(texts))

    @classmethod
    def from_yaml(cls, raw: object) -> CommandValue:
        """Resolve a raw YAML node into a CommandValue.

        Lists become sequences (each element converted to text); null becomes
        an empty scalar; any other scalar is converted with str().

        Raises:
            ConfigFormatError: If the node is a mapping or contains one.
        """
        if isinstance(raw, list):
            return cls.sequence([_scalar_text(item) for item in raw])
        return cls.scalar(_scalar_text(raw))

    @property
    def is_sequence(self) -> bool:
        return self.kind is ValueKind.SEQUENCE

    def joined(self) -> str:
        """Return the items joined with single spaces."""
        return " ".join(self.items)


def _scalar_text(raw: object) -> str:
    if raw is None:
        return ""
    if isinstance(raw, (dict, list)):
        raise ConfigFormatError(f"expected a scalar, got {type(raw).__name__}")
    return str(raw)


def _optional_text(data: Mapping[str, object], key: str) -> str | None:
    raw = data.get(key)
    if raw is None:
        return None
    return _scalar_text(raw)


def _command_mapping(data: Mapping[str, object], key: str) -> dict[str, CommandValue]:
    raw = data.get(key)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigFormatError(f"'{key}' must be a mapping")
    return {_scalar_text(name): CommandValue.from_yaml(value) for name, value in raw.items()}


@dataclass(frozen=True)
class SessionConfig:
    """Everything a session config can declare. Every field is optional.

    Mapping fields keep the order the keys were declared in the file, which
    is the order the builder executes them in.
    """

    description: str | None = None
    session_dir: str | None = None
    session_url: str | None = None
    commands_before: dict[str, CommandValue] = field(default_factory=dict)
    commands_after: dict[str, CommandValue] = field(default_factory=dict)
    windows: dict[str, CommandValue] = field(default_factory=dict)
    select_window: str | None = None

    @classmethod
    def from_dict(cls, data: object) -> SessionConfig:
        """Create a SessionConfig from a parsed YAML document.

        An empty document (None) yields an empty config. Unknown keys are
        ignored.

        Raises:
            ConfigFormatError: If the document or one of its fields has the
                wrong shape.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigFormatError("top level must be a mapping")

        return cls(
            description=_optional_text(data, "description"),
            session_dir=_optional_text(data, "session_dir"),
            session_url=_optional_text(data, "session_url"),
            commands_before=_command_mapping(data, "commands_before"),
            commands_after=_command_mapping(data, "commands_after"),
            windows=_command_mapping(data, "windows"),
            select_window=_optional_text(data, "select_window"),
        )
