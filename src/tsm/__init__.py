"""tsm - named tmux sessions from small YAML files."""

__version__ = "0.2.0"
