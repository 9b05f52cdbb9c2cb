"""Tests for environment overrides of the runtime config."""

from pathlib import Path

import pytest

from tsm.models.config import Config
from tsm.services.settings_loader import load_config_from_env


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_defaults_without_env(self, isolated_home: Path) -> None:
        config = load_config_from_env()

        assert config.tmux_command == "tmux"
        assert config.verbose is False
        assert config.legacy_default_path is False
        assert config.config_dir == isolated_home / ".tsm"

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TSM_TMUX", "/usr/local/bin/tmux")
        monkeypatch.setenv("TSM_VERBOSE", "true")
        monkeypatch.setenv("TSM_LEGACY_DEFAULT_PATH", "1")
        monkeypatch.setenv("TSM_LOG_DIR", str(tmp_path / "logs"))

        config = load_config_from_env()

        assert config.tmux_command == "/usr/local/bin/tmux"
        assert config.verbose is True
        assert config.legacy_default_path is True
        assert config.log_dir == tmp_path / "logs"

    def test_falsy_flag_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TSM_VERBOSE", "0")

        assert load_config_from_env(Config(verbose=True)).verbose is False

    def test_config_dir_is_not_overridable(
        self, isolated_home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TSM_CONFIG_DIR", "/elsewhere")

        assert load_config_from_env().config_dir == isolated_home / ".tsm"
