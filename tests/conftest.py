"""Shared test fixtures for tsm tests."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from types import SimpleNamespace

import pytest

from tsm.logging_config import reset_logging
from tsm.models.config import set_config
from tsm.services import tmux as tmux_module
from tsm.services.tmux import TmuxService

SAMPLE_CONFIG = """description: API work
session_dir: /srv/api
session_url: localhost:8000
commands_before:
  set-option: -g status off
windows:
  editor: vim
  server: [make deps, make run]
  shell: none
select_window: editor
commands_after:
  bind-key: [r, source-file, ~/.tmux.conf]
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point HOME at a temp dir and reset global config and logging."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for var in ("TSM_TMUX", "TSM_VERBOSE", "TSM_LOG_DIR", "TSM_LEGACY_DEFAULT_PATH"):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    reset_logging()
    yield home
    reset_logging()
    set_config(None)


@pytest.fixture
def config_dir(isolated_home: Path) -> Path:
    """Create and return ~/.tsm inside the temp home."""
    directory = isolated_home / ".tsm"
    directory.mkdir()
    return directory


@pytest.fixture
def sample_config_file(config_dir: Path) -> Path:
    """Write ~/.tsm/api.yml with every supported key."""
    path = config_dir / "api.yml"
    path.write_text(SAMPLE_CONFIG)
    return path


@dataclass
class RecordingTmux(TmuxService):
    """TmuxService that records argv lists instead of running tmux."""

    listing: str = ""
    calls: list[list[str]] = field(default_factory=list)

    def run(self, args: list[str], capture: bool = False) -> str:  # type: ignore[override]
        self.calls.append(list(args))
        if args and args[0] == "ls":
            return self.listing
        return ""


@pytest.fixture
def recording_tmux() -> RecordingTmux:
    """Return a TmuxService double that records calls."""
    return RecordingTmux(tmux_command="tmux")


@dataclass
class SubprocessRecorder:
    """Stands in for subprocess.run inside tsm.services.tmux."""

    listing: str = ""
    ls_returncode: int = 0
    commands: list[list[str]] = field(default_factory=list)

    def __call__(self, cmd: list[str], **kwargs: object) -> SimpleNamespace:
        self.commands.append(list(cmd))
        if cmd[1:2] == ["ls"]:
            return SimpleNamespace(returncode=self.ls_returncode, stdout=self.listing, stderr="")
        stdout = "" if kwargs.get("capture_output") else None
        return SimpleNamespace(returncode=0, stdout=stdout, stderr=stdout)

    @property
    def tmux_args(self) -> list[list[str]]:
        """Recorded commands without the leading binary name."""
        return [cmd[1:] for cmd in self.commands]

    @property
    def non_probe_args(self) -> list[list[str]]:
        """Recorded commands other than `tmux ls`."""
        return [args for args in self.tmux_args if args != ["ls"]]


@pytest.fixture
def fake_subprocess(monkeypatch: pytest.MonkeyPatch) -> SubprocessRecorder:
    """Replace subprocess.run for tmux calls with a recorder."""
    recorder = SubprocessRecorder()
    monkeypatch.setattr(tmux_module.subprocess, "run", recorder)
    return recorder
