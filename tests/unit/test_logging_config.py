"""Tests for logging setup."""

import logging
import os
import time
from pathlib import Path

from rich.logging import RichHandler

from tsm.logging_config import (
    LOG_FILE_NAME,
    cleanup_old_logs,
    get_logger,
    log_subprocess_result,
    setup_logging,
)
from tsm.models.config import Config


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_log_file(self, tmp_path: Path) -> None:
        setup_logging(Config(log_dir=tmp_path / "logs"))

        get_logger("tsm.test").info("hello from the test")
        for handler in logging.getLogger("tsm").handlers:
            handler.flush()

        assert "hello from the test" in (tmp_path / "logs" / LOG_FILE_NAME).read_text()

    def test_verbose_adds_rich_handler(self, tmp_path: Path) -> None:
        setup_logging(Config(log_dir=tmp_path, verbose=True))

        handlers = logging.getLogger("tsm").handlers
        assert any(isinstance(h, RichHandler) for h in handlers)

    def test_is_idempotent(self, tmp_path: Path) -> None:
        setup_logging(Config(log_dir=tmp_path))
        count = len(logging.getLogger("tsm").handlers)
        setup_logging(Config(log_dir=tmp_path, verbose=True))

        assert len(logging.getLogger("tsm").handlers) == count

    def test_unwritable_log_dir_is_tolerated(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("")

        setup_logging(Config(log_dir=blocker / "logs"))

        assert logging.getLogger("tsm").handlers


class TestLogSubprocessResult:
    """Tests for log_subprocess_result."""

    def test_failure_logs_warning(self, tmp_path: Path) -> None:
        setup_logging(Config(log_dir=tmp_path))
        logger = get_logger("tsm.test")

        log_subprocess_result(logger, ["tmux", "ls"], 1, "", "no server running", success=False)
        for handler in logging.getLogger("tsm").handlers:
            handler.flush()

        content = (tmp_path / LOG_FILE_NAME).read_text()
        assert "WARNING" in content
        assert "tmux ls (exit 1)" in content
        assert "stderr: no server running" in content


class TestCleanupOldLogs:
    """Tests for cleanup_old_logs."""

    def test_removes_old_backups_only(self, tmp_path: Path) -> None:
        current = tmp_path / LOG_FILE_NAME
        old_backup = tmp_path / f"{LOG_FILE_NAME}.1"
        new_backup = tmp_path / f"{LOG_FILE_NAME}.2"
        for path in (current, old_backup, new_backup):
            path.write_text("x")
        old = time.time() - 60 * 24 * 60 * 60
        os.utime(old_backup, (old, old))
        os.utime(current, (old, old))

        cleanup_old_logs(tmp_path, max_age_days=30)

        assert current.exists()
        assert not old_backup.exists()
        assert new_backup.exists()

    def test_missing_dir_is_noop(self, tmp_path: Path) -> None:
        cleanup_old_logs(tmp_path / "missing")
