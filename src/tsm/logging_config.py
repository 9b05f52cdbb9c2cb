"""Logging configuration for the tsm CLI."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.logging import RichHandler

from tsm.console import err_console

if TYPE_CHECKING:
    from tsm.models.config import Config

_initialized: bool = False

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "tsm.log"


def default_log_dir() -> Path:
    """Return the default logging directory (kept outside ~/.tsm)."""
    return Path.home() / ".local" / "state" / "tsm"


def setup_logging(config: Config | None = None) -> None:
    """Initialize the logging system.

    Args:
        config: Optional runtime config. If verbose=True, logs DEBUG to the
                file and mirrors records to stderr through rich.
    """
    global _initialized  # noqa: PLW0603
    if _initialized:
        return

    verbose = bool(config and config.verbose)
    log_dir = config.log_dir if config else default_log_dir()
    log_level = logging.DEBUG if verbose else logging.INFO

    root_logger = logging.getLogger("tsm")
    root_logger.setLevel(logging.DEBUG)  # Capture everything; handlers filter
    root_logger.propagate = False
    root_logger.handlers.clear()

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError:
        # Unwritable log dir: run without a log file
        root_logger.addHandler(logging.NullHandler())
    else:
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root_logger.addHandler(file_handler)

    if verbose:
        rich_handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
        rich_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(rich_handler)

    _initialized = True
    root_logger.debug(f"Logging initialized (dir={log_dir}, verbose={verbose})")


def reset_logging() -> None:
    """Drop all tsm handlers so setup_logging() can run again."""
    global _initialized  # noqa: PLW0603
    root_logger = logging.getLogger("tsm")
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
    _initialized = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (e.g., "tsm.services.tmux")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_subprocess_result(
    logger: logging.Logger,
    cmd: list[str] | str,
    exit_code: int,
    stdout: str | None = None,
    stderr: str | None = None,
    success: bool = True,
) -> None:
    """Log the result of a subprocess call.

    Args:
        logger: The logger to use
        cmd: Command that was executed
        exit_code: Process exit code
        stdout: Captured stdout (if any)
        stderr: Captured stderr (if any)
        success: Whether the operation succeeded
    """
    cmd_str = cmd if isinstance(cmd, str) else " ".join(cmd)
    level = logging.DEBUG if success else logging.WARNING

    logger.log(level, f"Subprocess: {cmd_str} (exit {exit_code})")

    for label, output in (("stdout", stdout), ("stderr", stderr)):
        if not output or not output.strip():
            continue
        lines = output.strip().split("\n")
        for line in lines[:20]:
            logger.log(level, f"  {label}: {line}")
        if len(lines) > 20:
            logger.log(level, f"  {label}: ... (truncated)")


def cleanup_old_logs(log_dir: Path, max_age_days: int = 30) -> None:
    """Remove rotated log backups older than max_age_days.

    Args:
        log_dir: Directory holding tsm.log and its backups
        max_age_days: Delete backups older than this many days
    """
    if not log_dir.is_dir():
        return

    cutoff = datetime.now(tz=UTC).timestamp() - (max_age_days * 24 * 60 * 60)
    logger = get_logger("tsm.logging")

    for log_file in log_dir.glob(f"{LOG_FILE_NAME}.*"):
        try:
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                logger.debug(f"Cleaned up old log file: {log_file}")
        except OSError as e:
            logger.warning(f"Failed to clean up log file {log_file}: {e}")
