"""
Logging setup for sizefmt.

Console output is colorized through colorlog; file output goes to
size-rotated files under the logs directory, opened only when the
first record is written.
"""

import logging
import re
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Set

import colorlog

from core.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_MAX_SIZE_MB,
    DEFAULT_LOG_RETENTION_DAYS,
    MB,
)

__all__ = [
    "LOG_COLORS",
    "LazyRotatingFileHandler",
    "cleanup_old_logs",
    "get_all_loggers",
    "get_logs_dir",
    "setup_logger",
]

LOG_FORMAT = "%(asctime)s | %(name)-15s | %(levelname)-8s | %(message)s"
LOG_COLOR_FORMAT = (
    "%(asctime)s | %(name)-15s | %(log_color)s%(levelname)-8s%(reset)s | %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

# Matches app.log, app.log.1, app.log.2, ...
_LOG_FILE_PATTERN = re.compile(r"\.log(\.\d+)?$")

# Overridable in tests; None means ./logs under the working directory
_logs_dir: Optional[Path] = None
_created_loggers: Set[str] = set()


class LazyRotatingFileHandler(RotatingFileHandler):
    """
    Rotating file handler that defers opening its file until the first emit.

    Parent directories are created at that point, so merely configuring
    a logger never touches the file system.
    """

    def __init__(
        self,
        filename: str,
        mode: str = "a",
        maxBytes: int = 0,
        backupCount: int = 0,
        encoding: Optional[str] = "utf-8",
    ) -> None:
        super().__init__(
            filename=filename,
            mode=mode,
            maxBytes=maxBytes,
            backupCount=backupCount,
            encoding=encoding,
            delay=True,
        )

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


def get_logs_dir() -> Path:
    """Return the logs directory, creating it if it doesn't exist."""
    logs_dir = _logs_dir if _logs_dir is not None else Path.cwd() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_all_loggers() -> List[str]:
    """Return the names of all loggers configured through setup_logger."""
    return sorted(_created_loggers)


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
    max_bytes: int = DEFAULT_LOG_MAX_SIZE_MB * MB,
    backup_count: int = DEFAULT_LOG_BACKUP_COUNT,
) -> logging.Logger:
    """Configure and create a logger instance with console and/or file output

    Args:
        name (str): logger name
        level (int): logging level applied to the logger and its handlers
        log_to_file (bool): attach a rotating file handler writing <name>.log
        log_to_console (bool): attach a colorized console handler
        max_bytes (int): size at which the log file is rotated
        backup_count (int): number of rotated files to keep

    Returns:
        logging.Logger: configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding duplicate handlers
    if not logger.handlers:
        if log_to_console:
            console_handler = colorlog.StreamHandler()
            console_handler.setFormatter(
                colorlog.ColoredFormatter(
                    fmt=LOG_COLOR_FORMAT,
                    datefmt=LOG_DATE_FORMAT,
                    log_colors=LOG_COLORS,
                )
            )
            logger.addHandler(console_handler)

        if log_to_file:
            file_handler = LazyRotatingFileHandler(
                filename=str(get_logs_dir() / f"{name}.log"),
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
            file_handler.setFormatter(
                logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
            )
            logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    _created_loggers.add(name)
    return logger


def cleanup_old_logs(retention_days: int = DEFAULT_LOG_RETENTION_DAYS) -> int:
    """
    Remove log files older than the retention period.

    Rotated files (app.log.1, app.log.2, ...) are included.

    Args:
        retention_days: Age in days after which a log file is removed

    Returns:
        int: Number of files removed
    """
    cutoff = time.time() - retention_days * 24 * 60 * 60
    removed = 0

    for path in get_logs_dir().iterdir():
        if not path.is_file() or not _LOG_FILE_PATTERN.search(path.name):
            continue
        try:
            if path.stat().st_mtime < cutoff:
                path.unlink()
                removed += 1
        except OSError as e:
            logging.getLogger(__name__).warning(
                f"Failed to remove old log file {path}: {e}"
            )

    return removed
