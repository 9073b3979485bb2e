import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from core.constants import MB
from core.env import EnvConfigError, load_env
from core.logger import cleanup_old_logs, setup_logger
from core.utils import format_file_size


def parse_number(value: str) -> Optional[Union[int, float]]:
    """Parse a byte count, returning None if the value is not numeric."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return None


def directory_size(path: Path, logger: logging.Logger) -> int:
    """Sum the sizes of all regular files below a directory."""
    total = 0
    for entry in path.rglob("*"):
        try:
            if entry.is_file() and not entry.is_symlink():
                total += entry.stat().st_size
        except OSError as e:
            logger.warning(f"Skipping {entry}: {e}")
    return total


def resolve_size(
    value: str, logger: logging.Logger
) -> Optional[Union[int, float]]:
    """
    Turn a command-line value into a byte count.

    Args:
        value: A byte count, or a path to a file or directory
        logger: Logger for skipped entries

    Returns:
        The byte count, or None if the value is neither a number nor
        an existing path
    """
    number = parse_number(value)
    if number is not None:
        return number

    path = Path(value)
    if path.is_dir():
        return directory_size(path, logger)
    if path.is_file():
        return path.stat().st_size
    return None


def build_parser() -> argparse.ArgumentParser:
    """Build the sizefmt argument parser."""
    parser = argparse.ArgumentParser(
        prog="sizefmt",
        description="Print byte counts, files and directories as human-readable sizes.",
    )
    parser.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help="byte count, file or directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Print a human-readable size for each value and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        env = load_env()
    except EnvConfigError as e:
        setup_logger("Main", log_to_file=False).error(
            f"Environment configuration error: {e}"
        )
        return 1

    level = logging.DEBUG if args.verbose else getattr(logging, env.log_level)
    logger = setup_logger(
        "Main",
        level=level,
        log_to_file=env.log_to_file,
        max_bytes=env.log_max_size_mb * MB,
        backup_count=env.log_backup_count,
    )
    if env.log_to_file:
        removed = cleanup_old_logs(env.log_retention_days)
        logger.debug(f"Removed {removed} expired log file(s)")

    status = 0
    for value in args.values:
        try:
            size = resolve_size(value, logger)
        except OSError as e:
            logger.error(f"Cannot read size of {value}: {e}")
            status = 1
            continue

        if size is None:
            logger.error(f"Not a byte count or existing path: {value}")
            status = 1
            continue

        logger.debug(f"{value}: {size} bytes")
        print(f"{format_file_size(size)}\t{value}")

    return status


if __name__ == "__main__":
    sys.exit(main())
