"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def disable_file_logging(monkeypatch):
    """
    Disable file logging during tests to prevent test output pollution.

    This fixture automatically runs for all tests and prevents log files
    from being created or written to during test execution.
    """
    from core import logger as logger_module

    # Store original function
    original_setup_logger = logger_module.setup_logger

    def patched_setup_logger(name, level=logging.INFO, log_to_file=True, log_to_console=True, **kwargs):
        # Always disable file logging in tests
        return original_setup_logger(
            name=name,
            level=level,
            log_to_file=False,
            log_to_console=log_to_console,
            **kwargs,
        )

    # Patch at the source module
    monkeypatch.setattr(logger_module, "setup_logger", patched_setup_logger)

    # Patch where it's imported in other modules
    try:
        import main as main_module
        monkeypatch.setattr(main_module, "setup_logger", patched_setup_logger)
    except (ImportError, AttributeError):
        pass


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no logging variables set."""
    for name in (
        "LOG_LEVEL",
        "LOG_TO_FILE",
        "LOG_MAX_SIZE_MB",
        "LOG_BACKUP_COUNT",
        "LOG_RETENTION_DAYS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
