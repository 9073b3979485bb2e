"""
Shared constants for sizefmt.

Centralizes the byte-size unit table and logging defaults used
across multiple modules.
"""

from types import MappingProxyType

# Byte-size units, each 1024x the previous
KB = 1024
MB = KB * KB
GB = MB * KB
TB = GB * KB

# Read-only unit table, ordered from smallest to largest
SIZE_UNITS = MappingProxyType(
    {
        "KB": KB,
        "MB": MB,
        "GB": GB,
        "TB": TB,
    }
)

# Logging configuration
DEFAULT_LOG_MAX_SIZE_MB = 5
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOG_RETENTION_DAYS = 30
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

__all__ = [
    "KB",
    "MB",
    "GB",
    "TB",
    "SIZE_UNITS",
    "DEFAULT_LOG_MAX_SIZE_MB",
    "DEFAULT_LOG_BACKUP_COUNT",
    "DEFAULT_LOG_RETENTION_DAYS",
    "LOG_LEVELS",
]
