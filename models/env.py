from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_MAX_SIZE_MB,
    DEFAULT_LOG_RETENTION_DAYS,
    LOG_LEVELS,
)


class EnvConfig(BaseSettings):
    """
    Environment configuration model.
    Handles logging settings read from the environment or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Console and file log level")
    log_to_file: bool = Field(
        default=False,
        description="Write logs to rotating files under ./logs",
    )
    log_max_size_mb: int = Field(
        default=DEFAULT_LOG_MAX_SIZE_MB,
        ge=1,
        le=100,
        description="Maximum size of a single log file in MB",
    )
    log_backup_count: int = Field(
        default=DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=50,
        description="Number of rotated log files to keep",
    )
    log_retention_days: int = Field(
        default=DEFAULT_LOG_RETENTION_DAYS,
        ge=1,
        le=365,
        description="Days after which log files are removed",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level
