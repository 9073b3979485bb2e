"""Tests for data models."""

import pytest
from pydantic import ValidationError

from models.env import EnvConfig


class TestEnvConfig:
    """Tests for EnvConfig model."""

    def test_explicit_values(self, clean_env):
        """Test creating a config from keyword arguments."""
        config = EnvConfig(
            log_level="error",
            log_to_file=True,
            log_max_size_mb=20,
            log_backup_count=10,
            log_retention_days=14,
        )
        assert config.log_level == "ERROR"
        assert config.log_to_file is True
        assert config.log_max_size_mb == 20
        assert config.log_backup_count == 10
        assert config.log_retention_days == 14

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_accepts_standard_levels(self, clean_env, level):
        """Test that every standard logging level is accepted."""
        assert EnvConfig(log_level=level.lower()).log_level == level

    def test_rejects_unknown_level(self, clean_env):
        """Test that an unknown level is rejected."""
        with pytest.raises(ValidationError):
            EnvConfig(log_level="VERBOSE")

    def test_rejects_negative_max_size(self, clean_env):
        """Test that a non-positive log file size is rejected."""
        with pytest.raises(ValidationError):
            EnvConfig(log_max_size_mb=-1)

    def test_env_file_configured(self):
        """Test that the model reads a .env file."""
        assert EnvConfig.model_config["env_file"] == ".env"
