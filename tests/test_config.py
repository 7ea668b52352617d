"""
Tests for the configuration and environment modules of TextRay.
"""
import logging
import os
from pathlib import Path
from typing import Dict

import pytest
from pydantic import ValidationError

from textray.core.config import EnvironmentType, LogLevel, Settings
from textray.core.environment import configure_logging, initialize_environment


def test_settings_defaults(clean_env: None) -> None:
    """Test default settings with no environment overrides."""
    settings = Settings(_env_file=None)

    assert settings.ENVIRONMENT == EnvironmentType.DEVELOPMENT
    assert settings.PROJECT_NAME == "TextRay"
    assert settings.LOG_LEVEL == LogLevel.INFO
    assert "%(message)s" in settings.LOG_FORMAT


def test_settings_from_environment(mock_settings: Dict[str, str]) -> None:
    """Test that settings are read from environment variables."""
    settings = Settings(_env_file=None)

    assert settings.ENVIRONMENT == EnvironmentType.TEST
    assert settings.DEBUG is True
    # Lower-case level names are accepted
    assert settings.LOG_LEVEL == LogLevel.DEBUG
    assert settings.PROJECT_NAME == "TextRay Test"


def test_settings_rejects_unknown_log_level(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that an invalid log level fails validation."""
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_initialize_environment_loads_file(
    clean_env: None,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test loading variables from an explicit .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("PROJECT_NAME=TextRay From File\nLOG_LEVEL=WARNING\n", encoding="utf-8")
    # Isolate what load_dotenv writes
    monkeypatch.setattr(os, "environ", os.environ.copy())

    assert initialize_environment(str(env_file)) is True
    assert os.environ["PROJECT_NAME"] == "TextRay From File"
    assert Settings(_env_file=None).LOG_LEVEL == LogLevel.WARNING


def test_initialize_environment_does_not_override(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that existing environment variables win over the .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("PROJECT_NAME=From File\n", encoding="utf-8")
    monkeypatch.setattr(os, "environ", os.environ.copy())
    monkeypatch.setenv("PROJECT_NAME", "From Environment")

    assert initialize_environment(str(env_file)) is True
    assert os.environ["PROJECT_NAME"] == "From Environment"


def test_initialize_environment_missing_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """Test that a missing .env file is reported, not raised."""
    with caplog.at_level(logging.WARNING, logger="textray"):
        loaded = initialize_environment(str(tmp_path / "missing.env"))

    assert loaded is False
    assert any("No .env file" in record.message for record in caplog.records)


def test_configure_logging(mock_settings: Dict[str, str]) -> None:
    """Test that logging follows the configured level."""
    package_logger = logging.getLogger("textray")
    previous = package_logger.level
    try:
        level = configure_logging(Settings(_env_file=None))

        assert level == logging.DEBUG
        assert package_logger.level == logging.DEBUG
    finally:
        package_logger.setLevel(previous)


def test_importing_config_leaves_logger_levels_alone() -> None:
    """Test that only configure_logging changes logger levels."""
    assert logging.getLogger("textray.core.config").level == logging.NOTSET
