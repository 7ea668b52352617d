"""
Pytest configuration file for TextRay.

This module defines fixtures and configuration for pytest tests.
"""
import sys
import logging
from typing import Dict, Generator, TYPE_CHECKING
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

if TYPE_CHECKING:
    from _pytest.monkeypatch import MonkeyPatch


# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@pytest.fixture
def sample_texts() -> Dict[str, str]:
    """
    Provide a pair of ordinary English passages for comparison tests.

    Returns:
        Dict[str, str]: Two passages sharing a few content words
    """
    return {
        "text1": "The quick brown fox jumps over the lazy dog near the river bank.",
        "text2": "A lazy dog sleeps by the river while the brown cat watches.",
    }


@pytest.fixture
def mock_settings(monkeypatch: "MonkeyPatch") -> Dict[str, str]:
    """
    Apply test settings through environment variables.

    Args:
        monkeypatch: Pytest monkeypatch fixture

    Returns:
        Dict[str, str]: Dictionary of applied test settings
    """
    test_settings = {
        "ENVIRONMENT": "test",
        "DEBUG": "true",
        "LOG_LEVEL": "debug",
        "PROJECT_NAME": "TextRay Test",
    }

    for key, value in test_settings.items():
        monkeypatch.setenv(key, value)

    return test_settings


@pytest.fixture
def clean_env(monkeypatch: "MonkeyPatch") -> Generator[None, None, None]:
    """
    Provide a clean environment for tests.

    Temporarily unsets environment variables that might interfere with tests.

    Args:
        monkeypatch: Pytest monkeypatch fixture

    Yields:
        None
    """
    env_vars = [
        "ENVIRONMENT",
        "DEBUG",
        "LOG_LEVEL",
        "LOG_FORMAT",
        "PROJECT_NAME",
        "VERSION",
    ]

    for var in env_vars:
        monkeypatch.delenv(var, raising=False)

    yield
