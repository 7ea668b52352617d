"""
Environment configuration module for TextRay.

This module handles the loading of environment variables from .env files and
the process-wide logging setup used by applications embedding the comparison
core.
"""
import os
import logging
from typing import List, Optional

from dotenv import load_dotenv

from .config import Settings, log_level_map, settings as default_settings

logger = logging.getLogger(__name__)


def _candidate_env_paths() -> List[str]:
    return [
        os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', '..', '.env'),  # project root
        '.env'  # Relative to current working directory
    ]


def initialize_environment(env_path: Optional[str] = None) -> bool:
    """
    Load environment variables from a .env file.

    When ``env_path`` is given only that file is tried; otherwise the project
    root and the current working directory are checked in order. Variables
    already present in the environment are not overridden.

    Args:
        env_path: Explicit path to a .env file (optional)

    Returns:
        bool: True if a .env file was loaded, False otherwise.
    """
    possible_paths = [env_path] if env_path else _candidate_env_paths()

    for path in possible_paths:
        logger.debug(f"Checking for .env file at: {path}")
        if not os.path.isfile(path):
            continue
        try:
            load_dotenv(dotenv_path=path, override=False)
        except OSError as e:
            logger.error(f"Error loading .env file from {path}: {str(e)}")
            continue
        logger.info(f"Loaded .env file from: {path}")
        return True

    logger.warning("No .env file was loaded")
    return False


def configure_logging(settings: Optional[Settings] = None) -> int:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read LOG_LEVEL and LOG_FORMAT from; defaults to
            the module-level settings instance

    Returns:
        int: The numeric logging level that was applied
    """
    settings = settings or default_settings
    level = log_level_map.get(settings.LOG_LEVEL, logging.INFO)

    logging.basicConfig(level=level, format=settings.LOG_FORMAT)
    logging.getLogger("textray").setLevel(level)

    logger.debug(f"Logging configured for {settings.PROJECT_NAME} at level {settings.LOG_LEVEL.value}")
    return level
