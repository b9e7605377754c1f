"""Logging setup for the rankings service."""

import logging
from typing import Optional

from .config import ConfigService

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(config: Optional[ConfigService] = None) -> None:
    """Apply the configured level and format to the root logger.

    Args:
        config: Loaded config service. Defaults apply when None or when the
            logging section is missing.
    """
    level = DEFAULT_LOG_LEVEL
    log_format = DEFAULT_LOG_FORMAT
    if config is not None:
        level = config.get("logging.level", DEFAULT_LOG_LEVEL)
        log_format = config.get("logging.format", DEFAULT_LOG_FORMAT)

    logging.basicConfig(level=level, format=log_format, force=True)
    logger.debug(f"Logging configured at {level}")
