"""
Logging setup for the pratilipi package.

Package modules log through ``logger``; records go to stdout through one
handler owned by the ``pratilipi`` logger and never reach the root logger.
"""

import logging
import sys
from typing import Optional

from pratilipi.utils.config import config

PACKAGE_LOGGER_NAME = "pratilipi"

# HTTP client libraries used by the AI backends
CHATTY_LOGGERS = ("httpx", "httpcore", "google_genai", "openai")


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> logging.Logger:
    """
    Point the package logger at stdout with the given level and format.

    Calling it again replaces the handler rather than adding a second one.

    Args:
        level: Log level name, defaults to LOG_LEVEL
        log_format: Format string, defaults to LOG_FORMAT

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level or config.log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(log_format or config.log_format))
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.propagate = False

    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, package_logger.level))

    return package_logger


configure_logging()

logger = logging.getLogger(__name__)
