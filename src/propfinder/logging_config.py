"""
Logging Configuration Module

One handler set on the ``propfinder`` logger, shared by the API, the
database wrapper and the CLI.

Usage:
    from propfinder.logging_config import setup_logging, get_logger

    setup_logging()  # Call once at application startup
    logger = get_logger(__name__)
    logger.info("Application started")
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from propfinder.config import get_config

PACKAGE_LOGGER = "propfinder"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# The supabase client talks to PostgREST over httpx
QUIET_LOGGERS = ("httpx", "httpcore", "hpack", "urllib3")

# Flask's dev server logs one line per request
REQUEST_LOGGER = "werkzeug"

_logging_configured = False


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> None:
    """Configure the ``propfinder`` logger.

    Args:
        level: Log level name. Defaults to ``PROPFINDER_LOG_LEVEL``.
        log_file: Extra file to log to. Defaults to ``PROPFINDER_LOG_FILE``.
        force: Rebuild the handlers even if logging is already set up.
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    settings = get_config().logging
    numeric_level = getattr(logging, (level or settings.level).upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _close_handlers(package_logger)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False

    for handler in _build_handlers(log_file or settings.log_file):
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    # Request lines only show up when the API itself logs at INFO or below
    logging.getLogger(REQUEST_LOGGER).setLevel(max(numeric_level, logging.INFO))
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``propfinder`` namespace, e.g. ``propfinder.api.routes``."""
    if not _logging_configured:
        setup_logging()

    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)


def _close_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def reset_logging() -> None:
    """Reset logging configuration (useful for testing)."""
    global _logging_configured
    _logging_configured = False
    _close_handlers(logging.getLogger(PACKAGE_LOGGER))
