"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Context binding support
- Dual output (stderr + optional file logging)

Configuration is loaded from work_catalog.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- WCAT_LOG_TO_FILE: Enable file logging. Default: disabled
- WCAT_LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from work_catalog.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("catalog.built", work_count=5)
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError
from structlog.types import Processor

from work_catalog.config import get_settings

_HANDLER_MARKER = "_work_catalog_handler"


def _get_log_level() -> int:
    """Get log level from settings.

    Falls back to the raw LOG_LEVEL environment variable when the settings
    themselves fail validation, so a bad config value is still reported
    through a working logger.
    """
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except ValidationError:
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    try:
        return get_settings().log_to_file
    except ValidationError:
        return False


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    log_dir = Path(get_settings().log_file_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: workcatalog-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"workcatalog-{date_str}.log"


def _install_handler(handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    setattr(handler, _HANDLER_MARKER, True)
    logging.root.addHandler(handler)


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - JSON renderer
    - Dual output (stderr + optional file)
    """
    level = _get_log_level()

    # Drop handlers from a previous configuration so re-configuring is idempotent
    for handler in list(logging.root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)

    _install_handler(logging.StreamHandler(), level)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,  # 30-day retention
            encoding="utf-8",
        )
        _install_handler(file_handler, level)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(command="export")
        >>> logger.info("catalog.exported", path="build/works.json")
    """
    return structlog.get_logger().bind(**kwargs)
