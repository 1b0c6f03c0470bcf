"""Structured logging configuration for the portfolio site.

Human-readable lines go to the console. When a log file is configured, the same
records are also written there as JSON with 10MB rotation and 5 backups.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger.json import JsonFormatter


def setup_logging(log_level: str = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Configure console logging and optional JSON file logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of the JSON log file, or None for console only

    Returns:
        Configured root logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove any existing handlers
    root_logger.handlers.clear()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        json_formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
        json_handler.setFormatter(json_formatter)
        json_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(json_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(console_handler)

    # Requests are logged by our own middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in the JSON log
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)
