"""Structured logging for the admin view layer.

Every record written by this package carries an ``event_type`` plus the
identifiers needed to trace a rendering problem back to its source, e.g.
``template``, ``type_name`` or ``resource_id``. The JSON file log keeps
those fields; the console log shows the message only.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

LOG_FILE_NAME = "admin.log"

# Third-party loggers that are chatty at INFO during page rendering
NOISY_LOGGERS = ("jinja2", "uvicorn.access", "multipart", "python_multipart")

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s %(module)s %(lineno)d"


def _json_file_handler(log_dir: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            JSON_FORMAT,
            rename_fields={"levelname": "level", "name": "logger"},
            static_fields={"service": "crud-admin"},
            timestamp=True,
        )
    )
    handler.setLevel(logging.DEBUG)
    return handler


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)-8s [%(name)s] %(message)s", datefmt="%H:%M:%S"))
    handler.setLevel(level)
    return handler


def setup_logging(log_level: str = "INFO", log_dir: Path | None = None) -> logging.Logger:
    """Install the JSON file handler and the console handler on the root logger.

    Args:
        log_level: Console level (DEBUG, INFO, WARNING, ERROR, CRITICAL); the
            file log always records DEBUG and up
        log_dir: Directory for the JSON log file (defaults to ./logs next to the package)

    Returns:
        Configured root logger instance
    """
    level = getattr(logging, log_level.upper())
    log_dir = log_dir or Path(__file__).parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, logging.DEBUG))
    root_logger.handlers.clear()
    root_logger.addHandler(_json_file_handler(log_dir))
    root_logger.addHandler(_console_handler(level))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    *,
    event_type: str,
    **extra_fields: Any,
) -> None:
    """Log ``message`` with structured fields.

    Args:
        logger: Logger instance
        level: Log level name (debug, info, warning, error, critical)
        message: Log message
        event_type: Machine-readable event name, e.g. "template_not_found"
        **extra_fields: Context such as template, type_name or resource_id
    """
    getattr(logger, level.lower())(message, extra={"event_type": event_type, **extra_fields})
