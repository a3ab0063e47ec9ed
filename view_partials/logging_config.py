"""Structured logging configuration for View Partials.

Records go to a rotating JSON file (views.log, 10MB x 5) and to the console in
plain text. Partial renders are logged at DEBUG with an ``event_type`` field;
their loggers can be tuned separately from the root level so a busy page does
not flood the console while the rest of the app stays verbose.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger import jsonlogger

DEFAULT_LOG_DIR = Path(__file__).parent.parent / "logs"
LOG_FILE_NAME = "views.log"

# Loggers emitting one record per rendered template
RENDER_LOGGERS = ("view_partials.partials", "view_partials.views.template_renderer")

QUIET_LOGGERS = ("uvicorn.access", "multipart")


def parse_level(level: str) -> int:
    """Translate a level name ("debug", "INFO", ...) to its numeric value.

    Raises:
        ValueError: If ``level`` is not a standard logging level name
    """
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path | None = None,
    render_log_level: str | None = None,
) -> logging.Logger:
    """Configure the root logger for the view layer.

    Args:
        log_level: Root and console level
        log_dir: Directory for views.log (defaults to <repo>/logs)
        render_log_level: Level for the partial render loggers; None leaves
            them inheriting ``log_level``

    Returns:
        Configured root logger instance
    """
    level = parse_level(log_level)
    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
    )
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    render_level = parse_level(render_log_level) if render_log_level else logging.NOTSET
    for name in RENDER_LOGGERS:
        logging.getLogger(name).setLevel(render_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance configured for structured logging
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
        **extra_fields: Fields added to the JSON record (e.g., template_path, event_type)
    """
    getattr(logger, level.lower())(message, extra=extra_fields)
