"""Structured logging configuration for the poker simulator."""

import logging
import sys
from datetime import datetime, timezone
from typing import Any

from two_card_poker.config import settings

ROOT_LOGGER_NAME = "two_card_poker"


class StructuredFormatter(logging.Formatter):
    """Custom formatter that outputs structured log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with structured fields."""
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, "extra_fields"):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # key=value pairs for readability
        parts = [f"{k}={v}" for k, v in log_data.items() if v is not None]
        return " | ".join(parts)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that supports adding context fields to log messages."""

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Process the log message and add extra fields."""
        extra = kwargs.get("extra", {})
        extra["extra_fields"] = {**self.extra, **extra.get("extra_fields", {})}
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(
    level: int | str = logging.WARNING,
    format_style: str = "structured",
) -> None:
    """
    Set up logging configuration for the application.

    Args:
        level: Logging level, as a number or a name like "INFO"
        format_style: "structured" for key=value, "simple" for standard format
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # stderr keeps the CLI's stdout output clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if format_style == "structured":
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger.addHandler(handler)


def get_logger(name: str, **context: Any) -> ContextLogger:
    """
    Get a logger instance with optional context fields.

    Args:
        name: Logger name (usually __name__)
        **context: Context fields to include in all log messages

    Returns:
        ContextLogger instance

    Example:
        logger = get_logger(__name__, game_id="abc123")
        logger.info("Round complete")  # Includes game_id
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return ContextLogger(logging.getLogger(name), context)


# Initialize logging on import
setup_logging(settings.log_level, settings.log_format)
