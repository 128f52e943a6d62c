# Standard library imports
from collections.abc import MutableMapping
from functools import lru_cache
import logging
import sys
from typing import Any

# Local application imports
from civicconnect.settings import settings


class CustomFormatter(logging.Formatter):
    """
    Console formatter that colors records by level.
    """

    GREY = "\x1b[38;20m"
    YELLOW = "\x1b[33;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    FORMATS = {
        logging.DEBUG: GREY + CONSOLE_FORMAT + RESET,
        logging.INFO: GREY + CONSOLE_FORMAT + RESET,
        logging.WARNING: YELLOW + CONSOLE_FORMAT + RESET,
        logging.ERROR: RED + CONSOLE_FORMAT + RESET,
        logging.CRITICAL: BOLD_RED + CONSOLE_FORMAT + RESET,
    }

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno, self.CONSOLE_FORMAT)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


@lru_cache
def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """
    Get a logger with the given name.

    The console handler lives on the top-level package logger only (e.g.
    ``civicconnect`` for ``civicconnect.services.auth``); module loggers
    propagate to it, so each record is printed once. Records
    of WARNING and above also reach Sentry in production through the
    logging integration set up in ``core.monitoring.sentry``.

    Args:
        name: The name of the logger
        level: Optional logging level override

    Returns:
        A configured logger instance
    """
    package_logger = logging.getLogger(name.split(".", 1)[0])
    if not package_logger.handlers:
        default_level = logging.DEBUG if settings.DEBUG_MODE else logging.INFO
        package_logger.setLevel(default_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(CustomFormatter())
        package_logger.addHandler(console_handler)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)

    return logger


class LoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """
    Logger adapter that appends ``key=value`` context to every message.
    """

    def __init__(self, logger: logging.Logger, extra: dict[str, Any] | None = None):
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        if self.extra:
            context_str = " ".join(f"{k}={v}" for k, v in self.extra.items() if v is not None)
            if context_str:
                msg = f"{msg} [{context_str}]"
        return msg, kwargs


def get_contextual_logger(name: str, **context: Any) -> LoggerAdapter:
    """
    Get a logger whose messages carry the given context, e.g. the acting
    viewer or the issue being touched.

    Args:
        name: The name of the logger
        **context: Context parameters to include in every message

    Returns:
        A configured logger adapter
    """
    logger = get_logger(name)
    return LoggerAdapter(logger, context)
