"""
Structured JSON logging for card-validator

This module provides consistent structured logging across the package
using python-json-logger for easy parsing and analysis.
"""
import logging
import os
import sys
import time

from pythonjsonlogger import jsonlogger

DEFAULT_LOGGER_NAME = "card-validator"

# Log level mapping
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class CardValidatorJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter emitting a fixed set of record attributes on every line
    """

    RECORD_FIELDS = {
        "logger": "name",
        "level": "levelname",
        "module": "module",
        "function": "funcName",
        "line": "lineno",
    }

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = self.formatTime(record, self.datefmt)
        for key, attribute in self.RECORD_FIELDS.items():
            log_record[key] = getattr(record, attribute)


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    format_type: str | None = None,
) -> logging.Logger:
    """
    Setup and configure a logger

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); LOG_LEVEL env var otherwise
        format_type: "json" or "text"; LOG_FORMAT env var otherwise

    Returns:
        Configured logger instance
    """
    log_level_str = level or os.getenv("LOG_LEVEL", "WARNING")
    log_level = LOG_LEVELS.get(log_level_str.upper(), logging.WARNING)
    format_type = format_type or os.getenv("LOG_FORMAT", "json")

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Reports go to stdout, so logs stay on stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)

    if format_type == "json":
        formatter = CardValidatorJsonFormatter(
            fmt="%(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance, configuring it on first use

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        return setup_logger(name)

    return logger


class log_operation:
    """
    Context manager timing a named operation

    Logs a debug line on entry and an info line with the elapsed time on
    success. On failure the exception is logged with its type and then
    re-raised.

    Usage:
        with log_operation("Validating cards", logger=logger, card_count=120):
            ...
    """

    def __init__(self, operation_name: str, logger: logging.Logger | None = None, **extra_fields):
        self.operation_name = operation_name
        self.logger = logger or get_logger()
        self.extra_fields = extra_fields
        self.started = 0.0

    def _fields(self, **fields) -> dict:
        return {"operation": self.operation_name, **self.extra_fields, **fields}

    def __enter__(self):
        self.started = time.perf_counter()
        self.logger.debug(f"{self.operation_name} started", extra=self._fields())
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed = round(time.perf_counter() - self.started, 3)

        if exc_type is None:
            self.logger.info(
                f"{self.operation_name} finished in {elapsed}s",
                extra=self._fields(duration_seconds=elapsed, status="success"),
            )
            return False

        self.logger.error(
            f"{self.operation_name} failed after {elapsed}s: {exc_type.__name__}",
            extra=self._fields(duration_seconds=elapsed, status="error", error_type=exc_type.__name__),
            exc_info=(exc_type, exc_val, exc_tb),
        )
        return False


def set_package_level(level: str, prefix: str = "card_validator") -> None:
    """
    Reconfigure every already-created package logger with a new level

    Args:
        level: Log level name
        prefix: Logger name prefix to match
    """
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith(prefix):
            setup_logger(name, level=level)
