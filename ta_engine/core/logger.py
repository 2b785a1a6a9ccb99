"""Logging configuration for the indicator engine.

Indicator functions log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Applications (and the DataFrame adapters) call
``get_engine_logger`` to attach console/file handlers to the ``ta_engine``
root logger; every child logger then propagates into it.
"""

import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime
from enum import StrEnum
from typing import Any

ROOT_LOGGER_NAME = "ta_engine"

_RESERVED_RECORD_KEYS = frozenset(
    {
        'name',
        'msg',
        'args',
        'levelname',
        'levelno',
        'pathname',
        'filename',
        'module',
        'lineno',
        'funcName',
        'created',
        'msecs',
        'relativeCreated',
        'thread',
        'threadName',
        'processName',
        'process',
        'taskName',
        'getMessage',
        'exc_info',
        'exc_text',
        'stack_info',
    }
)


class LogLevel(StrEnum):
    """Log level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(StrEnum):
    """Log format enumeration."""

    STANDARD = "STANDARD"
    JSON = "JSON"


class StructuredFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        # Extra fields (e.g. symbol) are carried through verbatim
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


class LoggerContextFilter(logging.Filter):
    """Ensure every record carries a ``symbol`` attribute."""

    def __init__(self, symbol: str | None = None, *, is_default: bool = False) -> None:
        """Initialize the filter with an optional symbol override."""
        super().__init__()
        self.symbol = symbol
        self.is_default = is_default

    def filter(self, record: logging.LogRecord) -> bool:
        """Inject the symbol if the record does not already have one."""
        if self.symbol is not None:
            record.symbol = self.symbol
        elif getattr(record, 'symbol', None) is None:
            record.symbol = '-'
        return True


def _normalized_logger_name(name: str) -> str:
    if not name or name == ROOT_LOGGER_NAME:
        return ROOT_LOGGER_NAME
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return name
    return f"{ROOT_LOGGER_NAME}.{name}"


def _has_default_context(filterable: logging.Filterer) -> bool:
    return any(
        isinstance(existing, LoggerContextFilter) and existing.is_default
        for existing in filterable.filters
    )


def _ensure_default_context(filterable: logging.Filterer) -> None:
    """Attach a default context filter so format strings can reference %(symbol)s."""
    if not _has_default_context(filterable):
        filterable.addFilter(LoggerContextFilter(is_default=True))


def bind_logger_context(logger: logging.Logger, *, symbol: str | None = None) -> logging.Logger:
    """Bind an instrument symbol to an existing logger instance."""
    if symbol is None:
        return logger

    for existing in list(logger.filters):
        if isinstance(existing, LoggerContextFilter) and not existing.is_default:
            logger.removeFilter(existing)
    logger.addFilter(LoggerContextFilter(symbol=symbol))
    return logger


class EngineLogger:
    """Factory for configured engine loggers."""

    @staticmethod
    def get_logger(
        name: str,
        level: LogLevel | str = LogLevel.INFO,
        file_path: str | None = None,
        max_file_size: int = 10485760,  # 10MB
        backup_count: int = 5,
        console: bool = True,
        log_format: LogFormat | str = LogFormat.STANDARD,
    ) -> logging.Logger:
        """Get or configure a logger.

        A logger that has already been configured by this method is returned
        unchanged, so repeated calls never stack duplicate handlers.

        Args:
            name: Logger name
            level: Log level, a LogLevel or its case-insensitive name
            file_path: Optional path for a rotating log file
            max_file_size: Maximum size of the log file before rotation
            backup_count: Number of rotated files to keep
            console: Whether to log to stdout
            log_format: STANDARD text lines or JSON objects, one per record

        Returns:
            The configured logger

        Raises:
            ValueError: If the level or format name is unknown
        """
        logger = logging.getLogger(name)
        if _has_default_context(logger):
            return logger

        log_level = LogLevel(str(level).upper())
        resolved_format = LogFormat(str(log_format).upper())
        logger.setLevel(getattr(logging, log_level.value))
        logger.handlers.clear()

        if resolved_format is LogFormat.JSON:
            formatter: logging.Formatter = StructuredFormatter()
        else:
            formatter = logging.Formatter(
                '%(asctime)s | %(levelname)s | %(name)s | symbol=%(symbol)s | '
                '%(module)s:%(funcName)s:%(lineno)d | %(message)s'
            )

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)
            _ensure_default_context(console_handler)

        if file_path:
            directory = os.path.dirname(file_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                file_path, maxBytes=max_file_size, backupCount=backup_count
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            _ensure_default_context(file_handler)

        _ensure_default_context(logger)
        return logger


def get_engine_logger(
    name: str = ROOT_LOGGER_NAME,
    *,
    symbol: str | None = None,
    **kwargs: Any,
) -> logging.Logger:
    """Get an engine logger, configuring the ``ta_engine`` root on first use.

    Keyword arguments are forwarded to ``EngineLogger.get_logger`` for the
    root logger.
    """
    root_logger = EngineLogger.get_logger(ROOT_LOGGER_NAME, **kwargs)
    normalized_name = _normalized_logger_name(name)
    if normalized_name == root_logger.name:
        target_logger = root_logger
    else:
        relative_name = normalized_name.split(f"{ROOT_LOGGER_NAME}.", 1)[1]
        target_logger = root_logger.getChild(relative_name)
        _ensure_default_context(target_logger)
    return bind_logger_context(target_logger, symbol=symbol)
