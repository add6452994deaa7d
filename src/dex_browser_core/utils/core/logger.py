"""
Logging utilities for the catalog browser.

Every module gets its logger from get_logger(__name__). Console output goes to
stderr (colored or plain text, or JSON lines), so the CLI can write HTML to
stdout. A rotating file per module is added when file logging is enabled.
Settings come from a BrowserConfig via configure_logging_system().
"""

import json
import logging
import sys
import time
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Global configuration (with defaults, can be overridden via configure_logging_system)
LOG_DIR = Path("logs")
LOG_LEVEL = "INFO"
LOG_FORMAT_JSON = False
LOG_TO_FILE = False
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB in bytes
BACKUP_COUNT = 5
CONSOLE_COLORS = True

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks loggers built by setup_logger so reconfiguration only touches ours
_MANAGED_ATTR = "_dex_browser_managed"

# Attributes every LogRecord has; anything else on a record came in via `extra=`
_RESERVED_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def configure_logging_system(config):
    """Apply a BrowserConfig's logging settings.

    Loggers already handed out by get_logger() have their handlers rebuilt, so
    module-level loggers pick up the new settings too.

    Args:
        config: BrowserConfig instance with logging settings
    """
    global LOG_DIR, LOG_LEVEL, LOG_FORMAT_JSON, LOG_TO_FILE, MAX_LOG_SIZE, BACKUP_COUNT, CONSOLE_COLORS

    LOG_DIR = Path(config.logging_log_dir)
    LOG_LEVEL = config.logging_level.upper()
    LOG_FORMAT_JSON = config.logging_format == "json"
    LOG_TO_FILE = config.logging_to_file
    MAX_LOG_SIZE = config.logging_max_log_size_mb * 1024 * 1024
    BACKUP_COUNT = config.logging_backup_count
    CONSOLE_COLORS = config.logging_console_colors

    for name, logger_obj in list(logging.Logger.manager.loggerDict.items()):
        if not getattr(logger_obj, _MANAGED_ATTR, False):
            continue
        for handler in list(logger_obj.handlers):
            handler.close()
            logger_obj.removeHandler(handler)
        setup_logger(name)


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string.

        Args:
            record (logging.LogRecord): The log record to format.

        Returns:
            str: The record, including any `extra=` fields, as JSON.
        """
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        payload.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RESERVED_RECORD_ATTRS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter that colors the level name with ANSI codes."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno)
        if color is None:
            return super().formatMessage(record)

        # Swap the level name only for this rendering; other handlers share the record
        levelname = record.levelname
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = levelname


def _console_formatter() -> logging.Formatter:
    if LOG_FORMAT_JSON:
        return JSONFormatter()
    if CONSOLE_COLORS and sys.stderr.isatty():
        return ColoredConsoleFormatter(CONSOLE_FORMAT)
    return logging.Formatter(CONSOLE_FORMAT)


def _default_log_file(name: str) -> Path:
    """Map a dotted logger name to a nested log file (a.b.c -> a/b/c.log)."""
    *packages, module = name.split(".")
    return Path(*packages, f"{module}.log")


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Attach the configured handlers to a logger.

    Calling this again for a logger that already has its handlers is a no-op.

    Args:
        name (str): Logger name (typically __name__ from calling module)
        level (Optional[str], optional): Log level name. Defaults to the configured LOG_LEVEL.
        log_file (Optional[str], optional): File name under LOG_DIR. Defaults to one derived from `name`.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    if getattr(logger, _MANAGED_ATTR, False) and logger.handlers:
        return logger

    log_level = logging.getLevelName((level or LOG_LEVEL).upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logger.setLevel(log_level)
    setattr(logger, _MANAGED_ATTR, True)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(_console_formatter())
    logger.addHandler(console_handler)

    if LOG_TO_FILE:
        file_path = LOG_DIR / (log_file or _default_log_file(name))
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            JSONFormatter() if LOG_FORMAT_JSON else logging.Formatter(FILE_FORMAT)
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the specified module.

    Args:
        name (str): The name of the logger (typically __name__ from the calling module).

    Returns:
        logging.Logger: Configured logger instance.
    """
    return setup_logger(name)


class LogContext:
    """Log the start, end and duration of an operation.

    Works as a plain or an async context manager. Exceptions are logged and
    re-raised.

    Example:
        async with LogContext(logger, "loading page at offset 0"):
            ...
    """

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.INFO):
        self.logger = logger
        self.operation = operation
        self.level = level
        self._started: Optional[float] = None

    def __enter__(self) -> "LogContext":
        self._started = time.perf_counter()
        self.logger.log(self.level, f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        elapsed_ms = round((time.perf_counter() - self._started) * 1000, 1)

        if exc_type is None:
            self.logger.log(
                self.level,
                f"Completed {self.operation} in {elapsed_ms}ms",
                extra={"duration_ms": elapsed_ms},
            )
        else:
            self.logger.error(
                f"Failed {self.operation}: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb),
                extra={"duration_ms": elapsed_ms},
            )
        return False

    async def __aenter__(self) -> "LogContext":
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        return self.__exit__(exc_type, exc_val, exc_tb)
