"""Structured logging for xmlext.

Provides JSON-formatted logs with file and console output. The library
itself only emits records; handlers are installed by `setup_logging`.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler


_CONTEXT_FIELDS = ("component", "element", "namespace", "count")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter for human-readable output."""

    COLORS = {
        "DEBUG": "\033[36m",    # Cyan
        "INFO": "\033[32m",     # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",    # Red
        "CRITICAL": "\033[35m", # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        timestamp = datetime.now().strftime("%H:%M:%S")
        prefix = f"{color}[{timestamp}] {record.levelname:8}{self.RESET}"

        if hasattr(record, "component"):
            prefix += f" [{record.component}]"

        message = record.getMessage()

        extras = []
        if hasattr(record, "element"):
            extras.append(f"el={record.element}")
        if getattr(record, "namespace", None):
            extras.append(f"ns={record.namespace}")
        if hasattr(record, "count"):
            extras.append(f"n={record.count}")

        if extras:
            message += f" ({', '.join(extras)})"

        return f"{prefix} {message}"


class XmlExtLogger:
    """Logger wrapper with convenience methods for container tracing."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)

    def _log(self, level: int, message: str, **kwargs):
        """Log with extra context fields."""
        if not self._logger.isEnabledFor(level):
            return

        extra = {}

        # Known fields become record attributes
        for key in _CONTEXT_FIELDS:
            if key in kwargs:
                extra[key] = kwargs.pop(key)

        # Remaining fields go into extra_data
        if kwargs:
            extra["extra_data"] = kwargs

        self._logger.log(level, message, extra=extra)

    # Convenience methods for container parsing

    def instance_created(self, name: str, namespace: str):
        self.debug(f"create_instance for: {name}", component="container",
                   element=name, namespace=namespace)

    def extension_added(self, name: str, namespace: str):
        self.debug(f"Added extension to container for: {name}", component="container",
                   element=name, namespace=namespace)

    def extension_skipped(self, name: str, namespace: str):
        self.debug(f"No factory registered for: {name}", component="container",
                   element=name, namespace=namespace)


_loggers: dict[str, XmlExtLogger] = {}
_initialized = False


def setup_logging(
    level: str = "INFO",
    format_type: str = "json",
    log_dir: Optional[Path] = None,
    file_enabled: bool = False,
    console_enabled: bool = True
) -> None:
    """Initialize the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_type: "json" or "text"
        log_dir: Directory for log files
        file_enabled: Write logs to file
        console_enabled: Write logs to console
    """
    global _initialized

    if _initialized:
        return

    root = logging.getLogger("xmlext")
    root.setLevel(getattr(logging, level.upper()))
    root.handlers.clear()

    if console_enabled:
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(logging.DEBUG)

        if format_type == "json":
            console.setFormatter(JSONFormatter())
        else:
            console.setFormatter(ColoredFormatter())

        root.addHandler(console)

    if file_enabled and log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_dir / "xmlext.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        root.addHandler(file_handler)

    _initialized = True


def setup_logging_from_config(config=None) -> None:
    """Initialize logging from an `xmlext.config.Config` (global one by default)."""
    if config is None:
        from xmlext.config import get_config
        config = get_config()

    setup_logging(
        level=config.log.level,
        format_type=config.log.format,
        log_dir=config.log.log_dir,
        file_enabled=config.log.file_enabled,
        console_enabled=config.log.console_enabled,
    )


def reset_logging() -> None:
    """Drop installed handlers so `setup_logging` can run again (useful for testing)."""
    global _initialized
    root = logging.getLogger("xmlext")
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    _initialized = False


def get_logger(name: str = "xmlext") -> XmlExtLogger:
    """Get an xmlext logger instance."""
    if name not in _loggers:
        full_name = name if name == "xmlext" or name.startswith("xmlext.") else f"xmlext.{name}"
        _loggers[name] = XmlExtLogger(logging.getLogger(full_name))
    return _loggers[name]
