"""Core package - errors and logging."""

from .errors import (
    XmlExtError,
    ConfigError,
    ValidationError,
    ParseError,
    WriterError,
)

__all__ = ["XmlExtError", "ConfigError", "ValidationError", "ParseError", "WriterError"]
