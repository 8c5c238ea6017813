"""Centralized configuration for xmlext.

This module provides typed, validated configuration loaded from
environment variables and .env files.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

from xmlext.core.errors import ConfigError

# Load .env file if it exists
load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "text"  # "json" or "text"
    file_enabled: bool = False
    console_enabled: bool = True
    log_dir: Optional[Path] = None

    def __post_init__(self):
        self.level = os.getenv("XMLEXT_LOG_LEVEL", self.level).upper()
        self.format = os.getenv("XMLEXT_LOG_FORMAT", self.format).lower()
        self.file_enabled = _env_flag("XMLEXT_LOG_FILE", self.file_enabled)
        self.console_enabled = _env_flag("XMLEXT_LOG_CONSOLE", self.console_enabled)
        log_dir = os.getenv("XMLEXT_LOG_DIR")
        if log_dir:
            self.log_dir = Path(log_dir)


@dataclass
class ParseConfig:
    """Reader configuration."""
    recover: bool = False

    def __post_init__(self):
        self.recover = _env_flag("XMLEXT_PARSE_RECOVER", self.recover)


@dataclass
class WriterConfig:
    """Writer configuration."""
    pretty_print: bool = False
    xml_declaration: bool = False
    encoding: str = "utf-8"

    def __post_init__(self):
        self.pretty_print = _env_flag("XMLEXT_PRETTY_PRINT", self.pretty_print)
        self.xml_declaration = _env_flag("XMLEXT_XML_DECLARATION", self.xml_declaration)
        self.encoding = os.getenv("XMLEXT_ENCODING", self.encoding)


@dataclass
class Config:
    """Main configuration container."""
    log: LogConfig = field(default_factory=LogConfig)
    parse: ParseConfig = field(default_factory=ParseConfig)
    writer: WriterConfig = field(default_factory=WriterConfig)

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues."""
        issues = []

        if self.log.level not in _LOG_LEVELS:
            issues.append(f"XMLEXT_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

        if self.log.format not in ("json", "text"):
            issues.append("XMLEXT_LOG_FORMAT must be 'json' or 'text'")

        if self.log.file_enabled and self.log.log_dir is None:
            issues.append("XMLEXT_LOG_DIR is required when XMLEXT_LOG_FILE is enabled")

        if not self.writer.encoding:
            issues.append("XMLEXT_ENCODING must not be empty")

        return issues

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return len(self.validate()) == 0

    def ensure_valid(self) -> "Config":
        """Raise ConfigError on the first issue, otherwise return self."""
        issues = self.validate()
        if issues:
            key = issues[0].split()[0]
            raise ConfigError(
                "Invalid xmlext configuration",
                config_key=key if key.startswith("XMLEXT_") else None,
                details="; ".join(issues),
            )
        return self


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
