"""Custom exceptions for xmlext.

Provides readable error messages and structured error handling.
"""

from typing import Optional, Any


class XmlExtError(Exception):
    """Base exception for all xmlext errors.

    Provides:
    - Readable message
    - Technical details for debugging
    - Suggested fixes when applicable
    """

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        suggestion: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        self.message = message
        self.details = details
        self.suggestion = suggestion
        self.cause = cause
        super().__init__(message)

    def format_user_friendly(self) -> str:
        """Format error for display."""
        parts = [self.message]

        if self.details:
            parts.append(f"   Details: {self.details}")

        if self.suggestion:
            parts.append(f"   Try: {self.suggestion}")

        return "\n".join(parts)

    def __str__(self) -> str:
        return self.format_user_friendly()


class ConfigError(XmlExtError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        suggestion = kwargs.pop("suggestion", None)
        if not suggestion and config_key:
            suggestion = f"Set the {config_key} environment variable or add it to .env"
        super().__init__(message, suggestion=suggestion, **kwargs)
        self.config_key = config_key


class ValidationError(XmlExtError):
    """Input validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        **kwargs
    ):
        details = kwargs.pop("details", None)
        if not details and field:
            details = f"Field: {field}"
            if value is not None:
                details += f", Value: {repr(value)[:50]}"

        super().__init__(message, details=details, **kwargs)
        self.field = field
        self.value = value


class ParseError(XmlExtError):
    """Malformed XML handed to the reader."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        **kwargs
    ):
        details = kwargs.pop("details", None)
        if not details and line:
            details = f"Line: {line}"

        suggestion = kwargs.pop("suggestion", None)
        if not suggestion:
            suggestion = "Check the document is well-formed, or set XMLEXT_PARSE_RECOVER=true"

        super().__init__(message, details=details, suggestion=suggestion, **kwargs)
        self.line = line


class WriterError(XmlExtError):
    """Unbalanced or empty use of the XML writer."""

    def __init__(
        self,
        message: str,
        open_elements: Optional[int] = None,
        **kwargs
    ):
        details = kwargs.pop("details", None)
        if not details and open_elements is not None:
            details = f"Open elements: {open_elements}"

        super().__init__(message, details=details, **kwargs)
        self.open_elements = open_elements


def format_exception_chain(error: Exception, max_depth: int = 5) -> str:
    """Format an exception chain for display.

    Handles nested exceptions and provides clean output.
    """
    lines = []
    current = error
    depth = 0

    while current and depth < max_depth:
        if isinstance(current, XmlExtError):
            lines.append(current.format_user_friendly())
        else:
            lines.append(f"{type(current).__name__}: {current}")

        current = getattr(current, "__cause__", None) or getattr(current, "cause", None)
        depth += 1

        if current:
            lines.append("   Caused by:")

    return "\n".join(lines)
