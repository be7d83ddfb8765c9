"""Base exception classes for propmap.

All propmap exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class PropmapError(Exception):
    """Base exception for all propmap errors.

    Attributes:
        code: Machine-readable error code (e.g., "PROPERTIES_IO_ERROR")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class PropertiesIOError(PropmapError):
    """Failure to open, read or decode a property source.

    This is the only error kind surfaced by ``PropertiesOf.value()``. The
    message can be passed as the first positional argument.
    """

    def __init__(
        self,
        message: str,
        code: str = "PROPERTIES_IO_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(code=code, message=message, details=details)


class MalformedPropertiesError(PropertiesIOError):
    """Property-file text that the grammar cannot decode."""

    def __init__(self, message: str, line: Optional[int] = None):
        details = {"line": line} if line is not None else None
        super().__init__(message, code="MALFORMED_PROPERTIES", details=details)
        self.line = line


class ConfigurationError(PropmapError):
    """Base for configuration and setup errors.

    Used when settings loaded from the environment are invalid.
    """

    pass
