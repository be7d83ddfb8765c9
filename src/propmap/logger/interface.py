"""
Logger interface for propmap.

Abstract base class defining the logging contract used by property loaders.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for logging interface.

    Loaders accept any implementation, so callers can route propmap
    diagnostics into their own logging setup.

    Example:
        class ListLogger(Logger):
            def __init__(self):
                self.records = []

            def debug(self, message: str, **kwargs: Any) -> None:
                self.records.append(("DEBUG", message, kwargs))
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional key-value pairs to include in the log
        """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the unique session identifier for this logger instance."""
