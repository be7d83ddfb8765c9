"""Exceptions raised by propmap.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from propmap.exceptions import PropertiesIOError

    try:
        props = PropertiesOf.from_path("app.properties").value()
    except PropertiesIOError as exc:
        print(exc.to_dict())
"""

from propmap.exceptions.base import (
    ConfigurationError,
    MalformedPropertiesError,
    PropertiesIOError,
    PropmapError,
)

__all__ = [
    "PropmapError",
    "PropertiesIOError",
    "MalformedPropertiesError",
    "ConfigurationError",
]
