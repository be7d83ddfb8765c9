"""propmap - Lazy property maps for Python.

This package turns `.properties` text, byte streams, files and plain
mappings into string-to-string property maps:
- properties: PropertiesOf loader, memoization cell and format reader/writer
- sources: Text, bytes and stream abstractions with adapters
- config: Typed settings with environment and .env support
- logger: Structured logging with optional JSON output
- exceptions: Exception classes with structured error info
"""

__version__ = "1.0.0"

from propmap.config import (
    PropmapSettings,
    get_settings,
    reset_settings,
)

from propmap.exceptions import (
    ConfigurationError,
    MalformedPropertiesError,
    PropertiesIOError,
    PropmapError,
)

from propmap.logger import (
    Logger,
    StructuredLogger,
    create_logger,
    get_logger,
)

from propmap.properties import (
    LazyResult,
    LazyState,
    PropertiesOf,
    PropertyMap,
    dumps,
    load,
    loads,
    properties_of,
)

from propmap.sources import (
    BytesOf,
    BytesSource,
    InputOf,
    InputSource,
    TextOf,
    TextSource,
)

__all__ = [
    "__version__",
    # Properties
    "PropertiesOf",
    "PropertyMap",
    "properties_of",
    "LazyResult",
    "LazyState",
    "load",
    "loads",
    "dumps",
    # Sources
    "TextSource",
    "BytesSource",
    "InputSource",
    "TextOf",
    "BytesOf",
    "InputOf",
    # Config
    "PropmapSettings",
    "get_settings",
    "reset_settings",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "PropmapError",
    "PropertiesIOError",
    "MalformedPropertiesError",
    "ConfigurationError",
]
