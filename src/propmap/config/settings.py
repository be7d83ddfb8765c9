"""Dataclass-based settings for propmap.

Provides typed configuration with environment variable support. All
settings classes accept a parameterized prefix.

Environment variables:
    {prefix}_ENCODING: Byte decoding for binary property sources (default: latin-1)
    {prefix}_LOG_LEVEL: Logging level (default: WARNING)
    {prefix}_LOG_FORMAT: Log format, console or json (default: console)
"""

import codecs
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Mapping, Optional

from propmap.config.env_loader import EnvLoader
from propmap.exceptions import ConfigurationError
from propmap.logger import Logger, create_logger

DEFAULT_PREFIX = "PROPMAP"
# ISO-8859-1 is what the standard .properties reader uses for byte streams
DEFAULT_ENCODING = "latin-1"

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_ALLOWED_LOG_FORMATS = {"console", "json"}


@dataclass
class LogSettings:
    """Logging configuration

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (console or json)
    """

    level: str = "WARNING"
    format: str = "console"

    def __post_init__(self) -> None:
        self.level = self.level.upper()
        self.format = self.format.lower()
        if self.level not in _ALLOWED_LOG_LEVELS:
            raise ConfigurationError(
                "INVALID_LOG_LEVEL",
                f"Invalid log level '{self.level}'",
                {"allowed": sorted(_ALLOWED_LOG_LEVELS)},
            )
        if self.format not in _ALLOWED_LOG_FORMATS:
            raise ConfigurationError(
                "INVALID_LOG_FORMAT",
                f"Invalid log format '{self.format}'",
                {"allowed": sorted(_ALLOWED_LOG_FORMATS)},
            )

    @property
    def json_format(self) -> bool:
        return self.format == "json"

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> "LogSettings":
        """Build from prefix-stripped settings (LOG_LEVEL, LOG_FORMAT)."""
        return cls(
            level=data.get("LOG_LEVEL", "WARNING"),
            format=data.get("LOG_FORMAT", "console"),
        )


@dataclass
class PropmapSettings:
    """Complete propmap settings

    Attributes:
        encoding: Codec used to decode byte and stream property sources
        log: Logging settings
        prefix: Environment variable prefix used
    """

    encoding: str = DEFAULT_ENCODING
    log: LogSettings = field(default_factory=LogSettings)
    prefix: str = DEFAULT_PREFIX

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ConfigurationError(
                "INVALID_ENCODING",
                f"Unknown encoding '{self.encoding}'",
                {"prefix": self.prefix},
            ) from exc

    @classmethod
    def from_env(
        cls,
        prefix: str = DEFAULT_PREFIX,
        env_file: Optional[Path | str] = None,
        overrides: Optional[Mapping[str, object]] = None,
    ) -> "PropmapSettings":
        """Load settings from .env file, OS environment and overrides

        Args:
            prefix: Environment variable prefix (default: PROPMAP)
            env_file: Optional .env file (default: ./.env if present)
            overrides: Explicit values taking precedence over the environment

        Returns:
            PropmapSettings populated from the environment
        """
        data = EnvLoader(prefix, env_file).load(overrides)
        return cls(
            encoding=data.get("ENCODING", DEFAULT_ENCODING),
            log=LogSettings.from_mapping(data),
            prefix=prefix,
        )

    def configure_logging(self, name: str = "propmap") -> Logger:
        """Attach console output to the ``name`` logger using ``self.log``.

        propmap never does this on its own; applications that want its
        diagnostics without configuring ``logging`` themselves call it once.
        """
        return create_logger(
            name=name,
            level=getattr(logging, self.log.level),
            json_format=self.log.json_format,
        )


_global_settings: Dict[str, PropmapSettings] = {}


def get_settings(
    prefix: str = DEFAULT_PREFIX,
    reload: bool = False,
    env_file: Optional[Path | str] = None,
) -> PropmapSettings:
    """Get or create the settings instance for a given prefix

    Args:
        prefix: Environment variable prefix
        reload: If True, reload settings from the environment
        env_file: Optional .env file used when (re)loading
    """
    if prefix not in _global_settings or reload:
        _global_settings[prefix] = PropmapSettings.from_env(prefix=prefix, env_file=env_file)
    return _global_settings[prefix]


def reset_settings(prefix: Optional[str] = None) -> None:
    """Reset settings (primarily for testing)

    Args:
        prefix: Specific prefix to reset, or None to reset all
    """
    if prefix:
        _global_settings.pop(prefix, None)
    else:
        _global_settings.clear()
