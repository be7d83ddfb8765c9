"""Configuration Module for propmap

Typed settings with environment variable and .env support.

Example:
    from propmap.config import get_settings

    settings = get_settings()
    settings.encoding  # "latin-1" unless PROPMAP_ENCODING is set
"""

from propmap.config.env_loader import EnvLoader
from propmap.config.settings import (
    DEFAULT_ENCODING,
    DEFAULT_PREFIX,
    LogSettings,
    PropmapSettings,
    get_settings,
    reset_settings,
)

__all__ = [
    "EnvLoader",
    "LogSettings",
    "PropmapSettings",
    "DEFAULT_ENCODING",
    "DEFAULT_PREFIX",
    "get_settings",
    "reset_settings",
]
