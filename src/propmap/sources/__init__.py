"""Property sources: text, bytes and stream abstractions plus adapters."""

from propmap.sources.adapters import BytesOf, InputOf, TextOf
from propmap.sources.base import BytesSource, InputSource, TextSource

__all__ = [
    "TextSource",
    "BytesSource",
    "InputSource",
    "TextOf",
    "BytesOf",
    "InputOf",
]
