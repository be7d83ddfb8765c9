"""Source protocols for property loaders.

A property source is anything that can render text, render bytes, or open
a readable stream. Loaders only ever call these methods at evaluation time.
"""

from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class TextSource(Protocol):
    """Produces its content as a string."""

    def as_string(self) -> str: ...


@runtime_checkable
class BytesSource(Protocol):
    """Produces its content as bytes."""

    def as_bytes(self) -> bytes: ...


@runtime_checkable
class InputSource(Protocol):
    """Opens a fresh readable stream on every call.

    The caller owns the returned stream and must close it.
    """

    def stream(self) -> BinaryIO: ...
