"""Adapters turning plain Python values into property sources.

Adapters hold a reference to the wrapped value and do no work until asked
for their content:

    TextOf("a=1")                 -> as_string()
    BytesOf(TextOf("a=1"))        -> as_bytes()
    InputOf(BytesOf(b"a=1"))      -> stream()
    InputOf(Path("app.properties")) -> stream()
"""

import io
import os
from pathlib import Path
from typing import BinaryIO, Callable, Union

from .base import BytesSource, TextSource


class TextOf:
    """Text from a string or from a zero-argument callable returning one."""

    def __init__(self, value: Union[str, Callable[[], str]]):
        self._value = value

    def as_string(self) -> str:
        if callable(self._value):
            return self._value()
        return self._value

    def __repr__(self) -> str:
        return f"TextOf({self._value!r})"


class BytesOf:
    """Bytes from raw bytes, a string or a TextSource.

    Strings and text are encoded with ``encoding`` (UTF-8 by default).
    """

    def __init__(self, value: Union[bytes, str, TextSource], encoding: str = "utf-8"):
        self._value = value
        self._encoding = encoding

    def as_bytes(self) -> bytes:
        value = self._value
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, str):
            return value.encode(self._encoding)
        return value.as_string().encode(self._encoding)

    def __repr__(self) -> str:
        return f"BytesOf({self._value!r}, encoding={self._encoding!r})"


class InputOf:
    """Readable binary stream from bytes, a BytesSource or a filesystem path.

    Each ``stream()`` call opens a new stream; nothing is opened at
    construction time.
    """

    def __init__(self, value: Union[bytes, BytesSource, str, "os.PathLike[str]"]):
        self._value = value

    def stream(self) -> BinaryIO:
        value = self._value
        if isinstance(value, (bytes, bytearray)):
            return io.BytesIO(value)
        if isinstance(value, (str, os.PathLike)):
            return Path(value).open("rb")
        return io.BytesIO(value.as_bytes())

    def __repr__(self) -> str:
        return f"InputOf({self._value!r})"
