"""Lazy property maps built from strings, text, bytes, streams or mappings.

Every constructor adapts its input into one zero-argument computation that
produces the finished ``dict[str, str]``. The computation runs on the first
``value()`` call and its result is reused afterwards:

    props = PropertiesOf.from_path("app.properties")
    props.value()["db.host"]

Construction never reads or parses anything.
"""

import os
from contextlib import closing
from typing import Any, Callable, Dict, Hashable, Iterable, Mapping, Optional, Tuple, Union

from propmap.config import get_settings
from propmap.logger import Logger, StructuredLogger
from propmap.properties import grammar
from propmap.properties.lazy import LazyResult, LazyState
from propmap.sources import BytesSource, InputOf, InputSource, TextSource

PropertyMap = Dict[str, str]
Entry = Tuple[Hashable, Any]

_default_logger: Optional[Logger] = None


def _get_default_logger() -> Logger:
    global _default_logger
    if _default_logger is None:
        # Records go through the host's logging setup untouched
        _default_logger = StructuredLogger(name="propmap", attach_handlers=False)
    return _default_logger


def _stringify(mapping: Mapping[Any, Any]) -> PropertyMap:
    return {str(key): str(value) for key, value in mapping.items()}


class PropertiesOf:
    """A property map computed on first access.

    There is no thread-safety guarantee.

    Args:
        scalar: Zero-argument callable returning the finished map, or an
            object with a ``value()`` method (e.g. another PropertiesOf)
        logger: Optional logger; defaults to the "propmap" logger, which emits
            through whatever handlers the application installed
        origin: Short description of the source, used in log entries
    """

    def __init__(
        self,
        scalar: Union[Callable[[], PropertyMap], Any],
        logger: Optional[Logger] = None,
        origin: str = "scalar",
    ):
        if callable(scalar):
            self._func = scalar
        elif callable(getattr(scalar, "value", None)):
            self._func = scalar.value
        else:
            raise TypeError(
                f"Expected a callable or an object with value(), got {type(scalar).__name__}"
            )
        self._logger = logger
        self._origin = origin
        self._result: LazyResult[PropertyMap] = LazyResult(self._evaluate)

    @classmethod
    def from_string(cls, text: str, logger: Optional[Logger] = None) -> "PropertiesOf":
        """Parse ``text`` as property-file content."""
        return cls(lambda: grammar.loads(text), logger=logger, origin="string")

    @classmethod
    def from_text(cls, text: TextSource, logger: Optional[Logger] = None) -> "PropertiesOf":
        """Render ``text`` to a string, then parse it."""
        return cls(lambda: grammar.loads(text.as_string()), logger=logger, origin="text")

    @classmethod
    def from_bytes(
        cls,
        data: BytesSource,
        encoding: Optional[str] = None,
        logger: Optional[Logger] = None,
    ) -> "PropertiesOf":
        """Wrap ``data`` into a stream and parse it like an input."""
        return cls._reading(InputOf(data), encoding, logger, origin="bytes")

    @classmethod
    def from_input(
        cls,
        source: InputSource,
        encoding: Optional[str] = None,
        logger: Optional[Logger] = None,
    ) -> "PropertiesOf":
        """Open a stream from ``source`` and parse its full content.

        The stream is closed whether parsing succeeds or fails. Binary
        content is decoded with ``encoding``, or the configured default
        (ISO-8859-1) when unset.
        """
        return cls._reading(source, encoding, logger, origin="input")

    @classmethod
    def from_path(
        cls,
        path: Union[str, "os.PathLike[str]"],
        encoding: Optional[str] = None,
        logger: Optional[Logger] = None,
    ) -> "PropertiesOf":
        """Read a ``.properties`` file."""
        return cls._reading(InputOf(path), encoding, logger, origin=f"path:{os.fspath(path)}")

    @classmethod
    def from_map(cls, mapping: Mapping[Any, Any], logger: Optional[Logger] = None) -> "PropertiesOf":
        """Copy ``mapping`` with every key and value converted by ``str()``."""
        return cls(lambda: _stringify(mapping), logger=logger, origin="map")

    @classmethod
    def from_entries(cls, *entries: Entry, logger: Optional[Logger] = None) -> "PropertiesOf":
        """Build from ``(key, value)`` pairs; a repeated key keeps the later value."""
        pairs = tuple(entries)
        return cls(
            lambda: {str(key): str(value) for key, value in pairs},
            logger=logger,
            origin="entries",
        )

    @classmethod
    def _reading(
        cls,
        source: InputSource,
        encoding: Optional[str],
        logger: Optional[Logger],
        origin: str,
    ) -> "PropertiesOf":
        def read() -> PropertyMap:
            codec = encoding or get_settings().encoding
            with closing(source.stream()) as stream:
                return grammar.load(stream, codec)

        return cls(read, logger=logger, origin=origin)

    @property
    def state(self) -> LazyState:
        return self._result.state

    def value(self) -> PropertyMap:
        """Return the property map, computing it on the first call.

        Raises:
            PropertiesIOError: If the source cannot be opened, read or decoded.
                Nothing is cached, so the next call tries again.
        """
        return self._result.value()

    def _evaluate(self) -> PropertyMap:
        logger = self._logger or _get_default_logger()
        logger.debug("Loading properties", origin=self._origin)
        try:
            properties = self._func()
        except Exception as exc:
            logger.error("Failed to load properties", origin=self._origin, error=str(exc))
            raise
        logger.debug("Properties loaded", origin=self._origin, entries=len(properties))
        return properties

    def __repr__(self) -> str:
        return f"PropertiesOf(origin={self._origin!r}, state={self.state.value!r})"


def properties_of(
    source: Any,
    encoding: Optional[str] = None,
    logger: Optional[Logger] = None,
) -> PropertiesOf:
    """Pick the PropertiesOf constructor matching the type of ``source``.

    ``str`` is property-file text, ``bytes`` and ``os.PathLike`` are read as
    streams, mappings are copied, sources are used through their protocol,
    callables and objects with ``value()`` are used as-is and any other
    iterable is taken as ``(key, value)`` pairs. Open streams are rejected
    rather than read at construction.

    Raises:
        TypeError: If ``source`` is an open stream or matches none of the above
    """
    if isinstance(source, str):
        return PropertiesOf.from_string(source, logger=logger)
    if isinstance(source, (bytes, bytearray)):
        return PropertiesOf._reading(InputOf(bytes(source)), encoding, logger, origin="bytes")
    if isinstance(source, os.PathLike):
        return PropertiesOf.from_path(source, encoding=encoding, logger=logger)
    if isinstance(source, Mapping):
        return PropertiesOf.from_map(source, logger=logger)
    if isinstance(source, TextSource):
        return PropertiesOf.from_text(source, logger=logger)
    if isinstance(source, BytesSource):
        return PropertiesOf.from_bytes(source, encoding=encoding, logger=logger)
    if isinstance(source, InputSource):
        return PropertiesOf.from_input(source, encoding=encoding, logger=logger)
    if callable(source) or callable(getattr(source, "value", None)):
        return PropertiesOf(source, logger=logger)
    if callable(getattr(source, "read", None)):
        # An open stream can be read only once, so it cannot back a retry
        raise TypeError(
            f"Cannot build properties from an open {type(source).__name__}; "
            "wrap its data in InputOf or pass a source to PropertiesOf.from_input"
        )
    if isinstance(source, Iterable):
        return PropertiesOf.from_entries(*source, logger=logger)
    raise TypeError(f"Cannot build properties from {type(source).__name__}")
