"""Reader and writer for the line-oriented ``.properties`` text format.

Parsing and writing are delegated to ``jproperties``, which follows the
rules of the standard Java ``Properties`` class: ``#``/``!`` comments,
trailing-backslash continuations, ``=``/``:``/whitespace separators and
``\\uXXXX`` escapes. These helpers adapt it to plain ``dict[str, str]``
results and propmap's error types.

Example:
    >>> loads("# db\\nhost = localhost\\nport:5432")
    {'host': 'localhost', 'port': '5432'}
"""

import io
import re
from typing import IO, Dict, Mapping, Optional, Union

from jproperties import ParseError, Properties

from propmap.exceptions import MalformedPropertiesError, PropertiesIOError

# ISO-8859-1 is what the standard reader uses for byte streams
DEFAULT_ENCODING = "iso-8859-1"

_SURROGATE = re.compile("[\ud800-\udfff]")


def _join_surrogates(text: str) -> str:
    # Pairs of \\uXXXX escapes encode characters beyond the BMP
    if not _SURROGATE.search(text):
        return text
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _parse(source: Union[str, bytes, IO], encoding: Optional[str]) -> Dict[str, str]:
    properties = Properties()
    try:
        properties.load(source, encoding)
    except UnicodeDecodeError as exc:
        raise PropertiesIOError(
            f"Cannot decode properties as {encoding}",
            details={"encoding": encoding, "position": exc.start},
        ) from exc
    except ParseError as exc:
        raise MalformedPropertiesError(
            str(exc), line=getattr(exc, "line_number", None)
        ) from exc
    except ValueError as exc:
        raise MalformedPropertiesError(str(exc)) from exc
    return {
        _join_surrogates(key): _join_surrogates(value)
        for key, value in properties.properties.items()
    }


def loads(text: str) -> Dict[str, str]:
    """Parse property-file text into a fresh dict.

    Raises:
        MalformedPropertiesError: If an escape sequence cannot be decoded
    """
    return _parse(io.StringIO(text), None)


def load(stream: IO, encoding: str = DEFAULT_ENCODING) -> Dict[str, str]:
    """Read a whole stream and parse it.

    Binary streams are decoded with ``encoding``; text streams are parsed
    as they are.

    Raises:
        PropertiesIOError: If the content cannot be decoded
        MalformedPropertiesError: If an escape sequence cannot be decoded
    """
    content = stream.read()
    if isinstance(content, str):
        return loads(content)
    return _parse(io.BytesIO(bytes(content)), encoding)


def dumps(
    properties: Mapping[str, str],
    comments: Optional[str] = None,
    escape_unicode: bool = True,
) -> str:
    """Write a mapping as property-file text that ``loads`` reads back.

    Keys are written in sorted order and no timestamp line is added. With
    ``escape_unicode`` the text is produced through ISO-8859-1, so anything
    outside it becomes a ``\\uXXXX`` escape; otherwise UTF-8 is used.
    """
    writer = Properties()
    for key in sorted(properties, key=str):
        writer[str(key)] = str(properties[key])

    encoding = DEFAULT_ENCODING if escape_unicode else "utf-8"
    with io.BytesIO() as data:
        writer.store(data, initial_comments=comments, encoding=encoding, timestamp=False)
        return data.getvalue().decode(encoding)
