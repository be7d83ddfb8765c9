"""Property maps from `.properties` text and other key/value sources.

Example:
    from propmap.properties import PropertiesOf, properties_of

    PropertiesOf.from_string("a=1\\nb=2").value()   # {'a': '1', 'b': '2'}
    properties_of({"port": 8080}).value()          # {'port': '8080'}
"""

from propmap.properties.grammar import dumps, load, loads
from propmap.properties.lazy import LazyResult, LazyState
from propmap.properties.loader import PropertiesOf, PropertyMap, properties_of

__all__ = [
    "PropertiesOf",
    "PropertyMap",
    "properties_of",
    "LazyResult",
    "LazyState",
    "load",
    "loads",
    "dumps",
]
