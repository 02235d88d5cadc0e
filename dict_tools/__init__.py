"""dict-tools - indifferent key access and path lookups for nested dicts"""

from ._version import version as __version__
from .deep_path import DEFAULT_SEPARATOR, deep_fetch, deep_fetch_multi, deep_map_value
from .errors import IndexOutOfBoundsError, KeyNotFoundError, MissingAttributeError, NotIndexableError
from .indifferent import IndifferentDict, indifferent
from .serialization import dumps, to_plain
from .shapes import Shape, shape_of
from .symbol import Symbol
from .transform import transform_keys, transform_string_keys_and_values, transform_string_values


__all__ = [
    "DEFAULT_SEPARATOR",
    "IndexOutOfBoundsError",
    "IndifferentDict",
    "KeyNotFoundError",
    "MissingAttributeError",
    "NotIndexableError",
    "Shape",
    "Symbol",
    "__version__",
    "deep_fetch",
    "deep_fetch_multi",
    "deep_map_value",
    "dumps",
    "indifferent",
    "shape_of",
    "to_plain",
    "transform_keys",
    "transform_string_keys_and_values",
    "transform_string_values",
]
