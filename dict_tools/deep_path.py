"""Fetch values from nested dicts and lists with ``"a/0/b"``-style paths."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from .errors import IndexOutOfBoundsError, KeyNotFoundError, NotIndexableError
from .shapes import Shape, shape_of


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "/"
INDEX_SEGMENT_RE = re.compile(r"-?[0-9]+")


def split_path(path: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split ``path`` into segments, keeping empty segments."""
    if not separator:
        msg = "separator must not be empty"
        raise ValueError(msg)
    return path.split(separator)


def _lookup(current: Any, segment: str) -> Any:
    shape = shape_of(current)
    if not shape.indexable:
        raise NotIndexableError(current, segment, shape)

    if shape is Shape.SEQUENCE and INDEX_SEGMENT_RE.fullmatch(segment):
        index = int(segment)
        length = len(current)
        if not -length <= index < length:
            raise IndexOutOfBoundsError(index, length)
        return current[index]

    if shape is Shape.SEQUENCE or segment not in current:
        raise KeyNotFoundError(segment)
    return current[segment]


def deep_fetch(
    root: Any,
    path: str,
    separator: str = DEFAULT_SEPARATOR,
    default_factory: Callable[[], Any] | None = None,
) -> Any:
    """Fetch a deeply nested value from ``root`` by path.

    Each segment is looked up as a key, except that segments shaped like an
    integer (``"0"``, ``"-1"``) index into lists and tuples. If any segment
    along the way is missing, ``default_factory()`` is returned when given;
    otherwise :class:`KeyNotFoundError` or :class:`IndexOutOfBoundsError` is
    raised. Reaching a scalar with segments left raises
    :class:`NotIndexableError` regardless of ``default_factory``.

    >>> deep_fetch({"a": {"b": [10, 20]}}, "a/b/-1")
    20
    """
    current = root
    for segment in split_path(path, separator):
        try:
            current = _lookup(current, segment)
        except (KeyNotFoundError, IndexOutOfBoundsError):
            if default_factory is None:
                raise
            logger.debug("path %r missed at segment %r, using default", path, segment)
            return default_factory()
    return current


def deep_fetch_multi(root: Any, *paths: str, separator: str = DEFAULT_SEPARATOR) -> list[Any]:
    """Fetch several paths from ``root``, in the order given."""
    return [deep_fetch(root, path, separator) for path in paths]


def deep_map_value(structures: Iterable[Any], path: str, separator: str = DEFAULT_SEPARATOR) -> list[Any]:
    """Fetch the same path from each of ``structures``."""
    return [deep_fetch(structure, path, separator) for structure in structures]
