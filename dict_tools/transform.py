"""Recursive rewriting of string keys and string values in nested data."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .shapes import Shape, shape_of


if TYPE_CHECKING:
    from collections.abc import Callable


def _items(value: Any) -> Any:
    if shape_of(value) is Shape.INDIFFERENT:
        return value.to_plain_dict().items()
    return value.items()


def _rebuild_sequence(value: Any, items: list[Any]) -> Any:
    return tuple(items) if isinstance(value, tuple) else items


def transform_keys(value: Any, transformer: Callable[[str], Any]) -> Any:
    """Return a copy of ``value`` with every mapping key passed through ``transformer``.

    Keys are handed over as text, so ``Symbol`` keys arrive as their name.

    >>> transform_keys({"foo_bar": [{"baz": 1}]}, str.upper)
    {'FOO_BAR': [{'BAZ': 1}]}
    """
    shape = shape_of(value)
    if shape in (Shape.MAPPING, Shape.INDIFFERENT):
        return {transformer(str(key)): transform_keys(item, transformer) for key, item in _items(value)}
    if shape is Shape.SEQUENCE:
        return _rebuild_sequence(value, [transform_keys(item, transformer) for item in value])
    return value


def transform_string_values(value: Any, transformer: Callable[[str], Any]) -> Any:
    """Return a copy of ``value`` with every ``str`` value passed through ``transformer``.

    Mapping keys and non-string scalars are left alone.
    """
    if isinstance(value, str):
        return transformer(value)
    shape = shape_of(value)
    if shape in (Shape.MAPPING, Shape.INDIFFERENT):
        return {key: transform_string_values(item, transformer) for key, item in _items(value)}
    if shape is Shape.SEQUENCE:
        return _rebuild_sequence(value, [transform_string_values(item, transformer) for item in value])
    return value


def transform_string_keys_and_values(value: Any, transformer: Callable[[str], Any]) -> Any:
    """Apply ``transformer`` to every key, then to every string value."""
    return transform_string_values(transform_keys(value, transformer), transformer)
