"""JSON serialization that sees through indifferent wrappers and symbols."""

from __future__ import annotations

import json
from typing import Any

from .shapes import Shape, shape_of
from .symbol import Symbol, textual


def to_plain(value: Any) -> Any:
    """Return ``value`` with wrappers replaced by their mappings and symbol keys as text.

    Plain structures without wrappers or symbols come back equal but rebuilt;
    the input is never modified.
    """
    shape = shape_of(value)
    if shape is Shape.INDIFFERENT:
        return to_plain(value.to_plain_dict())
    if shape is Shape.MAPPING:
        return {_plain_key(key): to_plain(item) for key, item in value.items()}
    if shape is Shape.SEQUENCE:
        return [to_plain(item) for item in value]
    if isinstance(value, Symbol):
        return value.name
    return value


def _plain_key(key: Any) -> Any:
    if isinstance(key, Symbol):
        return textual(key)
    return key


def json_default(obj: Any) -> Any:
    """``default=`` hook for :func:`json.dumps` that unwraps indifferent views."""
    if shape_of(obj) is Shape.INDIFFERENT:
        return obj.to_plain_dict()
    if isinstance(obj, Symbol):
        return obj.name
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def dumps(value: Any, **kwargs: Any) -> str:
    """Serialize ``value`` to JSON, treating a wrapper exactly like its mapping."""
    return json.dumps(to_plain(value), **kwargs)
