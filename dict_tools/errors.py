"""Exceptions raised by key and path lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING, override


if TYPE_CHECKING:
    from .shapes import Shape


class KeyNotFoundError(KeyError):
    """No entry under the resolved key or path segment."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    @override
    def __str__(self) -> str:
        return f"key not found: {self.key!r}"


class MissingAttributeError(KeyNotFoundError, AttributeError):
    """Attribute-style access named a key that the wrapped mapping lacks."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.name = key if isinstance(key, str) else None

    @override
    def __str__(self) -> str:
        return f"no entry for attribute: {self.key!r}"


class IndexOutOfBoundsError(IndexError):
    """A path index fell outside the sequence it was applied to."""

    def __init__(self, index: int, length: int) -> None:
        msg = f"index {index} outside of sequence bounds: {-length}...{length}"
        super().__init__(msg)
        self.index = index
        self.length = length


class NotIndexableError(TypeError):
    """A path still had segments left when it reached a scalar value."""

    def __init__(self, value: object, segment: str, shape: Shape) -> None:
        msg = f"{value!r} ({shape.value}) does not support lookup of segment {segment!r}"
        super().__init__(msg)
        self.value = value
        self.segment = segment
        self.shape = shape
