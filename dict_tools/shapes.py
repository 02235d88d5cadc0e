"""Shared map / sequence / scalar classification for nested data."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum


class Shape(Enum):
    """Closed set of value shapes that nested-data walkers branch on."""

    INDIFFERENT = "indifferent"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    SCALAR = "scalar"

    @property
    def indexable(self) -> bool:
        """Whether values of this shape support key or index lookup."""
        return self is not Shape.SCALAR


_TEXT_TYPES = (str, bytes, bytearray)


def shape_of(value: object) -> Shape:
    """Classify ``value``.

    Classes may declare their own shape through a ``_shape_tag`` class
    attribute. Text and binary strings are scalars even though they are
    sequences.
    """
    tag = getattr(type(value), "_shape_tag", None)
    if isinstance(tag, Shape):
        return tag
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, _TEXT_TYPES):
        return Shape.SCALAR
    if isinstance(value, Sequence):
        return Shape.SEQUENCE
    return Shape.SCALAR
