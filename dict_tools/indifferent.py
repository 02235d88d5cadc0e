"""Indifferent-access view over a mapping keyed by symbols, strings, or both."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator, MutableMapping
from typing import Any, ClassVar, override

from .errors import KeyNotFoundError, MissingAttributeError
from .shapes import Shape, shape_of
from .symbol import Symbol, textual


logger = logging.getLogger(__name__)

_MISSING = object()


def rewrap(value: Any) -> Any:
    """Wrap mappings reached from a wrapper so nested access stays indifferent.

    Mappings get a fresh :class:`IndifferentDict`, lists and tuples are
    rebuilt with each element rewrapped, everything else is returned as is.
    """
    shape = shape_of(value)
    if shape is Shape.MAPPING:
        return IndifferentDict(value)
    if shape is Shape.SEQUENCE:
        items = [rewrap(item) for item in value]
        return tuple(items) if isinstance(value, tuple) else items
    return value


class IndifferentDict(MutableMapping[Any, Any]):
    """Dict-like view that resolves ``Symbol`` and ``str`` keys interchangeably.

    The wrapped mapping is neither copied nor altered on construction: reads
    and writes go straight to it, so several wrappers over one mapping see
    each other's changes. A key is looked up in its symbolic form when that
    form is stored, otherwise in its textual form. Keys of other types that
    are stored as they are (``1``, ``None``) resolve to themselves.
    """

    __slots__ = ("_data",)

    _shape_tag: ClassVar[Shape] = Shape.INDIFFERENT

    def __init__(self, data: MutableMapping[Any, Any]) -> None:
        super().__init__()
        shape = shape_of(data)
        if shape is Shape.INDIFFERENT:
            data = data.to_plain_dict()
        elif shape is not Shape.MAPPING:
            msg = f"can only wrap a mapping, got {type(data).__name__}"
            raise TypeError(msg)
        self._data = data

    def _resolve(self, key: Any) -> Any:
        symbol = key if isinstance(key, Symbol) else Symbol.find(textual(key))
        if symbol is not None and symbol in self._data:
            return symbol
        if not isinstance(key, (str, Symbol)) and isinstance(key, Hashable) and key in self._data:
            return key
        return textual(key)

    @override
    def __getitem__(self, key: Any) -> Any:
        resolved = self._resolve(key)
        try:
            value = self._data[resolved]
        except KeyError:
            raise KeyNotFoundError(resolved) from None
        return rewrap(value)

    @override
    def __setitem__(self, key: Any, value: Any) -> None:
        resolved = self._resolve(key)
        if resolved not in self._data:
            logger.debug("creating new entry under textual key %r", resolved)
        self._data[resolved] = value

    @override
    def __delitem__(self, key: Any) -> None:
        resolved = self._resolve(key)
        try:
            del self._data[resolved]
        except KeyError:
            raise KeyNotFoundError(resolved) from None

    @override
    def __iter__(self) -> Iterator[Any]:
        return (self._resolve(key) for key in self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    @override
    def __contains__(self, key: object) -> bool:
        return self._resolve(key) in self._data

    def set(self, key: Any, value: Any) -> Any:
        """Store ``value`` verbatim under the resolved key and return it."""
        self[key] = value
        return value

    def fetch(self, key: Any, default_factory: Callable[[], Any] | None = None) -> Any:
        """Return the rewrapped value for ``key``.

        When the key is absent, return ``default_factory()`` (not rewrapped)
        if a factory was given, else raise :class:`KeyNotFoundError`.
        """
        resolved = self._resolve(key)
        value = self._data.get(resolved, _MISSING)
        if value is not _MISSING:
            return rewrap(value)
        if default_factory is None:
            raise KeyNotFoundError(resolved)
        return default_factory()

    def value_present(self, key: Any) -> bool:
        """Return True when ``key`` holds a truthy value that renders non-empty."""
        if key not in self:
            return False
        value = self[key]
        if not value:
            return False
        return str(value) != ""

    def each(self, visitor: Callable[[Any, Any], object]) -> None:
        """Call ``visitor(key, value)`` for each entry in storage order."""
        for key, value in list(self._data.items()):
            _ = visitor(self._resolve(key), rewrap(value))

    def map(self, visitor: Callable[[Any, Any], Any]) -> list[Any]:
        """Collect ``visitor(key, value)`` over all entries, in storage order."""
        return [visitor(key, self[key]) for key in self.keys()]

    def to_plain_dict(self) -> MutableMapping[Any, Any]:
        """Return the wrapped mapping itself, not a copy."""
        return self._data

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name == "_data":
            raise AttributeError(name)
        if name not in self:
            raise MissingAttributeError(name)
        return self[name]

    @override
    def __dir__(self) -> list[str]:
        keys = [textual(key) for key in self._data]
        return sorted(set(super().__dir__()) | {key for key in keys if key.isidentifier()})

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


def indifferent(data: MutableMapping[Any, Any]) -> IndifferentDict:
    """Return an :class:`IndifferentDict` over ``data``."""
    return IndifferentDict(data)
