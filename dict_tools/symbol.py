"""Interned symbolic keys, distinct from strings with the same text."""

from __future__ import annotations

import threading
from typing import ClassVar, override


class Symbol:
    """Atom-like key that never compares equal to a plain ``str``.

    Symbols are interned: ``Symbol("a") is Symbol("a")``. A dict can hold
    ``Symbol("a")`` and ``"a"`` side by side as two distinct keys.
    """

    __slots__ = ("name",)

    _registry: ClassVar[dict[str, Symbol]] = {}
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    name: str

    def __new__(cls, name: str) -> Symbol:
        if isinstance(name, Symbol):
            return name
        if not isinstance(name, str):
            msg = f"symbol name must be a str, got {type(name).__name__}"
            raise TypeError(msg)
        with cls._registry_lock:
            existing = cls._registry.get(name)
            if existing is None:
                existing = super().__new__(cls)
                object.__setattr__(existing, "name", name)
                cls._registry[name] = existing
        return existing

    @classmethod
    def find(cls, name: str) -> Symbol | None:
        """Return the symbol named ``name`` if one was ever created, without creating it."""
        with cls._registry_lock:
            return cls._registry.get(name)

    @override
    def __setattr__(self, attr: str, value: object) -> None:
        msg = "Symbol is immutable"
        raise AttributeError(msg)

    @override
    def __hash__(self) -> int:
        return hash((Symbol, self.name))

    @override
    def __eq__(self, other: object) -> bool:
        return self is other

    @override
    def __reduce__(self) -> tuple[type[Symbol], tuple[str]]:
        return (Symbol, (self.name,))

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> Symbol:
        return self

    @override
    def __repr__(self) -> str:
        return f"Symbol({self.name!r})"

    @override
    def __str__(self) -> str:
        return self.name


def symbolic(key: object) -> Symbol:
    """Return the symbolic form of ``key``."""
    if isinstance(key, Symbol):
        return key
    return Symbol(str(key))


def textual(key: object) -> str:
    """Return the textual form of ``key``."""
    if isinstance(key, Symbol):
        return key.name
    return str(key)
