"""Equality and hashing traits."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .introspect import _accepts

__all__ = ["Eq", "Hashable", "Hasher"]


class Eq(ABC):
    """Derive ``==`` and ``!=`` from a single ``equals`` method.

    Set ``other_type`` on the subclass to compare against a different type.
    """

    other_type: ClassVar[type | tuple[type, ...] | None] = None

    @abstractmethod
    def equals(self, other: Any) -> bool:
        """Return True if ``self`` equals ``other``."""

    def __eq__(self, other: object) -> bool:
        if not _accepts(self, other):
            return NotImplemented
        return bool(self.equals(other))

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


class Hashable(Eq):
    """Equality plus a hash code, usable as a dictionary key or set member."""

    @abstractmethod
    def hashcode(self) -> int:
        """Return an integer hash consistent with ``equals``."""

    def __hash__(self) -> int:
        return hash(self.hashcode())


class Hasher:
    """Hash function that prefers ``hashcode`` and falls back to ``hash``."""

    def __call__(self, obj: Any) -> int:
        if isinstance(obj, Hashable):
            return obj.hashcode()
        return hash(obj)