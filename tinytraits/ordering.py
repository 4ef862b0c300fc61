"""Partial and total ordering traits."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar

from .introspect import _accepts

__all__ = ["Ordering", "OptionalOrdering", "PartialOrd", "Ord"]


class Ordering(IntEnum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class OptionalOrdering:
    """An ordering that may be absent, meaning the values are not comparable."""

    ordering: Ordering | None = None

    @classmethod
    def not_comparable(cls) -> OptionalOrdering:
        """Return the ordering of two values that cannot be compared."""
        return cls()

    def is_comparable(self) -> bool:
        return self.ordering is not None

    def order(self) -> Ordering:
        """Return the ordering; ``EQUAL`` when the values are not comparable."""
        return Ordering.EQUAL if self.ordering is None else self.ordering

    def is_equal(self) -> bool:
        return self.ordering is Ordering.EQUAL

    def is_greater(self) -> bool:
        return self.ordering is Ordering.GREATER

    def is_less(self) -> bool:
        return self.ordering is Ordering.LESS


def _as_optional(result: Any) -> OptionalOrdering:
    if isinstance(result, OptionalOrdering):
        return result
    if isinstance(result, Ordering):
        return OptionalOrdering(result)
    if result is None:
        return OptionalOrdering.not_comparable()
    raise TypeError(
        f"partial_compare must return OptionalOrdering, Ordering or None, not {type(result).__name__}"
    )


class PartialOrd(ABC):
    """Derive ``<``, ``>``, ``<=`` and ``>=`` from ``partial_compare``.

    ``partial_compare`` may return an :class:`OptionalOrdering`, a bare
    :class:`Ordering`, or ``None`` for values that are not comparable.
    Set ``other_type`` on the subclass to compare against a different type.
    """

    other_type: ClassVar[type | tuple[type, ...] | None] = None

    @abstractmethod
    def partial_compare(self, other: Any) -> OptionalOrdering | Ordering | None:
        """Compare ``self`` with ``other``, if they are comparable."""

    def _compare_with(self, other: Any) -> OptionalOrdering | None:
        if not _accepts(self, other):
            return None
        return _as_optional(self.partial_compare(other))

    def __lt__(self, other: Any) -> bool:
        cmp = self._compare_with(other)
        if cmp is None:
            return NotImplemented
        return cmp.is_comparable() and cmp.order() is Ordering.LESS

    def __gt__(self, other: Any) -> bool:
        cmp = self._compare_with(other)
        if cmp is None:
            return NotImplemented
        return cmp.is_comparable() and cmp.order() is Ordering.GREATER

    def __le__(self, other: Any) -> bool:
        cmp = self._compare_with(other)
        if cmp is None:
            return NotImplemented
        return cmp.is_comparable() and cmp.order() is not Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        cmp = self._compare_with(other)
        if cmp is None:
            return NotImplemented
        return cmp.is_comparable() and cmp.order() is not Ordering.LESS

    def is_comparable(self, other: Any) -> bool:
        """Return True if ``self`` and ``other`` can be ordered."""
        return _as_optional(self.partial_compare(other)).is_comparable()


class Ord(PartialOrd):
    """A total order: every pair of values is comparable."""

    @abstractmethod
    def compare(self, other: Any) -> Ordering:
        """Compare ``self`` with ``other``."""

    def partial_compare(self, other: Any) -> OptionalOrdering:
        return OptionalOrdering(Ordering(self.compare(other)))