"""Lifecycle traits: forbidding copies, resetting and validating state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NoReturn, TypeVar

__all__ = ["deny_copy", "Resettable", "Validatable"]

C = TypeVar("C", bound=type)


def deny_copy(cls: C) -> C:
    """Class decorator making instances refuse ``copy.copy`` and ``copy.deepcopy``."""

    def refuse(self: Any, *args: Any) -> NoReturn:
        raise TypeError(f"{type(self).__qualname__} objects cannot be copied")

    cls.__copy__ = refuse
    cls.__deepcopy__ = refuse
    return cls


class Resettable(ABC):
    """An object that can return to its initial state."""

    @abstractmethod
    def reset(self) -> None:
        """Restore the initial state."""


class Validatable(ABC):
    """An object that can check its own consistency."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True if the object is in a valid state."""