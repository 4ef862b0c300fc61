"""Traits for converting objects to and from strings."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = ["Serializable", "Deserializable"]


class Serializable(ABC):
    """An object that can be written out as a string."""

    @abstractmethod
    def serialize(self) -> str:
        """Return the serialized form of ``self``."""


class Deserializable(ABC):
    """An object that can load its state from a string."""

    @abstractmethod
    def deserialize(self, data: str) -> None:
        """Replace the state of ``self`` with the one encoded in ``data``."""