"""Traits for turning objects into text."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import TextIO

__all__ = ["Debug", "ToString"]


class Debug(ABC):
    """An object that can write a debugging representation of itself to a stream."""

    @abstractmethod
    def debug(self, stream: TextIO) -> None:
        """Write the representation of ``self`` to ``stream``."""

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.debug(buffer)
        return buffer.getvalue()


class ToString(ABC):
    """An object with a textual form."""

    @abstractmethod
    def to_string(self) -> str:
        """Return the textual form of ``self``."""

    def __str__(self) -> str:
        return self.to_string()