"""Iteration trait."""

from __future__ import annotations

from typing import Any

from .introspect import has_method, require_methods

__all__ = ["is_valid_iterable", "Iterable"]


def is_valid_iterable(cls: Any) -> bool:
    """Return True if ``cls`` is a class whose instances can be iterated."""
    return isinstance(cls, type) and has_method(cls, "__iter__")


def _declares_abstract(cls: type) -> bool:
    return any(
        getattr(getattr(cls, name, None), "__isabstractmethod__", False) for name in dir(cls)
    )


class Iterable:
    """Base that requires concrete subclasses to implement ``__iter__``.

    The check happens when the subclass is defined; subclasses that still
    declare abstract methods are left unchecked.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if not _declares_abstract(cls):
            require_methods(cls, Iterable, "__iter__")