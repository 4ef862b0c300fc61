"""Helpers for checking that a class provides the methods a trait needs."""

from __future__ import annotations

from typing import Any

__all__ = ["TraitError", "has_method", "require_methods"]


class TraitError(TypeError):
    """Raised when a class does not satisfy the requirements of a trait."""


def has_method(cls: type, name: str) -> bool:
    """Return True if ``cls`` provides a concrete, callable attribute ``name``."""
    attr = getattr(cls, name, None)
    if attr is None or not callable(attr):
        return False
    return not getattr(attr, "__isabstractmethod__", False)


def require_methods(cls: type, trait: Any, *args: str) -> type:
    """Ensure ``cls`` implements every method named in ``args``.

    Returns ``cls`` unchanged; raises :class:`TraitError` naming the missing
    methods and the trait that needs them.
    """
    missing = [name for name in args if not has_method(cls, name)]
    if missing:
        trait_name = getattr(trait, "__name__", str(trait))
        listed = ", ".join(f"`{name}`" for name in missing)
        raise TraitError(f"{cls.__qualname__} must implement {listed} to satisfy {trait_name}")
    return cls


def _accepts(obj: Any, other: Any) -> bool:
    """Decide whether ``other`` is a valid right-hand operand for ``obj``.

    A class may set ``other_type`` to a type (or tuple of types) it compares
    against; otherwise the two objects must be of related classes.
    """
    target = getattr(type(obj), "other_type", None)
    if target is not None:
        return isinstance(other, target)
    return isinstance(other, type(obj)) or isinstance(obj, type(other))