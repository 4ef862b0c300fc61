"""Conversion traits: borrowing a view of a value and converting into other types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Generic, TypeVar

from .introspect import TraitError

__all__ = ["AsRef", "conversion", "Into"]

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

_DUNDERS = {
    int: "__int__",
    float: "__float__",
    complex: "__complex__",
    bool: "__bool__",
    bytes: "__bytes__",
    str: "__str__",
}


class AsRef(ABC, Generic[T]):
    """An object that can present itself as a value of type ``T``."""

    @abstractmethod
    def as_ref(self) -> T:
        """Return ``self`` viewed as a ``T``."""


def conversion(target: type) -> Callable[[F], F]:
    """Mark a method of an :class:`Into` subclass as its conversion to ``target``."""
    if not isinstance(target, type):
        raise TypeError(f"conversion target must be a type, not {target!r}")

    def mark(func: F) -> F:
        func.__conversion_target__ = target  # type: ignore[attr-defined]
        return func

    return mark


def _dunder_for(method_name: str) -> Callable[[Any], Any]:
    def convert(self: Any) -> Any:
        return getattr(self, method_name)()

    return convert


class Into:
    """Base for classes declaring conversions with :func:`conversion`.

    Passing ``targets=(...)`` in the class statement makes the class fail to
    define unless a conversion to each of those types is declared.  A
    conversion to a built-in type such as ``int`` also supplies the matching
    special method (``__int__``) unless the class defines one itself.
    """

    _conversions: ClassVar[dict[type, str]] = {}

    def __init_subclass__(cls, /, targets: tuple[type, ...] = (), **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        found: dict[type, str] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                target = getattr(attr, "__conversion_target__", None)
                if target is not None:
                    found[target] = name
        missing = [target for target in targets if target not in found]
        if missing:
            names = ", ".join(target.__name__ for target in missing)
            raise TraitError(f"{cls.__qualname__} must declare a conversion to: {names}")
        cls._conversions = found
        for target, name in found.items():
            dunder = _DUNDERS.get(target)
            if dunder is not None and dunder not in vars(cls):
                setattr(cls, dunder, _dunder_for(name))

    def into(self, target: type[T]) -> T:
        """Convert ``self`` into ``target`` using the declared conversion."""
        name = type(self)._conversions.get(target)
        if name is None:
            raise TraitError(
                f"{type(self).__qualname__} declares no conversion to {target.__name__}"
            )
        result = getattr(self, name)()
        if not isinstance(result, target):
            raise TypeError(
                f"conversion to {target.__name__} returned {type(result).__name__}"
            )
        return result