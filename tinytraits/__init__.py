"""Trait-style mixins for formatting, equality, hashing, ordering, conversion,
iteration, lifecycle and serialization, with runnable demonstrations."""

__version__ = "0.1.0"

__all__ = [
    "conversion",
    "eq",
    "examples",
    "fmt",
    "introspect",
    "iteration",
    "lifecycle",
    "ordering",
    "serialize",
]