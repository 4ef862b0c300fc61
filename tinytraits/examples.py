"""Runnable demonstrations of each trait, selectable by name."""

from __future__ import annotations

import argparse
import copy
import io
from collections.abc import Callable, Iterator
from typing import TextIO

from .conversion import AsRef, Into, conversion
from .eq import Eq, Hashable
from .fmt import Debug, ToString
from .iteration import Iterable
from .ordering import OptionalOrdering, Ord, Ordering, PartialOrd

__all__ = ["run_example", "main"]

_Runner = Callable[[TextIO], None]
_EXAMPLES: dict[str, _Runner] = {}


def _example(name: str) -> Callable[[_Runner], _Runner]:
    def register(func: _Runner) -> _Runner:
        _EXAMPLES[name] = func
        return func

    return register


def _flag(value: bool) -> str:
    return "true" if value else "false"


class _SquaredNorm(AsRef[int]):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def as_ref(self) -> int:
        return self.x * self.x + self.y * self.y


class _DebugPoint(Debug):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def debug(self, stream: TextIO) -> None:
        stream.write(f"Point({self.x}, {self.y})")


class _EqPoint(Eq):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def equals(self, other: _EqPoint) -> bool:
        return self.x == other.x and self.y == other.y


class _HashPoint(Hashable):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def hashcode(self) -> int:
        return hash(self.x) ^ hash(self.y << 1)

    def equals(self, other: _HashPoint) -> bool:
        return self.x == other.x and self.y == other.y


class _IntoPoint(Into, targets=(int, tuple)):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    @conversion(int)
    def squared_norm(self) -> int:
        return self.x * self.x + self.y * self.y

    @conversion(tuple)
    def pair(self) -> tuple[int, int]:
        return (self.x, self.y)


class _Container(Iterable):
    def __init__(self) -> None:
        self.data = [10, 20, 30]

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def push(self, value: int) -> None:
        self.data.append(value)


class _PlainPoint:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class _PartialPoint(PartialOrd):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def partial_compare(self, other: _PartialPoint) -> OptionalOrdering:
        if self.x == other.x and self.y == other.y:
            return OptionalOrdering(Ordering.EQUAL)
        if self.x < other.x and self.y < other.y:
            return OptionalOrdering(Ordering.LESS)
        if self.x > other.x and self.y > other.y:
            return OptionalOrdering(Ordering.GREATER)
        return OptionalOrdering.not_comparable()


class _VecPoint(Ord):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def compare(self, other: _VecPoint) -> Ordering:
        this_dis = self.x * self.x + self.y * self.y
        # The other distance adds y twice instead of squaring it, as the demo always has.
        other_dis = other.x * other.x + other.y + other.y
        if this_dis < other_dis:
            return Ordering.LESS
        if this_dis > other_dis:
            return Ordering.GREATER
        return Ordering.EQUAL


class _StringPoint(ToString):
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def to_string(self) -> str:
        return f"({self.x}, {self.y})"


@_example("as_ref")
def _as_ref(out: TextIO) -> None:
    point: AsRef[int] = _SquaredNorm(3, 4)
    print(point.as_ref(), file=out)


@_example("debug")
def _debug(out: TextIO) -> None:
    print(_DebugPoint(1, 2), file=out)


@_example("eq")
def _eq(out: TextIO) -> None:
    p1, p2, p3 = _EqPoint(1, 2), _EqPoint(2, 3), _EqPoint(1, 2)
    for result in (p1 == p2, p1 != p2, p1 == p3, p1 != p3):
        print(_flag(result), file=out)


@_example("hash")
def _hash(out: TextIO) -> None:
    p1, p2 = _HashPoint(1, 2), _HashPoint(2, 3)
    names = {p1: "p1", p2: "p2"}
    print(names[p1], file=out)
    print(names[p2], file=out)


@_example("into")
def _into(out: TextIO) -> None:
    point = _IntoPoint(3, 4)
    print(int(point), file=out)
    first, second = point.into(tuple)
    print(f"{first}, {second}", file=out)


@_example("iter")
def _iter(out: TextIO) -> None:
    container = _Container()
    container.push(114514)
    untouched = _Container()
    for items in (container, untouched):
        out.write("".join(f"{value} " for value in items))
        out.write("\n")


@_example("no_copy_move")
def _no_copy_move(out: TextIO) -> None:
    p1, p2 = _PlainPoint(1, 2), _PlainPoint(2, 3)
    p3 = copy.copy(p1)
    p1 = p2
    p4 = p1
    del p3, p4


@_example("ord")
def _ord(out: TextIO) -> None:
    a1, a2, a3, a4 = _PartialPoint(1, 2), _PartialPoint(2, 3), _PartialPoint(2, 3), _PartialPoint(2, 1)
    for result in (a1 < a2, a2 < a3, a3 < a4):
        print(_flag(result), file=out)
    print(file=out)
    b1, b2, b3, b4 = _VecPoint(3, 4), _VecPoint(4, 3), _VecPoint(5, 1), _VecPoint(2, 1)
    for result in (b1 < b2, b2 < b3, b3 > b4):
        print(_flag(result), file=out)


@_example("to_string")
def _to_string(out: TextIO) -> None:
    print(_StringPoint(1, 2).to_string(), file=out)


def run_example(name: str) -> str:
    """Run the example called ``name`` and return what it prints."""
    try:
        runner = _EXAMPLES[name]
    except KeyError:
        known = ", ".join(_EXAMPLES)
        raise ValueError(f"unknown example {name!r}; choose from: {known}") from None
    buffer = io.StringIO()
    runner(buffer)
    return buffer.getvalue()


def main(argv: list[str] | None = None) -> int:
    """Run the named examples, or all of them, printing their output."""
    parser = argparse.ArgumentParser(prog="tinytraits-examples", description=main.__doc__)
    parser.add_argument(
        "names",
        nargs="*",
        choices=[*_EXAMPLES, []] if False else list(_EXAMPLES),
        metavar="NAME",
        help="examples to run: " + ", ".join(_EXAMPLES),
    )
    args = parser.parse_args(argv)
    for name in args.names or list(_EXAMPLES):
        print(run_example(name), end="")
    return 0