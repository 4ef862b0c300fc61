# tinytraits

Small mixins that give a class well-defined behaviour from one or two
methods you write yourself. No dependencies beyond the standard library.

| Module | Mixin | You write | You get |
|--------|-------|-----------|---------|
| `tinytraits.fmt` | `Debug` | `debug(stream)` | `str(obj)` built from what `debug` writes |
| `tinytraits.fmt` | `ToString` | `to_string()` | `str(obj)` |
| `tinytraits.eq` | `Eq` | `equals(other)` | `==` and `!=` |
| `tinytraits.eq` | `Hashable` | `equals(other)`, `hashcode()` | `==`, `!=`, `hash(obj)` |
| `tinytraits.ordering` | `PartialOrd` | `partial_compare(other)` | `<`, `>`, `<=`, `>=`, `is_comparable(other)` |
| `tinytraits.ordering` | `Ord` | `compare(other)` | everything `PartialOrd` gives |
| `tinytraits.conversion` | `AsRef[T]` | `as_ref()` | a common view of the object |
| `tinytraits.conversion` | `Into` | methods marked with `@conversion(target)` | `obj.into(target)` |
| `tinytraits.iteration` | `Iterable` | `__iter__` | a check, when the class is defined, that `__iter__` exists |
| `tinytraits.lifecycle` | `Resettable` | `reset()` | |
| `tinytraits.lifecycle` | `Validatable` | `is_valid()` | |
| `tinytraits.serialize` | `Serializable` / `Deserializable` | `serialize()` / `deserialize(data)` | |

`Debug`, `ToString`, `Eq`, `Hashable`, `PartialOrd`, `Ord`, `AsRef`,
`Resettable`, `Validatable`, `Serializable` and `Deserializable` are abstract
base classes: a subclass that leaves out a required method cannot be
instantiated (`TypeError`).

`Iterable` and `Into` check their subclasses as they are defined and raise
`tinytraits.introspect.TraitError` (a `TypeError`) when something is
missing. `tinytraits.introspect` also offers `has_method(cls, name)` and
`require_methods(cls, trait, *names)` for checks of your own, and
`tinytraits.iteration.is_valid_iterable(cls)` tells whether a class has
`__iter__`.

`tinytraits.lifecycle.deny_copy` is a class decorator that makes
`copy.copy` and `copy.deepcopy` of an instance raise `TypeError`.

## Install

```
pip install tinytraits
```

## Examples

Equality from a single method:

```python
from tinytraits.eq import Eq

class Point(Eq):
    def __init__(self, x, y):
        self.x, self.y = x, y

    def equals(self, other):
        return self.x == other.x and self.y == other.y

Point(1, 2) == Point(1, 2)   # True
Point(1, 2) != Point(2, 3)   # True
```

`equals` is only called for operands of related classes; for anything else
the operators return `NotImplemented`, so Python falls back to its default.
Set the class attribute `other_type` to a type (or tuple of types) to compare
against something else. `PartialOrd` and `Ord` honour `other_type` the same
way.

Hashable values usable as dictionary keys:

```python
from tinytraits.eq import Hashable

class Point(Hashable):
    def __init__(self, x, y):
        self.x, self.y = x, y

    def hashcode(self):
        return hash(self.x) ^ hash(self.y << 1)

    def equals(self, other):
        return self.x == other.x and self.y == other.y

names = {Point(1, 2): "p1", Point(2, 3): "p2"}
names[Point(1, 2)]   # "p1"
```

`Hasher()` is a callable that returns `hashcode()` for `Hashable` objects and
the built-in `hash` of anything else.

Formatting:

```python
from tinytraits.fmt import Debug

class Point(Debug):
    def __init__(self, x, y):
        self.x, self.y = x, y

    def debug(self, stream):
        stream.write(f"Point({self.x}, {self.y})")

str(Point(1, 2))   # "Point(1, 2)"
```

Ordering: `Ordering` is an `IntEnum` with `LESS`, `EQUAL` and `GREATER`.
A `PartialOrd` class's `partial_compare` may return an `OptionalOrdering`,
a bare `Ordering`, or `None`; `OptionalOrdering.not_comparable()` and `None`
both mean the two values cannot be ordered, and then every comparison
operator is false. An `Ord` class returns an `Ordering` from `compare`, and
its `partial_compare` wraps that result.

```python
from tinytraits.ordering import OptionalOrdering, Ordering, PartialOrd

class Point(PartialOrd):
    def __init__(self, x, y):
        self.x, self.y = x, y

    def partial_compare(self, other):
        if (self.x, self.y) == (other.x, other.y):
            return Ordering.EQUAL
        if self.x < other.x and self.y < other.y:
            return Ordering.LESS
        if self.x > other.x and self.y > other.y:
            return Ordering.GREATER
        return OptionalOrdering.not_comparable()

Point(1, 2) < Point(2, 3)             # True
Point(2, 3) < Point(2, 1)             # False
Point(2, 3).is_comparable(Point(2, 1))  # False
```

Conversions:

```python
from tinytraits.conversion import Into, conversion

class Point(Into, targets=(int, tuple)):
    def __init__(self, x, y):
        self.x, self.y = x, y

    @conversion(int)
    def squared_norm(self):
        return self.x * self.x + self.y * self.y

    @conversion(tuple)
    def pair(self):
        return (self.x, self.y)

p = Point(3, 4)
int(p)          # 25
p.into(tuple)   # (3, 4)
```

`targets` makes the class statement fail with `TraitError` unless each listed
type has a conversion. A conversion to `int`, `float`, `complex`, `bool`,
`bytes` or `str` also supplies the matching special method (`__int__` and so
on) unless the class defines it. `into` raises `TraitError` for an
undeclared target and `TypeError` if the conversion returns the wrong type.

## Demonstration programs

The package ships demonstrations of each mixin as a command. Name the ones
to run:

```
tinytraits-examples eq
tinytraits-examples hash ord
```

The names are `as_ref`, `debug`, `eq`, `hash`, `into`, `iter`,
`no_copy_move`, `ord` and `to_string`; `no_copy_move` prints nothing. From
Python, `tinytraits.examples.run_example(name)` returns what a demonstration
prints and raises `ValueError` for an unknown name.

## Tests

```
pip install "tinytraits[test]"
pytest
```