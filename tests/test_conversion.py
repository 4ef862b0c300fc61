import pytest

from tinytraits.conversion import AsRef, Into, conversion
from tinytraits.introspect import TraitError


class RefPoint(AsRef[int]):
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def as_ref(self):
        return self.x * self.x + self.y * self.y


class Point(Into, targets=(int, tuple)):
    def __init__(self, x, y):
        self.x = x
        self.y = y

    @conversion(int)
    def to_distance(self):
        return self.x * self.x + self.y * self.y

    @conversion(tuple)
    def to_pair(self):
        return (self.x, self.y)


def test_as_ref_example():
    assert RefPoint(3, 4).as_ref() == 25
    with pytest.raises(TypeError):
        AsRef()


def test_as_ref_requires_implementation():
    with pytest.raises(TypeError):
        AsRef()


def test_into_example():
    point = Point(3, 4)
    assert int(point) == 25
    assert Into.into(point, int) == 25
    assert Into.into(point, tuple) == (3, 4)


def test_into_matches_declared_method():
    point = Point(-2, 7)
    assert Into.into(point, int) == point.to_distance() == 53
    assert Into.into(point, tuple) == point.to_pair() == (-2, 7)


def test_into_undeclared_target_raises():
    with pytest.raises(TraitError):
        Into.into(Point(1, 1), float)


def test_missing_declared_target_fails_at_class_definition():
    with pytest.raises(TraitError, match="float"):

        class Bad(Into, targets=(int, float)):
            @conversion(int)
            def to_int(self):
                return 1


def test_conversion_requires_a_type():
    with pytest.raises(TypeError):
        conversion("int")


def test_wrong_result_type_raises():
    class Liar(Into):
        @conversion(tuple)
        def to_pair(self):
            return [1, 2]

    with pytest.raises(TypeError):
        Into.into(Liar(), tuple)


def test_subclass_inherits_and_overrides_conversions():
    class Scaled(Point):
        @conversion(int)
        def doubled(self):
            return 2 * self.to_distance()

    point = Scaled(3, 4)
    assert Into.into(point, tuple) == (3, 4)
    assert Into.into(point, int) == 50
    assert int(point) == 50


def test_own_special_method_is_kept():
    class Custom(Into):
        def __int__(self):
            return -1

        @conversion(int)
        def to_int(self):
            return 1

    assert int(Custom()) == -1
    assert Into.into(Custom(), int) == 1