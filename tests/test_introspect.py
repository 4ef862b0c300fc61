from abc import ABC, abstractmethod

import pytest

from tinytraits.introspect import TraitError, has_method, require_methods


class _Base(ABC):
    @abstractmethod
    def run(self):
        ...


class _Concrete(_Base):
    disabled = None

    def run(self):
        return 1

    def stop(self):
        return 2


def test_has_method_finds_defined_methods():
    assert has_method(_Concrete, "run") is True
    assert has_method(_Concrete, "stop") is True


def test_has_method_rejects_missing_and_abstract():
    assert has_method(_Concrete, "jump") is False
    assert has_method(_Base, "run") is False


def test_has_method_rejects_none_and_non_callable():
    class Holder:
        value = 3
        hook = None

    assert has_method(Holder, "value") is False
    assert has_method(Holder, "hook") is False
    assert has_method(_Concrete, "disabled") is False


def test_require_methods_returns_class():
    assert require_methods(_Concrete, "Runner", "run", "stop") is _Concrete


def test_require_methods_names_missing_methods():
    with pytest.raises(TraitError) as info:
        require_methods(_Concrete, "Jumper", "run", "jump", "fly")
    message = str(info.value)
    assert "`jump`" in message
    assert "`fly`" in message
    assert "`run`" not in message
    assert "Jumper" in message


def test_require_methods_uses_trait_class_name():
    with pytest.raises(TypeError, match="_Base"):
        require_methods(_Base, _Base, "run")