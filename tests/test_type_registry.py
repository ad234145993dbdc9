import string

import pytest

from graftwork.introspection import type_name
from graftwork.type_registry import TypeRegistry


@pytest.fixture
def types():
    return TypeRegistry()


def test_registered_type_is_found(types):
    class Local:
        pass

    name = types.register(Local)

    assert name == type_name(Local)
    assert "<locals>" in name
    assert name in types
    assert types.find(name) is Local


def test_importable_type_is_found(types):
    assert types.find("string.Formatter") is string.Formatter
    assert "string.Formatter" in types


def test_nested_module_path_is_found(types):
    assert types.find("graftwork.type_registry.TypeRegistry") is TypeRegistry


def test_unknown_names_are_not_found(types):
    assert types.find("nonexistent") is None
    assert types.find("no.such.module.Thing") is None
    assert types.find("string.NoSuchThing") is None
    assert types.find("not a.type name") is None


def test_non_class_objects_are_not_found(types):
    assert types.find("os.path.join") is None
    assert types.find("string.ascii_letters") is None
