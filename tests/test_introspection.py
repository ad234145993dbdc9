from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Union

from graftwork.domain import Parameter
from graftwork.introspection import (
    accepts_container,
    constructor_parameters,
    inferred_name,
    is_instantiable,
    type_name,
)
from vehicles import Car, Engine


class Database:
    pass


class Cache:
    pass


class NoConstructor:
    pass


class Service:
    def __init__(
        self,
        db: Database,
        untyped,
        name: str = "svc",
        cache: Optional[Cache] = None,
        *args,
        retries: int = 3,
        **kwargs,
    ):
        pass


class Loosely:
    def __init__(
        self,
        anything: Any,
        either: Union[Database, Cache],
        many: list[Database],
        later: "NotYetDefined",  # noqa: F821
    ):
        pass


@dataclass
class Settings:
    db: Database
    tags: list[str] = field(default_factory=list)


class Repository(ABC):
    @abstractmethod
    def get(self, key):
        pass


class Reader(Protocol):
    def read(self) -> bytes:
        ...


class FileReader(Reader):
    def read(self) -> bytes:
        return b""


def make_database():
    return Database()


def my_service():
    pass


def test_type_name_is_module_qualified():
    assert type_name(OrderedDict) == "collections.OrderedDict"
    assert type_name(Database) == f"{Database.__module__}.Database"


def test_inferred_name():
    assert inferred_name(make_database) == "database"
    assert inferred_name(my_service) == "my_service"
    assert inferred_name(Database) == type_name(Database)


def test_class_without_constructor_has_no_parameters():
    assert constructor_parameters(NoConstructor) == []


def test_constructor_parameters_in_declaration_order():
    parameters = constructor_parameters(Service)

    assert [p.name for p in parameters] == ["db", "untyped", "name", "cache", "retries"]


def test_class_typed_parameters():
    db, untyped, name, cache, retries = constructor_parameters(Service)

    assert db == Parameter("db", Database, Database)
    assert not db.has_default
    assert untyped == Parameter("untyped")
    assert name.class_type is None
    assert name.declared_type is str
    assert name.default == "svc"
    assert cache.class_type is Cache
    assert cache.default is None
    assert retries.keyword_only
    assert retries.default == 3


def test_non_class_annotations_are_not_injected_by_type():
    parameters = constructor_parameters(Loosely)

    assert [p.class_type for p in parameters] == [None, None, None, None]
    assert parameters[3].declared_type == "NotYetDefined"


def test_dataclass_parameters():
    db, tags = constructor_parameters(Settings)

    assert db.class_type is Database
    assert tags.has_default
    assert tags.class_type is None


def test_abstract_classes_and_protocols_are_not_instantiable():
    assert not is_instantiable(Repository)
    assert not is_instantiable(Reader)
    assert is_instantiable(FileReader)
    assert is_instantiable(Database)


def test_accepts_container():
    assert accepts_container(lambda c: c)
    assert accepts_container(lambda *args: args)
    assert not accepts_container(lambda: None)
    assert not accepts_container(lambda *, container=None: container)
    assert accepts_container(print)


def test_unresolvable_annotation_keeps_other_hints():
    engine, price = constructor_parameters(Car)

    assert engine.class_type is Engine
    assert price.class_type is None
    assert price.declared_type == "Decimal | None"
    assert price.default is None
