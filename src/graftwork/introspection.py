"""Introspection of types and factories for constructor injection."""

import inspect
from types import UnionType
from typing import Any, Callable, Optional, Union, get_args, get_origin, get_type_hints

from graftwork.domain import Parameter

__all__ = [
    "type_name",
    "inferred_name",
    "is_instantiable",
    "constructor_parameters",
    "accepts_container",
]

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_VARIADIC_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
)


def type_name(cls: type) -> str:
    """Return the identifier under which a class is registered.

    Example:
        >>> type_name(OrderedDict)  # Returns "collections.OrderedDict"
    """
    return f"{cls.__module__}.{cls.__qualname__}"


def inferred_name(target: Any) -> str:
    """Derive an identifier from a class or function, removing any 'make_' prefix.

    Args:
        target: The function or class to derive a name from.

    Returns:
        The qualified type name for classes, or the function name with any
        'make_' prefix removed.

    Example:
        >>> inferred_name(Database)       # Returns "app.db.Database"
        >>> inferred_name(make_database)  # Returns "database"
        >>> inferred_name(my_service)     # Returns "my_service"
    """
    if inspect.isclass(target):
        return type_name(target)

    if target.__name__.startswith("make_"):
        return target.__name__[5:]
    else:
        return target.__name__


def is_instantiable(cls: type) -> bool:
    """Abstract classes and protocols cannot be constructed."""
    if inspect.isabstract(cls):
        return False
    return not getattr(cls, "_is_protocol", False)


def constructor_parameters(cls: type) -> list[Parameter]:
    """Describe the parameters a class must be constructed with, in declaration order.

    Variadic parameters (``*args``, ``**kwargs``) are omitted. Annotations are
    evaluated with ``get_type_hints``; if that fails, each annotation is
    evaluated separately and only those that cannot be evaluated stay as raw
    forward references, which are treated as non-class types.

    Args:
        cls: The class to analyse.

    Returns:
        List of Parameter descriptors, empty if the class declares no constructor.

    Raises:
        TypeError, ValueError: If no signature can be obtained for the class.

    Example:
        >>> class Service:
        ...     def __init__(self, db: Database, name: str = "svc", *, retries=3): ...
        >>> constructor_parameters(Service)
        >>> # Returns:
        >>> # [Parameter("db", Database, Database),
        >>> #  Parameter("name", str, None, "svc"),
        >>> #  Parameter("retries", None, None, 3, keyword_only=True)]
    """
    if not _declares_constructor(cls):
        return []

    signature = inspect.signature(cls)
    hints = _constructor_hints(cls)
    return [
        _make_parameter(parameter, hints.get(parameter.name, parameter.annotation))
        for parameter in signature.parameters.values()
        if parameter.kind not in _VARIADIC_KINDS
    ]


def accepts_container(func: Callable) -> bool:
    """Check whether a factory can be called with the container as a positional argument.

    Callables whose signature cannot be read are assumed to accept it.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    return any(
        parameter.kind in _POSITIONAL_KINDS
        or parameter.kind is inspect.Parameter.VAR_POSITIONAL
        for parameter in signature.parameters.values()
    )


def _declares_constructor(cls: type) -> bool:
    return cls.__init__ is not object.__init__ or cls.__new__ is not object.__new__


def _constructor_hints(cls: type) -> dict[str, Any]:
    target = cls.__init__ if cls.__init__ is not object.__init__ else cls.__new__
    try:
        return get_type_hints(target)
    except (NameError, TypeError):
        return _hints_by_parameter(target)


def _hints_by_parameter(target: Callable) -> dict[str, Any]:
    """Evaluate annotations one at a time, keeping the raw string for those that fail.

    Example:
        >>> # from __future__ import annotations
        >>> # if TYPE_CHECKING: from decimal import Decimal
        >>> def __init__(self, engine: Engine, price: Decimal | None = None): ...
        >>> _hints_by_parameter(__init__)
        >>> # Returns {"engine": Engine, "price": "Decimal | None"}
    """
    try:
        annotations = dict(getattr(target, "__annotations__", None) or {})
    except NameError:
        return {}

    namespace = getattr(target, "__globals__", {})
    hints = {}
    for name, annotation in annotations.items():
        if not isinstance(annotation, str):
            hints[name] = annotation
            continue
        try:
            hints[name] = eval(annotation, namespace)
        except (NameError, TypeError, AttributeError, SyntaxError):
            hints[name] = annotation
    return hints


def _make_parameter(parameter: inspect.Parameter, annotation: Any) -> Parameter:
    declared_type = None if annotation is inspect.Parameter.empty else annotation
    return Parameter(
        parameter.name,
        declared_type,
        _class_type(declared_type),
        parameter.default,
        parameter.kind is inspect.Parameter.KEYWORD_ONLY,
    )


def _class_type(annotation: Any) -> Optional[type]:
    """Return the class a parameter is injected by, if its annotation names one.

    ``Optional[X]`` is unwrapped to ``X``. Built-in types, ``Any``, generic
    aliases and unions of several types are not injected by type.

    Example:
        >>> _class_type(Database)            # Returns Database
        >>> _class_type(Optional[Database])  # Returns Database
        >>> _class_type(str)                 # Returns None
        >>> _class_type(list[Database])      # Returns None
    """
    if get_origin(annotation) in (Union, UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            return None
        annotation = members[0]

    if annotation is None or annotation is Any or get_origin(annotation) is not None:
        return None
    if inspect.isclass(annotation) and annotation.__module__ != "builtins":
        return annotation
    return None
