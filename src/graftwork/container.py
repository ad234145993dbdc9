"""The inversion-of-control container.

A Container maps identifiers to bindings and cached instances, and resolves
identifiers into values. Types without a binding are built directly: their
constructor parameters are introspected and each one is resolved in turn, so
whole object graphs can be constructed from a single ``resolve`` call.

Example:
    >>> container = Container()
    >>> container.bind(Printer, ConsolePrinter)
    >>> container.singleton("prefix", ">> ")
    >>> service = container.resolve(Service)
"""

import inspect
import logging
from typing import Any, Callable, Optional, Union

from graftwork.domain import (
    Binding,
    Factory,
    Identifier,
    IdentifierState,
    Parameter,
    TypeAlias,
)
from graftwork.errors import (
    CyclicDependencyError,
    NotInstantiableError,
    UnknownTypeError,
    UnresolvableDependencyError,
)
from graftwork.introspection import (
    accepts_container,
    constructor_parameters,
    inferred_name,
    is_instantiable,
)
from graftwork.type_registry import TypeRegistry

__all__ = ["Container"]

logger = logging.getLogger(__name__)


class Container:
    """Registry of bindings and singletons that builds object graphs on demand.

    An identifier is at any time in exactly one of three states: it has a
    cached instance, it has a binding but no cached instance, or it is
    unresolved and will be built as a type.

    Args:
        detect_cycles: If True (default), resolving an identifier that is
            already being resolved raises CyclicDependencyError. If False,
            cyclic graphs recurse until Python's recursion limit is hit.
    """

    def __init__(self, detect_cycles: bool = True):
        self._bindings: dict[str, Binding] = {}
        self._instances: dict[str, Any] = {}
        self._types = TypeRegistry()
        self._detect_cycles = detect_cycles
        self._resolving: list[str] = []

    def bind(
        self,
        identifier: Identifier,
        concrete: Union[Callable, str, type],
        shared: bool = False,
    ) -> None:
        """Bind an identifier to a factory or to a type to be built.

        The concrete is not checked until resolution time. Any earlier binding
        for the identifier is replaced; cached instances are untouched.

        Args:
            identifier: The identifier to bind.
            concrete: A type name or class to build, or a factory called with
                the container (or with no arguments, if it takes none).
            shared: If True, also reserve a cache slot for the identifier so
                the first resolved value is reused afterwards.

        Raises:
            TypeError: If ``concrete`` is neither a type name, a class nor a callable.
        """
        key = self._key(identifier)
        self._bindings[key] = self._make_binding(concrete)
        logger.debug("Bound %s to %r", key, concrete)
        if shared:
            self._instances.setdefault(key, None)

    def singleton(self, identifier: Identifier, value: Any = None) -> None:
        """Cache a value under an identifier, bypassing any binding.

        The value is used as-is on every later resolution. Calling this
        without a value (or with None) reserves an empty cache slot: the next
        resolution runs the identifier's binding and caches its result.

        Args:
            identifier: The identifier to cache the value under.
            value: The value to return for the identifier.
        """
        key = self._key(identifier)
        self._instances[key] = value
        logger.debug("Registered singleton %s", key)

    def resolve(self, identifier: Identifier) -> Any:
        """Resolve an identifier to a value.

        Cached instances are returned directly. Otherwise the identifier's
        binding is run or, if it has none, the identifier is built as a type.
        If a cache slot exists for the identifier, the produced value is
        stored in it.

        Args:
            identifier: The identifier to resolve.

        Returns:
            The resolved value.

        Raises:
            UnknownTypeError: If an identifier to be built names no known type.
            NotInstantiableError: If a type to be built cannot be constructed.
            UnresolvableDependencyError: If a constructor parameter cannot be satisfied.
            CyclicDependencyError: If the identifier depends on itself.
        """
        key = self._key(identifier)

        cached = self._instances.get(key)
        if cached is not None:
            return cached

        self._enter(key)
        try:
            if key not in self._bindings:
                return self._build_type(key)

            value = self.build(self._bindings[key])
            if key in self._instances:
                self._instances[key] = value
                logger.debug("Cached resolved instance for %s", key)
            return value
        finally:
            self._resolving.pop()

    def build(self, concrete: Union[Binding, Callable, str, type]) -> Any:
        """Produce a value from a factory or by constructing a type.

        Args:
            concrete: A binding, a factory, a class, or a type name.

        Returns:
            The factory's result or a new instance of the type.

        Raises:
            TypeError: If ``concrete`` is neither a type name, a class nor a callable.
        """
        if not isinstance(concrete, (Factory, TypeAlias)):
            concrete = self._make_binding(concrete)
        if isinstance(concrete, Factory):
            return self._call_factory(concrete)
        return self._build_type(concrete.type_name)

    def provides(
        self, identifier: Optional[Identifier] = None, shared: bool = False
    ) -> Callable:
        """Decorator to bind a class or factory function.

        Args:
            identifier: Optional identifier to bind; defaults to the class
                itself, or the function name with any 'make_' prefix removed.
            shared: If True, the first resolved value is cached.

        Returns:
            A decorator that binds its target and returns it unchanged.

        Example:
            @container.provides(shared=True)
            def make_connection(container) -> Connection:
                return Connection(container.resolve("dsn"))
        """

        def decorator(target):
            self.bind(
                identifier if identifier is not None else _default_identifier(target),
                target,
                shared,
            )
            return target

        return decorator

    def state_of(self, identifier: Identifier) -> IdentifierState:
        key = self._key(identifier)
        if self._instances.get(key) is not None:
            return IdentifierState.CACHED
        if key in self._bindings:
            return IdentifierState.BOUND
        return IdentifierState.UNRESOLVED

    def __contains__(self, identifier: Identifier) -> bool:
        return self.state_of(identifier) is not IdentifierState.UNRESOLVED

    def _key(self, identifier: Identifier) -> str:
        if inspect.isclass(identifier):
            return self._types.register(identifier)
        return identifier

    def _make_binding(self, concrete: Union[Callable, str, type]) -> Binding:
        if isinstance(concrete, str):
            return TypeAlias(concrete)
        if inspect.isclass(concrete):
            return TypeAlias(self._types.register(concrete))
        if callable(concrete):
            return Factory(concrete, accepts_container(concrete))
        raise TypeError(
            f"{concrete!r} is not a type name, class or factory callable"
        )

    def _enter(self, key: str) -> None:
        if self._detect_cycles and key in self._resolving:
            cycle = self._resolving[self._resolving.index(key):] + [key]
            raise CyclicDependencyError(cycle, self._resolving)
        self._resolving.append(key)

    def _call_factory(self, factory: Factory) -> Any:
        if factory.takes_container:
            return factory.func(self)
        return factory.func()

    def _build_type(self, name: str) -> Any:
        """Construct the named type, resolving its constructor parameters in order."""
        cls = self._types.find(name)
        if cls is None:
            raise UnknownTypeError(name, self._resolving)
        if not is_instantiable(cls):
            raise NotInstantiableError(name, self._resolving, "abstract class or protocol")

        try:
            parameters = constructor_parameters(cls)
        except (TypeError, ValueError) as exc:
            raise NotInstantiableError(name, self._resolving, str(exc)) from exc

        args = []
        kwargs = {}
        for parameter in parameters:
            value = self._resolve_parameter(parameter)
            if parameter.keyword_only:
                kwargs[parameter.name] = value
            else:
                args.append(value)

        logger.debug("Building %s with %d argument(s)", name, len(parameters))
        return cls(*args, **kwargs)

    def _resolve_parameter(self, parameter: Parameter) -> Any:
        """Resolve one constructor parameter.

        Class-typed parameters are always resolved by their type. Other
        parameters are looked up by name: a cached instance, then the
        declared default, then a binding.
        """
        if parameter.class_type is not None:
            return self.resolve(parameter.class_type)

        cached = self._instances.get(parameter.name)
        if cached is not None:
            return cached

        if parameter.has_default:
            return parameter.default

        if parameter.name in self._bindings:
            return self.resolve(parameter.name)

        raise UnresolvableDependencyError(parameter.name, self._resolving)


def _default_identifier(target: Any) -> Identifier:
    if inspect.isclass(target):
        return target
    return inferred_name(target)
