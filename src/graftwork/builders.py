"""High level entry point for assembling containers."""

from typing import Any, Callable, Iterable, Mapping, Optional, Union

from graftwork.container import Container
from graftwork.domain import Identifier

__all__ = ["make_container"]


def make_container(
    bindings: Optional[Mapping[Identifier, Union[Callable, str, type]]] = None,
    singletons: Optional[Mapping[Identifier, Any]] = None,
    shared: Optional[Iterable[Identifier]] = None,
    detect_cycles: bool = True,
) -> Container:
    """Construct a :class:`Container` from in-code configuration.

    Bindings are registered first, then cache slots for shared identifiers,
    then singletons, so an identifier that appears both as shared and as a
    singleton keeps the singleton's value.

    Args:
        bindings: Mapping of identifiers to factories, classes or type names.
        singletons: Mapping of identifiers to values returned as-is.
        shared: Identifiers whose first resolved value is cached.
        detect_cycles: Whether cyclic dependencies fail fast with
            CyclicDependencyError.

    Returns:
        The configured :class:`Container`.

    Example:
        >>> container = make_container(
        ...     bindings={Printer: ConsolePrinter, "clock": lambda c: Clock()},
        ...     singletons={"prefix": ">> "},
        ...     shared=["clock"],
        ... )
    """
    container = Container(detect_cycles=detect_cycles)

    for identifier, concrete in (bindings or {}).items():
        container.bind(identifier, concrete)
    for identifier in shared or ():
        container.singleton(identifier)
    for identifier, value in (singletons or {}).items():
        container.singleton(identifier, value)

    return container
