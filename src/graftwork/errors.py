"""Exceptions raised while resolving identifiers from a container."""

from typing import Sequence

__all__ = [
    "ResolutionError",
    "UnknownTypeError",
    "NotInstantiableError",
    "UnresolvableDependencyError",
    "CyclicDependencyError",
]


class ResolutionError(Exception):
    """Raised when an identifier cannot be resolved.

    Attributes:
        identifier: The identifier or parameter name that could not be satisfied.
        path: Identifiers that were being resolved when the failure occurred,
            outermost first.
    """

    def __init__(self, message: str, identifier: str, path: Sequence[str] = ()):
        self.identifier = identifier
        self.path = tuple(path)
        if len(self.path) > 1:
            message = f"{message} (while resolving {' -> '.join(self.path)})"
        super().__init__(message)


class UnknownTypeError(ResolutionError):
    """Raised when an identifier names no known or importable type."""

    def __init__(self, type_name: str, path: Sequence[str] = ()):
        super().__init__(f"Type {type_name} does not exist", type_name, path)


class NotInstantiableError(ResolutionError):
    """Raised when a type exists but cannot be constructed."""

    def __init__(self, type_name: str, path: Sequence[str] = (), reason: str = ""):
        message = f"Type {type_name} is not instantiable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, type_name, path)


class UnresolvableDependencyError(ResolutionError):
    """Raised when a non-class constructor parameter has no value available."""

    def __init__(self, parameter_name: str, path: Sequence[str] = ()):
        super().__init__(
            f"Cannot resolve the dependency {parameter_name}", parameter_name, path
        )


class CyclicDependencyError(ResolutionError):
    """Raised when resolving an identifier requires resolving that identifier again."""

    def __init__(self, cycle: Sequence[str], path: Sequence[str] = ()):
        self.cycle = tuple(cycle)
        super().__init__(
            f"Cyclic dependency detected: {' -> '.join(self.cycle)}", self.cycle[-1]
        )
        self.path = tuple(path)
