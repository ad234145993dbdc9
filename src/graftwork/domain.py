"""Domain models used throughout the container."""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

__all__ = [
    "Identifier",
    "Parameter",
    "Factory",
    "TypeAlias",
    "Binding",
    "IdentifierState",
]


Identifier = Union[str, type]
"""Type alias for keys used to address bindings, singletons and types.

Classes are converted to their qualified name ("module.QualName") for
internal lookup, so both forms address the same entry.

Example:
    >>> container.resolve("database")     # Lookup by name
    >>> container.resolve(Database)       # Lookup by type
"""


@dataclass(frozen=True)
class Parameter:
    """Describes one constructor parameter of a type being built.

    Attributes:
        name: The parameter name in the constructor signature.
        declared_type: The annotation as declared, or None if unannotated.
        class_type: The class this parameter is resolved by, or None if the
            parameter is unannotated or declared with a built-in or
            non-class type.
        default: The declared default, or ``inspect.Parameter.empty``.
        keyword_only: Whether the argument must be passed by name.
    """

    name: str
    declared_type: Optional[Any] = None
    class_type: Optional[type] = None
    default: Any = inspect.Parameter.empty
    keyword_only: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not inspect.Parameter.empty


@dataclass(frozen=True)
class Factory:
    """A binding that produces its value by calling ``func``.

    Attributes:
        func: The factory callable.
        takes_container: Whether ``func`` is called with the container as its
            sole argument, or with no arguments at all.
    """

    func: Callable
    takes_container: bool = True


@dataclass(frozen=True)
class TypeAlias:
    """A binding that produces its value by building the named type."""

    type_name: str


Binding = Union[Factory, TypeAlias]


class IdentifierState(Enum):
    """The state an identifier is in with respect to a container."""

    CACHED = "cached"
    """A populated instance is cached; resolution returns it directly."""

    BOUND = "bound"
    """A binding exists but no instance is cached."""

    UNRESOLVED = "unresolved"
    """Neither; resolution falls through to building the identifier as a type."""
