"""Lookup of classes by type name.

Types are found either because they were recorded earlier (any class passed
to the container as an identifier, binding target or constructor parameter
annotation is recorded), or by importing a dotted path such as
``"collections.abc.Mapping"``.
"""

import importlib
import inspect
from typing import Optional

from graftwork.introspection import type_name

__all__ = ["TypeRegistry"]


class TypeRegistry:
    """Registry of known classes, keyed by qualified type name."""

    def __init__(self):
        self._types: dict[str, type] = {}

    def register(self, cls: type) -> str:
        """Record a class and return the name it is registered under.

        Args:
            cls: The class to record.

        Returns:
            The qualified type name of ``cls``.
        """
        name = type_name(cls)
        self._types[name] = cls
        return name

    def find(self, name: str) -> Optional[type]:
        """Find the class for a type name.

        Args:
            name: A registered type name, or an importable dotted path.

        Returns:
            The class, or None if the name is unknown, cannot be imported, or
            does not refer to a class.
        """
        if name in self._types:
            return self._types[name]

        found = _import_dotted(name)
        if not inspect.isclass(found):
            return None
        self._types[name] = found
        return found

    def __contains__(self, name: str) -> bool:
        return name in self._types


def _import_dotted(name: str) -> Optional[object]:
    """Import the longest importable module prefix of ``name`` and walk the rest.

    Example:
        >>> _import_dotted("os.path.join")    # module "os.path", attribute "join"
        >>> _import_dotted("string.Formatter")  # module "string", attribute "Formatter"
    """
    parts = name.split(".")
    if len(parts) < 2 or not all(part.isidentifier() for part in parts):
        return None

    for split in range(len(parts) - 1, 0, -1):
        module_name = ".".join(parts[:split])
        try:
            target = importlib.import_module(module_name)
        except ModuleNotFoundError:
            continue

        for attribute in parts[split:]:
            target = getattr(target, attribute, None)
            if target is None:
                return None
        return target

    return None
