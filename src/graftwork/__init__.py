"""Graftwork inversion-of-control container.

Graftwork is a minimal dependency injection container. Identifiers (type
names, classes, or arbitrary string keys) are mapped to factories, types or
pre-built values, and object graphs are constructed on demand by introspecting
constructor signatures and resolving each parameter recursively.

Key Features:
    - Factory and type bindings, last write wins
    - Singletons, and bindings whose first result is cached
    - Constructor injection by declared class type
    - Scalar injection by parameter name, with defaults as fallback
    - Cycle detection with the full dependency path in errors

Basic Usage:
    >>> from graftwork.container import Container
    >>>
    >>> container = Container()
    >>> container.bind(Database, SqliteDatabase)
    >>> container.singleton("dsn", "sqlite:///app.db")
    >>>
    >>> service = container.resolve(UserService)

The package consists of several modules:
    - container: The Container and its resolution algorithm
    - builders: Assembling a container from in-code configuration
    - introspection: Constructor and factory signature analysis
    - type_registry: Lookup of classes by type name
    - domain: Core domain models (Parameter, Factory, TypeAlias)
    - errors: Resolution exceptions
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
