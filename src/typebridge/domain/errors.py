"""Domain-specific exceptions for typed error handling at the boundary.

Every error derives from :class:`TypeBridgeError` and, where callers would
naturally reach for a builtin handler, from the matching builtin as well
(``LookupError``, ``TypeError``, ``AttributeError``).
"""

from __future__ import annotations


class TypeBridgeError(Exception):
    """Base class for every error raised by typebridge."""


class ConfigurationError(TypeBridgeError):
    """Missing, invalid, or inconsistent configuration.

    Example:
        >>> err = ConfigurationError("default_ownership must be 'owned' or 'borrowed'")
        >>> str(err)
        "default_ownership must be 'owned' or 'borrowed'"
    """


class DuplicateTypeError(TypeBridgeError):
    """A native type identity (or exposed name) is already registered.

    Raised at initialisation time; a module whose registrations conflict
    cannot be loaded.

    Example:
        >>> err = DuplicateTypeError("type 'Pet' is already registered")
        >>> isinstance(err, TypeBridgeError)
        True
    """


class UnknownTypeError(TypeBridgeError, LookupError):
    """Lookup of a native type identity that was never registered.

    Example:
        >>> isinstance(UnknownTypeError("Cat"), LookupError)
        True
    """


class UnresolvedTypeError(TypeBridgeError, TypeError):
    """A native instance cannot be represented at the boundary.

    Raised when neither the instance's runtime type nor any of its
    ancestors is registered below the declared static type.
    """


class AttributeNotFoundError(TypeBridgeError, AttributeError):
    """The host accessed a member the resolved descriptor does not expose.

    Example:
        >>> err = AttributeNotFoundError("'example.Pet' object has no attribute 'bark'")
        >>> isinstance(err, AttributeError)
        True
    """


class ReadOnlyAttributeError(AttributeNotFoundError):
    """Assignment to a member exposed as read-only."""


class NoMatchingOverloadError(TypeBridgeError, TypeError):
    """No overload accepts the supplied argument types."""


class MemberNotCallableError(TypeBridgeError, TypeError):
    """A property or read-only member was invoked as a method.

    Example:
        >>> isinstance(MemberNotCallableError("'example.Pet' member 'owner' is not a method"), TypeError)
        True
    """


class ReleasedHandleError(TypeBridgeError, ReferenceError):
    """A handle was used after its native instance had been released."""


class RegistryFrozenError(TypeBridgeError, RuntimeError):
    """Registration was attempted after the registry had been frozen."""


__all__ = [
    "AttributeNotFoundError",
    "ConfigurationError",
    "DuplicateTypeError",
    "MemberNotCallableError",
    "NoMatchingOverloadError",
    "ReadOnlyAttributeError",
    "RegistryFrozenError",
    "ReleasedHandleError",
    "TypeBridgeError",
    "UnknownTypeError",
    "UnresolvedTypeError",
]
