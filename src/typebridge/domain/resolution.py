"""Resolution policy: pick the descriptor for an instance crossing the boundary.

An instance produced behind a declared (static) type ``S`` is presented to
the host as ``S`` unless ``S`` is polymorphic. For a polymorphic ``S`` the
instance's runtime lineage is walked from the most derived type upwards and
the first registered descriptor at or below ``S`` wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable

from .descriptors import TypeDescriptor
from .errors import UnresolvedTypeError
from .registry import TypeRegistry

logger = logging.getLogger(__name__)

LineageFunc = Callable[[object], Iterable[Hashable]]
"""Returns the native type identities of an instance, most derived first."""


def native_lineage(instance: object) -> tuple[type, ...]:
    """Default runtime type lookup: the instance class's MRO.

    Example:
        >>> class Pet: ...
        >>> class Dog(Pet): ...
        >>> [t.__name__ for t in native_lineage(Dog())]
        ['Dog', 'Pet', 'object']
    """
    return type(instance).__mro__


class ResolutionPolicy:
    """Chooses static or dynamic binding per declared type.

    Args:
        registry: Registry holding every exposed descriptor.
        lineage: Runtime type lookup used for polymorphic static types.

    Example:
        >>> class Animal: ...
        >>> class Dog(Animal): ...
        >>> registry = TypeRegistry()
        >>> animal = TypeDescriptor(Animal, "Animal")
        >>> registry.register(animal)
        >>> registry.register(TypeDescriptor(Dog, "Dog", parent=animal))
        >>> ResolutionPolicy(registry).resolve_descriptor(Animal, Dog()).name
        'Animal'
    """

    def __init__(self, registry: TypeRegistry, lineage: LineageFunc = native_lineage) -> None:
        self._registry = registry
        self._lineage = lineage

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def resolve_descriptor(self, static_identity: Hashable, instance: object) -> TypeDescriptor:
        """Return the descriptor to attach to ``instance``'s handle.

        Raises:
            UnknownTypeError: ``static_identity`` is not registered.
            UnresolvedTypeError: ``static_identity`` is polymorphic and no
                type in the instance's lineage is registered at or below it.
        """
        static = self._registry.lookup(static_identity)
        if not static.polymorphic:
            return static
        resolved = self._most_derived(static, instance)
        if resolved is not static:
            logger.debug(
                "Resolved polymorphic instance",
                extra={"static_type": static.name, "resolved_type": resolved.name},
            )
        return resolved

    def _most_derived(self, static: TypeDescriptor, instance: object) -> TypeDescriptor:
        for identity in self._lineage(instance):
            candidate = self._registry.get(identity)
            if candidate is not None and candidate.is_subtype_of(static):
                return candidate
        runtime = type(instance).__qualname__
        raise UnresolvedTypeError(
            f"instance of unregistered type {runtime!r} returned as {static.name!r} "
            "has no registered ancestor at or below the declared type"
        )


__all__ = [
    "LineageFunc",
    "ResolutionPolicy",
    "native_lineage",
]
