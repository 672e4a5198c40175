"""Boundary facade: register types, resolve crossing instances, release handles.

:class:`TypeBoundary` is the surface the host runtime talks to. It owns one
:class:`~typebridge.domain.registry.TypeRegistry`, applies the
:class:`~typebridge.domain.resolution.ResolutionPolicy`, and hands the
chosen descriptor to the ownership transfer adapter.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable

from ..domain.descriptors import Destructor, TypeDescriptor
from ..domain.enums import Ownership
from ..domain.handles import Handle, adopt
from ..domain.registry import TypeRegistry
from ..domain.resolution import LineageFunc, ResolutionPolicy, native_lineage

logger = logging.getLogger(__name__)


class TypeBoundary:
    """Cross-boundary type resolution for native instances.

    Args:
        registry: Registry to use; a fresh one is created when omitted.
        lineage: Runtime type lookup for polymorphic static types.
        default_ownership: Ownership applied when ``resolve`` is not told.
        freeze_on_resolve: Freeze the registry on the first ``resolve`` so
            steady-state lookups run without locking.

    Example:
        >>> class PolyAnimal: ...
        >>> class PolyDog(PolyAnimal): ...
        >>> boundary = TypeBoundary()
        >>> animal = TypeDescriptor(PolyAnimal, "PolyAnimal", polymorphic=True)
        >>> boundary.register(animal)
        >>> boundary.register(TypeDescriptor(PolyDog, "PolyDog", parent=animal))
        >>> handle = boundary.resolve(PolyAnimal, PolyDog())
        >>> handle.descriptor.name
        'PolyDog'
        >>> boundary.release(handle)
        >>> handle.released
        True
    """

    def __init__(
        self,
        registry: TypeRegistry | None = None,
        *,
        lineage: LineageFunc = native_lineage,
        default_ownership: Ownership = Ownership.OWNED,
        freeze_on_resolve: bool = True,
    ) -> None:
        self._registry = registry if registry is not None else TypeRegistry()
        self._policy = ResolutionPolicy(self._registry, lineage)
        self._default_ownership = Ownership(default_ownership)
        self._freeze_on_resolve = freeze_on_resolve

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    @property
    def default_ownership(self) -> Ownership:
        return self._default_ownership

    def register(self, descriptor: TypeDescriptor) -> None:
        """Expose ``descriptor``; raises ``DuplicateTypeError`` on conflict."""
        self._registry.register(descriptor)

    def lookup(self, identity: Hashable) -> TypeDescriptor:
        return self._registry.lookup(identity)

    def resolve(
        self,
        static_identity: Hashable,
        instance: object,
        ownership: Ownership | None = None,
        *,
        destructor: Destructor | None = None,
    ) -> Handle:
        """Wrap ``instance``, returned behind ``static_identity``, in a handle.

        Raises:
            UnknownTypeError: ``static_identity`` is not registered.
            UnresolvedTypeError: The instance has no registered type at or
                below a polymorphic static type.
        """
        if self._freeze_on_resolve and not self._registry.frozen:
            self._registry.freeze()
        descriptor = self._policy.resolve_descriptor(static_identity, instance)
        mode = self._default_ownership if ownership is None else Ownership(ownership)
        return adopt(instance, descriptor, mode, destructor=destructor)

    def release(self, handle: Handle) -> None:
        """Release ``handle``; calling it again has no effect."""
        handle.release()


__all__ = ["TypeBoundary"]
