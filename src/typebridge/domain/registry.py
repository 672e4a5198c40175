"""Registry mapping native type identities to exposed descriptors.

The registry is populated during module initialisation and is expected to
be read-only afterwards. Until :meth:`TypeRegistry.freeze` is called every
``register`` and ``lookup`` is serialised on one lock, so late registrations
stay safe; once frozen, lookups read the mapping without locking.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Hashable, Iterator

from .descriptors import TypeDescriptor
from .errors import DuplicateTypeError, RegistryFrozenError, UnknownTypeError

logger = logging.getLogger(__name__)


def _describe(identity: Hashable) -> str:
    return getattr(identity, "__qualname__", None) or repr(identity)


class TypeRegistry:
    """Mapping from native type identity to :class:`TypeDescriptor`.

    Example:
        >>> class Pet: ...
        >>> registry = TypeRegistry()
        >>> pet = TypeDescriptor(Pet, "Pet")
        >>> registry.register(pet)
        >>> registry.lookup(Pet) is pet
        True
        >>> registry.register(TypeDescriptor(Pet, "OtherPet"))
        Traceback (most recent call last):
        ...
        typebridge.domain.errors.DuplicateTypeError: type 'Pet' is already registered as 'Pet'
    """

    def __init__(self) -> None:
        self._by_identity: dict[Hashable, TypeDescriptor] = {}
        self._by_name: dict[str, TypeDescriptor] = {}
        self._lock = threading.RLock()
        self._frozen = False

    def register(self, descriptor: TypeDescriptor) -> None:
        """Insert ``descriptor``.

        Raises:
            DuplicateTypeError: The identity, or the exposed name, is taken.
            UnknownTypeError: The descriptor's parent is not registered here.
            RegistryFrozenError: The registry has been frozen.
        """
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(f"cannot register {descriptor.name!r}: registry is frozen")
            existing = self._by_identity.get(descriptor.identity)
            if existing is not None:
                raise DuplicateTypeError(
                    f"type {_describe(descriptor.identity)!r} is already registered as {existing.name!r}"
                )
            if descriptor.name in self._by_name:
                raise DuplicateTypeError(f"exposed name {descriptor.name!r} is already registered")
            parent = descriptor.parent
            if parent is not None and self._by_identity.get(parent.identity) is not parent:
                raise UnknownTypeError(
                    f"parent {parent.name!r} of {descriptor.name!r} must be registered before its subclasses"
                )
            self._by_identity[descriptor.identity] = descriptor
            self._by_name[descriptor.name] = descriptor
        logger.debug(
            "Registered type",
            extra={"type_name": descriptor.name, "parent": parent.name if parent else None},
        )

    def lookup(self, identity: Hashable) -> TypeDescriptor:
        """Return the descriptor registered for ``identity``.

        Raises:
            UnknownTypeError: Nothing is registered for ``identity``.
        """
        descriptor = self.get(identity)
        if descriptor is None:
            raise UnknownTypeError(f"type {_describe(identity)!r} is not registered")
        return descriptor

    def get(self, identity: Hashable, default: TypeDescriptor | None = None) -> TypeDescriptor | None:
        if self._frozen:
            return self._by_identity.get(identity, default)
        with self._lock:
            return self._by_identity.get(identity, default)

    def by_name(self, name: str) -> TypeDescriptor:
        """Return the descriptor exposed as ``name``."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownTypeError(f"no type is exposed as {name!r}") from None

    def freeze(self) -> None:
        """Make the registry read-only. Calling it again has no effect."""
        with self._lock:
            if not self._frozen:
                self._frozen = True
                logger.debug("Type registry frozen", extra={"types": len(self._by_identity)})

    @property
    def frozen(self) -> bool:
        return self._frozen

    def roots(self) -> list[TypeDescriptor]:
        return [d for d in self if d.parent is None]

    def children(self, descriptor: TypeDescriptor) -> list[TypeDescriptor]:
        return [d for d in self if d.parent is descriptor]

    def __contains__(self, identity: object) -> bool:
        try:
            return self.get(identity) is not None  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._by_identity)

    def __iter__(self) -> Iterator[TypeDescriptor]:
        with self._lock:
            snapshot = list(self._by_identity.values())
        return iter(snapshot)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<TypeRegistry {len(self)} types, {state}>"


__all__ = ["TypeRegistry"]
