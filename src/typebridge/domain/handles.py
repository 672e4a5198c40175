"""Host-visible handles and the ownership transfer adapter.

A :class:`Handle` wraps one native instance together with the descriptor
chosen for it at crossing time and an ownership tag. Member access is
checked against the descriptor, so a derived instance presented through a
non-polymorphic base descriptor only shows the base members.

The native reference lives in a small slot object shared with a
``weakref.finalize`` hook. Releasing clears the slot under its lock before
the destructor runs, which makes release idempotent and rules out
double-release and use-after-release.
"""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable
from typing import Any

from .descriptors import Destructor, Member, TypeDescriptor
from .enums import MemberKind, Ownership
from .errors import (
    AttributeNotFoundError,
    MemberNotCallableError,
    NoMatchingOverloadError,
    ReadOnlyAttributeError,
    ReleasedHandleError,
)

logger = logging.getLogger(__name__)


class _NativeSlot:
    """The adapted native reference; ``target`` is None once released."""

    __slots__ = ("destructor", "lock", "name", "target")

    def __init__(self, target: object, destructor: Destructor | None, name: str) -> None:
        self.target: object | None = target
        self.destructor = destructor
        self.name = name
        self.lock = threading.RLock()

    def release(self) -> bool:
        with self.lock:
            target = self.target
            if target is None:
                return False
            self.target = None
        if self.destructor is not None:
            logger.debug("Releasing owned native instance", extra={"type_name": self.name})
            self.destructor(target)
        return True


class Handle:
    """Boundary-crossing reference to one native instance.

    Handles start with a reference count of one. :meth:`acquire` adds a
    reference, :meth:`release` drops one; when the count reaches zero an
    owned native instance is destroyed exactly once. Further releases are
    no-ops and any later access raises :class:`ReleasedHandleError`.

    The handle's own API names are listed in ``RESERVED_MEMBER_NAMES``;
    descriptors refuse members with those names, so exposed members never
    hide behind them.
    """

    __slots__ = ("__weakref__", "_descriptor", "_extras", "_finalizer", "_ownership", "_refcount", "_slot")

    def __init__(
        self,
        target: object,
        descriptor: TypeDescriptor,
        ownership: Ownership,
        destructor: Destructor | None = None,
    ) -> None:
        slot = _NativeSlot(target, destructor if ownership is Ownership.OWNED else None, descriptor.name)
        object.__setattr__(self, "_slot", slot)
        object.__setattr__(self, "_descriptor", descriptor)
        object.__setattr__(self, "_ownership", ownership)
        object.__setattr__(self, "_refcount", 1)
        object.__setattr__(self, "_extras", {})
        object.__setattr__(self, "_finalizer", weakref.finalize(self, slot.release))

    @property
    def descriptor(self) -> TypeDescriptor:
        return self._descriptor

    @property
    def ownership(self) -> Ownership:
        return self._ownership

    @property
    def refcount(self) -> int:
        return self._refcount

    @property
    def released(self) -> bool:
        return self._slot.target is None

    @property
    def target(self) -> Any:
        """The native instance. Raises :class:`ReleasedHandleError` once released."""
        target = self._slot.target
        if target is None:
            raise ReleasedHandleError(f"{self._descriptor.name!r} handle has been released")
        return target

    def acquire(self) -> Handle:
        """Add a host-side reference and return the handle."""
        with self._slot.lock:
            if self._slot.target is None:
                raise ReleasedHandleError(f"cannot acquire released {self._descriptor.name!r} handle")
            object.__setattr__(self, "_refcount", self._refcount + 1)
        return self

    def release(self) -> bool:
        """Drop one reference; return True if this call released the instance.

        Example:
            >>> from typebridge.domain.descriptors import TypeDescriptor
            >>> released = []
            >>> handle = adopt(object(), TypeDescriptor(object, "object"), destructor=released.append)
            >>> handle.release(), handle.release(), len(released)
            (True, False, 1)
        """
        with self._slot.lock:
            if self._slot.target is None or self._refcount == 0:
                return False
            remaining = self._refcount - 1
            object.__setattr__(self, "_refcount", remaining)
            if remaining:
                return False
            released = self._slot.release()
        self._finalizer.detach()
        return released

    def invoke(self, name: str, *args: object, **kwargs: object) -> Any:
        """Call the exposed method ``name`` with the given arguments.

        Raises:
            AttributeNotFoundError: ``name`` is not exposed.
            MemberNotCallableError: ``name`` is a property, not a method.
            NoMatchingOverloadError: No overload of ``name`` fits the call.
        """
        member = self._member(name)
        if member.kind is not MemberKind.METHOD:
            raise MemberNotCallableError(
                f"{self._descriptor.name!r} member {name!r} is a {member.kind.value}, not a method"
            )
        return self._bound_member(member)(*args, **kwargs)

    def __enter__(self) -> Handle:
        return self

    def __exit__(self, *_exc: object) -> None:
        self.release()

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        extras: dict[str, object] = self._extras
        if name in extras:
            return extras[name]
        return self._bound_member(self._member(name))

    def __setattr__(self, name: str, value: object) -> None:
        member = self._descriptor.find_member(name)
        if member is None:
            if not self._descriptor.dynamic_attr:
                raise AttributeNotFoundError(self._missing(name))
            self._extras[name] = value
            return
        if not member.writable:
            raise ReadOnlyAttributeError(f"attribute {name!r} of {self._descriptor.name!r} is read-only")
        setattr(self.target, member.native_name, value)

    def __dir__(self) -> list[str]:
        return sorted({*self._descriptor.member_names(), *self._extras})

    def __repr__(self) -> str:
        if self._descriptor.find_member("__repr__") is not None and not self.released:
            return repr(self.target)
        state = "released" if self.released else self._ownership.value
        return f"<{self._descriptor.name} handle ({state})>"

    def _member(self, name: str) -> Member:
        member = self._descriptor.find_member(name)
        if member is None:
            raise AttributeNotFoundError(self._missing(name))
        return member

    def _bound_member(self, member: Member) -> Any:
        target = self.target
        if member.kind is MemberKind.METHOD and member.overloads:
            return self._dispatcher(member)
        return getattr(target, member.native_name)

    def _dispatcher(self, member: Member) -> Callable[..., Any]:
        def dispatch(*args: object, **kwargs: object) -> Any:
            for overload in member.overloads:
                bound = overload.bind(args, kwargs)
                if bound is not None:
                    return getattr(self.target, overload.target)(*bound)
            supported = "\n".join(
                f"    {index}. {member.name}{candidate.signature}"
                for index, candidate in enumerate(member.overloads, start=1)
            )
            passed = ", ".join(
                [*(type(arg).__name__ for arg in args), *(f"{key}={type(v).__name__}" for key, v in kwargs.items())]
            )
            raise NoMatchingOverloadError(
                f"{member.name}(): incompatible function arguments. "
                f"The following argument types are supported:\n{supported}\n\nInvoked with: ({passed})"
            )

        dispatch.__name__ = member.name
        dispatch.__doc__ = member.doc
        return dispatch

    def _missing(self, name: str) -> str:
        return f"{self._descriptor.name!r} object has no attribute {name!r}"


def adopt(
    native: object,
    descriptor: TypeDescriptor,
    ownership: Ownership = Ownership.OWNED,
    *,
    destructor: Destructor | None = None,
) -> Handle:
    """Wrap ``native`` into a host-visible handle.

    Owned handles destroy the instance with ``destructor`` (or the nearest
    destructor along the descriptor's lineage) once their last reference is
    released; without any destructor releasing only drops the reference.
    Borrowed handles never destroy the instance, and the caller must keep it
    valid for as long as the handle is used.

    Raises:
        ValueError: ``native`` is None.
    """
    if native is None:
        raise ValueError(f"cannot adopt a null {descriptor.name!r} instance")
    ownership = Ownership(ownership)
    if ownership is Ownership.OWNED and destructor is None:
        destructor = descriptor.find_destructor()
    return Handle(native, descriptor, ownership, destructor)


__all__ = [
    "Handle",
    "adopt",
]
