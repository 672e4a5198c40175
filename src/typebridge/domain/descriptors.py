"""Exposed-type descriptors and their members.

A :class:`TypeDescriptor` describes one native type as the host sees it:
its native identity, its exposed name, its exposed parent, and whether the
boundary may resolve instances behind it to a more derived descriptor.

Descriptors are immutable. A parent must exist before its child can be
built, so parent links always form a forest.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .enums import MemberKind

Destructor = Callable[[Any], None]
"""Callable that releases one native instance."""


@dataclass(frozen=True, slots=True)
class Overload:
    """One signature of an overloaded method.

    Attributes:
        param_types: Parameter types, matched with ``isinstance``.
        target: Name of the native attribute invoked when this overload wins.
        doc: Short description shown in listings.
        param_names: Parameter names; required to pass arguments by keyword.
            Without them the overload is positional-only.

    Example:
        >>> age = Overload((int,), "set_age", param_names=("age",))
        >>> age.accepts((3,))
        True
        >>> age.accepts((True,))
        False
        >>> age.bind((), {"age": 3})
        (3,)
        >>> age.signature
        '(age: int)'
    """

    param_types: tuple[type, ...]
    target: str
    doc: str = ""
    param_names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.param_names and len(self.param_names) != len(self.param_types):
            raise ValueError(f"{self.target}: {len(self.param_names)} names for {len(self.param_types)} parameters")

    def accepts(self, args: tuple[object, ...]) -> bool:
        """Return True when ``args`` match this signature exactly.

        ``bool`` is rejected for ``int`` parameters even though it is a
        subclass, so ``set(True)`` never silently means ``set(1)``.
        """
        if len(args) != len(self.param_types):
            return False
        for value, expected in zip(args, self.param_types, strict=True):
            if isinstance(value, bool) and expected is not bool:
                return False
            if not isinstance(value, expected):
                return False
        return True

    def bind(self, args: tuple[object, ...], kwargs: Mapping[str, object] | None = None) -> tuple[object, ...] | None:
        """Return the positional arguments for this signature, or None if the call does not fit."""
        kwargs = kwargs or {}
        if len(args) + len(kwargs) != len(self.param_types):
            return None
        by_keyword = self.param_names[len(args) :]
        if set(kwargs) != set(by_keyword):
            return None
        bound = (*args, *(kwargs[name] for name in by_keyword))
        return bound if self.accepts(bound) else None

    @property
    def signature(self) -> str:
        if self.param_names:
            params = ", ".join(f"{n}: {t.__name__}" for n, t in zip(self.param_names, self.param_types, strict=True))
        else:
            params = ", ".join(t.__name__ for t in self.param_types)
        return f"({params})"


@dataclass(frozen=True, slots=True)
class Member:
    """An attribute or method exposed on a descriptor.

    ``attr`` names the native attribute behind the member when the exposed
    name differs from it.

    Example:
        >>> Member.method("bark", "Bark like a dog.").kind
        <MemberKind.METHOD: 'method'>
        >>> Member.readonly("kind").writable
        False
        >>> Member.method("getName", attr="get_name").native_name
        'get_name'
    """

    name: str
    kind: MemberKind = MemberKind.METHOD
    doc: str = ""
    overloads: tuple[Overload, ...] = ()
    attr: str = ""

    @classmethod
    def method(cls, name: str, doc: str = "", *overloads: Overload, attr: str = "") -> Member:
        return cls(name=name, kind=MemberKind.METHOD, doc=doc, overloads=tuple(overloads), attr=attr)

    @classmethod
    def readwrite(cls, name: str, doc: str = "", *, attr: str = "") -> Member:
        return cls(name=name, kind=MemberKind.PROPERTY, doc=doc, attr=attr)

    @classmethod
    def readonly(cls, name: str, doc: str = "", *, attr: str = "") -> Member:
        return cls(name=name, kind=MemberKind.READONLY, doc=doc, attr=attr)

    @property
    def native_name(self) -> str:
        return self.attr or self.name

    @property
    def writable(self) -> bool:
        return self.kind is MemberKind.PROPERTY

    def select_overload(
        self, args: tuple[object, ...], kwargs: Mapping[str, object] | None = None
    ) -> Overload | None:
        """Return the first overload the call binds to, or None."""
        for overload in self.overloads:
            if overload.bind(args, kwargs) is not None:
                return overload
        return None


RESERVED_MEMBER_NAMES: frozenset[str] = frozenset(
    {"acquire", "descriptor", "invoke", "ownership", "refcount", "release", "released", "target"}
)
"""Names taken by the handle's own API; descriptors cannot expose them."""


def _freeze_members(members: Iterable[Member] | Mapping[str, Member]) -> Mapping[str, Member]:
    items = members.values() if isinstance(members, Mapping) else members
    return MappingProxyType({member.name: member for member in items})


@dataclass(frozen=True, eq=False, slots=True)
class TypeDescriptor:
    """Describes one exposed type.

    Equality is identity: two descriptors are the same only when they are
    the same object, which is what the registry hands back from ``lookup``.

    Attributes:
        identity: Unique native type identity (any hashable, usually the
            native class itself).
        name: Exposed name presented to the host.
        parent: Exposed parent descriptor, None for a root type.
        polymorphic: Whether instances behind this static type are resolved
            to their most-derived registered descriptor.
        members: Exposed members, keyed by name.
        dynamic_attr: Whether the host may attach arbitrary attributes.
        destructor: Releases an owned native instance of this type.
        doc: Docstring for listings.

    Example:
        >>> class Pet: ...
        >>> class Dog(Pet): ...
        >>> pet = TypeDescriptor(Pet, "Pet", members=[Member.readwrite("name")])
        >>> dog = TypeDescriptor(Dog, "Dog", parent=pet, members=[Member.method("bark")])
        >>> [d.name for d in dog.lineage()]
        ['Dog', 'Pet']
        >>> dog.find_member("name").kind.value
        'property'
        >>> dog.is_subtype_of(pet), pet.is_subtype_of(dog)
        (True, False)
    """

    identity: Hashable
    name: str
    parent: TypeDescriptor | None = None
    polymorphic: bool = False
    members: Mapping[str, Member] = field(default_factory=dict)
    dynamic_attr: bool = False
    destructor: Destructor | None = None
    doc: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("descriptor name must not be empty")
        object.__setattr__(self, "members", _freeze_members(self.members))
        clashes = sorted(RESERVED_MEMBER_NAMES.intersection(self.members))
        if clashes:
            raise ValueError(
                f"{self.name!r} cannot expose {', '.join(clashes)}: "
                f"reserved handle names are {', '.join(sorted(RESERVED_MEMBER_NAMES))}"
            )

    def lineage(self) -> Iterator[TypeDescriptor]:
        """Yield this descriptor followed by each exposed ancestor."""
        node: TypeDescriptor | None = self
        while node is not None:
            yield node
            node = node.parent

    def is_subtype_of(self, other: TypeDescriptor) -> bool:
        return any(node is other for node in self.lineage())

    @property
    def root(self) -> TypeDescriptor:
        *_, last = self.lineage()
        return last

    def find_member(self, name: str) -> Member | None:
        """Return the nearest member called ``name`` along the lineage."""
        for node in self.lineage():
            member = node.members.get(name)
            if member is not None:
                return member
        return None

    def member_names(self) -> list[str]:
        """Return every exposed member name, own members first."""
        seen: dict[str, None] = {}
        for node in self.lineage():
            for member_name in node.members:
                seen.setdefault(member_name, None)
        return list(seen)

    def find_destructor(self) -> Destructor | None:
        for node in self.lineage():
            if node.destructor is not None:
                return node.destructor
        return None

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent is not None else None
        return f"TypeDescriptor(name={self.name!r}, parent={parent!r}, polymorphic={self.polymorphic})"


__all__ = [
    "Destructor",
    "Member",
    "Overload",
    "RESERVED_MEMBER_NAMES",
    "TypeDescriptor",
]
