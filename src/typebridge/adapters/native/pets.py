"""Sample native object model and its exposure through the boundary.

The classes here play the part of a native library: ``Pet`` and ``Dog``
form a non-polymorphic hierarchy, ``PolymorphicPet`` and ``PolymorphicDog``
a polymorphic one. ``pet_store`` and ``pet_store2`` both hand out a dog
behind its base type; only the second one reaches the host as a dog.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from enum import IntEnum

from typebridge.application.boundary import TypeBoundary
from typebridge.domain.descriptors import Member, Overload, TypeDescriptor
from typebridge.domain.registry import TypeRegistry

from ..config.settings import BoundarySettings

logger = logging.getLogger(__name__)

MODULE_DOC = "An example module."
the_answer = 42
what = "World"


def add(i: int, j: int) -> int:
    """A function to add two integers."""
    return i + j


def add_def(i: int = 0, j: int = 0) -> int:
    """A function to add two integers with default parameters."""
    return i + j


class _Native:
    """Tracks whether the instance has been destroyed."""

    alive: bool = True


def destroy(instance: _Native) -> None:
    """Native destructor for every sample type."""
    instance.alive = False


class Pet(_Native):
    class Kind(IntEnum):
        Dog = 0
        Cat = 1

    # Enum values are also reachable from the enclosing class.
    Dog = Kind.Dog
    Cat = Kind.Cat

    def __init__(self, name: str, kind: Pet.Kind | None = None, *, owner: str = "") -> None:
        self.name = name
        self.owner = owner
        self.kind = kind
        self.age = 0

    def set_name(self, name: str) -> None:
        self.name = name

    def get_name(self) -> str:
        return self.name

    def set_age(self, age: int) -> None:
        self.age = age

    def __repr__(self) -> str:
        return f"<example.Pet named '{self.name}' owned by '{self.owner}'>"


class Dog(Pet):
    def __init__(self, name: str) -> None:
        super().__init__(name, Pet.Kind.Dog)

    def bark(self) -> str:
        return "woof!"


class PolymorphicPet(_Native):
    pass


class PolymorphicDog(PolymorphicPet):
    def bark(self) -> str:
        return "woof!"


def pet_store() -> Pet:
    """Return a Dog through its non-polymorphic base type."""
    return Dog("Rocky")


def pet_store2() -> PolymorphicPet:
    """Return a PolymorphicDog through its polymorphic base type."""
    return PolymorphicDog()


STORES: dict[str, tuple[Callable[[], object], Hashable]] = {
    "pet_store": (pet_store, Pet),
    "pet_store2": (pet_store2, PolymorphicPet),
}
"""Store name -> (factory, declared return type)."""


def register_pet_types(registry: TypeRegistry, *, prefix: str = "example.") -> dict[str, TypeDescriptor]:
    """Register the sample types and return their descriptors by short name.

    Example:
        >>> registry = TypeRegistry()
        >>> sorted(register_pet_types(registry))
        ['Dog', 'Kind', 'Pet', 'PolymorphicDog', 'PolymorphicPet']
        >>> registry.lookup(Dog).name
        'example.Dog'
    """
    pet = TypeDescriptor(
        Pet,
        f"{prefix}Pet",
        members=[
            Member.method("getName", "Get pet name.", attr="get_name"),
            Member.method("setName", "Set pet name.", attr="set_name"),
            Member.method(
                "set",
                "Set the pet's age or name.",
                Overload((int,), "set_age", "Set the pet's age", ("age",)),
                Overload((str,), "set_name", "Set the pet's name", ("name",)),
            ),
            Member.method("__repr__", "Return repr(self)."),
            Member.readwrite("owner", "Owner name."),
            Member.readwrite("name", "Pet name."),
            Member.readonly("kind", "Kind of pet."),
            Member.readonly("age", "Age in years."),
            Member.readonly("Dog", "Pet.Kind.Dog"),
            Member.readonly("Cat", "Pet.Kind.Cat"),
        ],
        dynamic_attr=True,
        destructor=destroy,
        doc="A pet with a name and an owner.",
    )
    kind = TypeDescriptor(
        Pet.Kind,
        f"{prefix}Pet.Kind",
        members=[Member.readonly("name"), Member.readonly("value")],
        doc="Enumeration of pet kinds.",
    )
    dog = TypeDescriptor(Dog, f"{prefix}Dog", parent=pet, members=[Member.method("bark", "Bark like a dog.")])
    poly_pet = TypeDescriptor(
        PolymorphicPet,
        f"{prefix}PolymorphicPet",
        polymorphic=True,
        destructor=destroy,
        doc="Base type resolved to its most-derived registered subclass.",
    )
    poly_dog = TypeDescriptor(
        PolymorphicDog,
        f"{prefix}PolymorphicDog",
        parent=poly_pet,
        members=[Member.method("bark", "Bark like a dog.")],
    )

    descriptors = {"Pet": pet, "Kind": kind, "Dog": dog, "PolymorphicPet": poly_pet, "PolymorphicDog": poly_dog}
    for descriptor in descriptors.values():
        registry.register(descriptor)
    return descriptors


def build_pet_boundary(settings: BoundarySettings) -> TypeBoundary:
    """Build a boundary exposing the sample types according to ``settings``."""
    registry = TypeRegistry()
    register_pet_types(registry, prefix=settings.display_name_prefix)
    if settings.freeze_registry:
        registry.freeze()
    logger.info(
        "Sample types registered",
        extra={"types": len(registry), "frozen": registry.frozen, "ownership": settings.default_ownership.value},
    )
    return TypeBoundary(
        registry,
        default_ownership=settings.default_ownership,
        freeze_on_resolve=settings.freeze_registry,
    )


__all__ = [
    "STORES",
    "Dog",
    "Pet",
    "PolymorphicDog",
    "PolymorphicPet",
    "add",
    "add_def",
    "build_pet_boundary",
    "destroy",
    "pet_store",
    "pet_store2",
    "register_pet_types",
    "the_answer",
    "what",
]
