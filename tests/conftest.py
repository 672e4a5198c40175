"""Shared pytest fixtures for domain, boundary, and CLI tests.

Fixtures use descriptive names that read as plain English and are picked up
implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from typebridge.application.boundary import TypeBoundary
from typebridge.domain.descriptors import Member, TypeDescriptor
from typebridge.domain.registry import TypeRegistry

if TYPE_CHECKING:
    from typebridge.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


# ======================== Native sample hierarchy ========================


class Animal:
    """Non-polymorphic native base."""

    def speak(self) -> str:
        return "..."


class Dog(Animal):
    def bark(self) -> str:
        return "woof!"


class PolyAnimal:
    """Polymorphic native base."""

    def speak(self) -> str:
        return "..."


class PolyDog(PolyAnimal):
    def bark(self) -> str:
        return "woof!"


class Puppy(PolyDog):
    """Never registered; resolves to its nearest registered ancestor."""


class Stranger:
    """Unrelated to every registered type."""


@dataclass
class AnimalTypes:
    """Registry populated with both sample hierarchies and its descriptors."""

    registry: TypeRegistry
    animal: TypeDescriptor
    dog: TypeDescriptor
    poly_animal: TypeDescriptor
    poly_dog: TypeDescriptor


@pytest.fixture
def animal_types() -> AnimalTypes:
    """Register ``Animal``/``Dog`` (static) and ``PolyAnimal``/``PolyDog`` (polymorphic).

    The registry is left open so tests may add more types.
    """
    registry = TypeRegistry()
    animal = TypeDescriptor(Animal, "Animal", members=[Member.method("speak")])
    dog = TypeDescriptor(Dog, "Dog", parent=animal, members=[Member.method("bark")])
    poly_animal = TypeDescriptor(PolyAnimal, "PolyAnimal", polymorphic=True, members=[Member.method("speak")])
    poly_dog = TypeDescriptor(PolyDog, "PolyDog", parent=poly_animal, members=[Member.method("bark")])
    for descriptor in (animal, dog, poly_animal, poly_dog):
        registry.register(descriptor)
    return AnimalTypes(registry=registry, animal=animal, dog=dog, poly_animal=poly_animal, poly_dog=poly_dog)


@pytest.fixture
def animal_boundary(animal_types: AnimalTypes) -> TypeBoundary:
    """Boundary over ``animal_types`` that freezes on first resolve."""
    return TypeBoundary(animal_types.registry)


@pytest.fixture
def destroyed() -> list[object]:
    """Collects every native instance passed to ``record_destruction``."""
    return []


@pytest.fixture
def record_destruction(destroyed: list[object]) -> Callable[[object], None]:
    """Destructor that records its argument in ``destroyed``."""
    return destroyed.append


# ======================== CLI fixtures ========================


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output; log lines go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from typebridge.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache around the test."""
    from typebridge.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield
    config_mod.get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only the ``get_config`` I/O boundary is replaced; every other service is
    the production adapter.

    Example:
        def test_types(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"typebridge": {"display_name_prefix": "zoo."}})
            result = cli_runner.invoke(cli, ["types"], obj=factory)
    """
    from typebridge.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services: AppServices = replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _create
