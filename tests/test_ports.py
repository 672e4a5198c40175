"""Port behavioral contract tests: verify in-memory adapter implementations.

Tests exercise in-memory adapters and the boundary builder. Production
adapters are tested via CLI integration tests; static type conformance is
enforced by pyright.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from typebridge.adapters.config.settings import BoundarySettings
from typebridge.adapters.memory import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
    load_boundary_settings_in_memory,
)
from typebridge.adapters.native.pets import build_pet_boundary
from typebridge.application.boundary import TypeBoundary

if TYPE_CHECKING:
    from typebridge.application.ports import (
        BuildBoundary,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadBoundarySettings,
    )


# ======================== In-Memory Adapter Contract Tests ========================


@pytest.fixture
def get_config_impl() -> GetConfig:
    """Provide in-memory GetConfig implementation."""
    return get_config_in_memory


@pytest.fixture
def get_default_config_path_impl() -> GetDefaultConfigPath:
    return get_default_config_path_in_memory


@pytest.fixture
def display_config_impl() -> DisplayConfig:
    return display_config_in_memory


@pytest.fixture
def load_boundary_settings_impl() -> LoadBoundarySettings:
    return load_boundary_settings_in_memory


@pytest.fixture
def build_boundary_impl() -> BuildBoundary:
    """The boundary builder has no in-memory variant; both wirings share it."""
    return build_pet_boundary


@pytest.fixture
def init_logging_impl() -> InitLogging:
    return init_logging_in_memory


@pytest.mark.os_agnostic
def test_get_config_returns_config_with_dict(get_config_impl: GetConfig) -> None:
    """GetConfig must return a Config whose as_dict() yields a dict."""
    config = get_config_impl()
    assert isinstance(config, Config)
    assert isinstance(config.as_dict(), dict)


@pytest.mark.os_agnostic
def test_get_default_config_path_returns_toml_path(get_default_config_path_impl: GetDefaultConfigPath) -> None:
    """GetDefaultConfigPath must return a Path ending in .toml."""
    path = get_default_config_path_impl()
    assert isinstance(path, Path)
    assert path.suffix == ".toml"


@pytest.mark.os_agnostic
def test_display_config_accepts_a_config(display_config_impl: DisplayConfig) -> None:
    display_config_impl(Config({"typebridge": {}}, {}), section="typebridge")


@pytest.mark.os_agnostic
def test_load_boundary_settings_returns_settings(load_boundary_settings_impl: LoadBoundarySettings) -> None:
    """LoadBoundarySettings must return BoundarySettings from any mapping."""
    result = load_boundary_settings_impl({"typebridge": {"default_ownership": "owned"}})
    assert isinstance(result, BoundarySettings)


@pytest.mark.os_agnostic
def test_load_boundary_settings_accepts_empty_dict(load_boundary_settings_impl: LoadBoundarySettings) -> None:
    assert isinstance(load_boundary_settings_impl({}), BoundarySettings)


@pytest.mark.os_agnostic
def test_build_boundary_returns_populated_boundary(build_boundary_impl: BuildBoundary) -> None:
    boundary = build_boundary_impl(BoundarySettings())
    assert isinstance(boundary, TypeBoundary)
    assert len(boundary.registry) == 5


@pytest.mark.os_agnostic
def test_init_logging_does_not_raise(init_logging_impl: InitLogging) -> None:
    """InitLogging must not raise when called with a Config."""
    init_logging_impl(Config({}, {}))


# ======================== Composition Wiring Tests ========================


@pytest.mark.os_agnostic
def test_build_production_returns_fully_populated_app_services() -> None:
    """build_production() must return AppServices with all fields populated."""
    from typebridge.composition import AppServices, build_production

    services = build_production()
    assert isinstance(services, AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))


@pytest.mark.os_agnostic
def test_build_testing_returns_fully_populated_app_services() -> None:
    """build_testing() must return AppServices with all in-memory implementations."""
    from typebridge.composition import AppServices, build_testing

    services = build_testing()
    assert isinstance(services, AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))


@pytest.mark.os_agnostic
def test_build_testing_uses_in_memory_config() -> None:
    from typebridge.composition import build_testing

    services = build_testing()
    assert services.get_config is get_config_in_memory
    assert services.init_logging is init_logging_in_memory
