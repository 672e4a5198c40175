"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.settings import load_boundary_settings
from ..adapters.logging.setup import init_logging
from ..adapters.native.pets import build_pet_boundary

# pyright checks that each adapter structurally satisfies its Protocol.
if TYPE_CHECKING:
    from ..application.ports import (
        BuildBoundary,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadBoundarySettings,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_load_boundary_settings: LoadBoundarySettings = load_boundary_settings
    _assert_build_boundary: BuildBoundary = build_pet_boundary
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    load_boundary_settings: LoadBoundarySettings
    build_boundary: BuildBoundary
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        load_boundary_settings=load_boundary_settings,
        build_boundary=build_pet_boundary,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    The sample boundary has no I/O, so it is shared with production.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_boundary_settings_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        load_boundary_settings=load_boundary_settings_in_memory,
        build_boundary=build_pet_boundary,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    "AppServices",
    "build_pet_boundary",
    "build_production",
    "build_testing",
    "display_config",
    "get_config",
    "get_default_config_path",
    "init_logging",
    "load_boundary_settings",
]
