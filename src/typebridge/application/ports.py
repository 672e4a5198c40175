"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Module-level functions satisfy
these protocols structurally (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``BoundarySettings``) are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import BoundarySettings
    from .boundary import TypeBoundary


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadBoundarySettings(Protocol):
    """Parse the ``[typebridge]`` section into BoundarySettings."""

    def __call__(self, config_dict: Mapping[str, Any]) -> BoundarySettings: ...


class BuildBoundary(Protocol):
    """Build a TypeBoundary with the sample types registered."""

    def __call__(self, settings: BoundarySettings) -> TypeBoundary: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "BuildBoundary",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadBoundarySettings",
]
