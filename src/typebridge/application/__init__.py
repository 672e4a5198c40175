"""Application layer - the boundary facade and port definitions.

Contents:
    * :mod:`.boundary` - TypeBoundary (register / resolve / release)
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .boundary import TypeBoundary
from .ports import (
    BuildBoundary,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadBoundarySettings,
)

__all__ = [
    "BuildBoundary",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadBoundarySettings",
    "TypeBoundary",
]
