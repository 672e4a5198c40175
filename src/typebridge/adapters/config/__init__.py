"""Configuration adapter - loading, display, overrides, and boundary settings.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - ``[typebridge]`` section model
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import BoundarySettings, load_boundary_settings

__all__ = [
    "BoundarySettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_boundary_settings",
]
