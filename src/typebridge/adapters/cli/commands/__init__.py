"""CLI command implementations.

Contents:
    * :mod:`.info` - Package metadata
    * :mod:`.config` - Configuration display
    * :mod:`.types_cmd` - Registry listing
    * :mod:`.resolve_cmd` - Boundary resolution of the sample stores
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .resolve_cmd import cli_resolve
from .types_cmd import cli_types

__all__ = [
    "cli_config",
    "cli_info",
    "cli_resolve",
    "cli_types",
]
