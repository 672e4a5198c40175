"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading, display, overrides, settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.native` - Sample native object model and its registration
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
