"""Configuration display, delegating to lib_layered_config's Rich renderer.

Flushes pending log output first so log lines and configuration output do
not interleave.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from typebridge.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Render ``config`` (or one ``section`` of it) to the console.

    Args:
        config: Loaded layered configuration.
        output_format: Human (TOML-like) or JSON output.
        section: Restrict output to one top-level section, e.g. ``typebridge``.
        console: Rich console to write to; mainly for tests.
        profile: Profile name shown in provenance comments.

    Raises:
        ValueError: ``section`` does not exist.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


__all__ = ["display_config"]
