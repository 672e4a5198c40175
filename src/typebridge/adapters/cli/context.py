"""State shared between the root group and its subcommands.

The root group replaces ``ctx.obj`` (the services factory) with a
:class:`CLIContext`. Commands that need the sample boundary ask the context
for it, so settings are validated and types registered once per invocation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from typebridge.application.boundary import TypeBoundary
    from typebridge.composition import AppServices


@dataclass(frozen=True, slots=True)
class TracebackState:
    """The two traceback flags of ``lib_cli_exit_tools.config``.

    Example:
        >>> TracebackState.enabled_if(True)
        TracebackState(traceback=True, force_color=True)
    """

    traceback: bool = False
    force_color: bool = False

    @classmethod
    def enabled_if(cls, flag: bool) -> TracebackState:
        return cls(traceback=bool(flag), force_color=bool(flag))

    @classmethod
    def capture(cls) -> TracebackState:
        config = lib_cli_exit_tools.config
        return cls(
            traceback=bool(getattr(config, "traceback", False)),
            force_color=bool(getattr(config, "traceback_force_color", False)),
        )

    def apply(self) -> None:
        lib_cli_exit_tools.config.traceback = self.traceback
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


@dataclass(slots=True)
class CLIContext:
    """Per-invocation state: flags, merged configuration, and services.

    ``set_overrides`` is kept so ``config --profile`` can reapply the root
    ``--set`` values to a reloaded configuration.
    """

    config: Config
    services: AppServices
    traceback: bool = False
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()
    _boundary: TypeBoundary | None = field(default=None, repr=False)

    def boundary(self) -> TypeBoundary:
        """Return the sample boundary configured by ``[typebridge]``.

        Raises:
            ConfigurationError: The ``[typebridge]`` section is invalid.
        """
        if self._boundary is None:
            settings = self.services.load_boundary_settings(self.config.as_dict())
            self._boundary = self.services.build_boundary(settings)
        return self._boundary


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state the root group stored on ``ctx``.

    Raises:
        RuntimeError: The root group did not run first.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized; commands must run below the root group.")
    return ctx.obj


__all__ = [
    "CLIContext",
    "TracebackState",
    "get_cli_context",
]
