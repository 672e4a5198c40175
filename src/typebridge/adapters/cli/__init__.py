"""Command-line interface over the sample type boundary.

Contents:
    * Root command group and boundary error reporting from :mod:`.root`
    * Shared invocation state from :mod:`.context`
    * Entry point from :mod:`.main`
    * Command functions from :mod:`.commands`
"""

from __future__ import annotations

from .commands import cli_config, cli_info, cli_resolve, cli_types
from .context import CLIContext, TracebackState, get_cli_context
from .exit_codes import ExitCode, exit_code_for
from .main import main
from .root import BoundaryGroup, cli

__all__ = [
    "BoundaryGroup",
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "cli",
    "cli_config",
    "cli_info",
    "cli_resolve",
    "cli_types",
    "exit_code_for",
    "get_cli_context",
    "main",
]
