"""Process entry point shared by the console script and ``python -m typebridge``.

Boundary errors are already reported by the root group; anything else that
escapes is printed by ``lib_cli_exit_tools`` according to ``--traceback``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from typebridge import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState

if TYPE_CHECKING:
    from typebridge.composition import AppServices


def _report_crash(exc: BaseException) -> int:
    state = TracebackState.capture()
    TracebackState.enabled_if(state.traceback).apply()
    limit = TRACEBACK_VERBOSE_LIMIT if state.traceback else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=state.traceback, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    # Click is driven directly because lib_cli_exit_tools.run_cli cannot pass ctx.obj.
    try:
        outcome = cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt too
        return _report_crash(exc)
    # Without standalone mode ``ctx.exit(code)`` surfaces as the return value.
    return outcome if isinstance(outcome, int) else 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were.
        services_factory: Builds the AppServices, usually ``build_production``.

    Raises:
        ValueError: ``services_factory`` is missing.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous = TracebackState.capture()
    try:
        return _run_cli(argv, services_factory)
    finally:
        if restore_traceback:
            previous.apply()
        # Only the main thread owns the logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
