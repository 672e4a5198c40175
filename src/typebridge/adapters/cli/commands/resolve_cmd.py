"""Resolve the result of a sample store across the boundary.

``pet_store`` returns a dog through the non-polymorphic ``Pet`` type, so the
host only sees a ``Pet`` and ``bark`` is unreachable. ``pet_store2`` returns
one through the polymorphic ``PolymorphicPet`` type and the host sees the
dog.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from typebridge.adapters.native.pets import STORES
from typebridge.domain.enums import Ownership
from typebridge.domain.errors import TypeBridgeError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


def _python_error_name(exc: TypeBridgeError) -> str:
    """Name of the builtin the host would catch, e.g. ``AttributeError``."""
    for base in (AttributeError, TypeError, LookupError, ReferenceError):
        if isinstance(exc, base):
            return base.__name__
    return type(exc).__name__


@click.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("store", type=click.Choice(sorted(STORES)))
@click.option(
    "--ownership",
    type=click.Choice([o.value for o in Ownership], case_sensitive=False),
    default=None,
    help="Ownership of the returned instance (defaults to typebridge.default_ownership)",
)
@click.option(
    "--call",
    "method",
    default="bark",
    show_default=True,
    help="Method to call on the resolved handle",
)
@click.option("--strict", is_flag=True, default=False, help="Exit non-zero when the call fails")
@click.pass_context
def cli_resolve(ctx: click.Context, store: str, ownership: str | None, method: str, strict: bool) -> None:
    """Call STORE, resolve its result, and try a method on the handle.

    A failed call is printed the way the host would see it. With
    ``--strict`` it also ends the command with the error's exit code.
    """
    boundary = get_cli_context(ctx).boundary()
    factory, declared = STORES[store]
    mode = Ownership(ownership.lower()) if ownership else None

    with lib_log_rich.runtime.bind(job_id="cli-resolve", extra={"command": "resolve", "store": store}):
        instance = factory()
        handle = boundary.resolve(declared, instance, mode)

        failure: TypeBridgeError | None = None
        with handle:
            click.echo(f"store:         {store}")
            click.echo(f"declared type: {boundary.lookup(declared).name}")
            click.echo(f"resolved type: {handle.descriptor.name}")
            click.echo(f"ownership:     {handle.ownership.value}")
            try:
                result = handle.invoke(method)
            except TypeBridgeError as exc:
                failure = exc
                click.echo(f"{method}():       {_python_error_name(exc)}: {exc}")
            else:
                click.echo(f"{method}():       {result!r}")
        click.echo(f"released:      {'destroyed' if not getattr(instance, 'alive', True) else 'kept alive'}")
        logger.info(
            "Resolved store result",
            extra={"resolved_type": handle.descriptor.name, "call_failed": failure is not None},
        )

    if strict and failure is not None:
        raise failure


__all__ = ["cli_resolve"]
