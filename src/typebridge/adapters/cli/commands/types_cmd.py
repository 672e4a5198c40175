"""Registry listing command.

Contents:
    * :func:`cli_types` - Show the exposed sample types as a tree or JSON.
    * :func:`describe_type` - JSON-ready view of one descriptor.
"""

from __future__ import annotations

import logging
from typing import Any

import lib_log_rich.runtime
import orjson
import rich_click as click
from rich.console import Console
from rich.tree import Tree

from typebridge.domain.descriptors import TypeDescriptor
from typebridge.domain.enums import OutputFormat
from typebridge.domain.registry import TypeRegistry

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


def describe_type(descriptor: TypeDescriptor) -> dict[str, Any]:
    """Return a JSON-ready mapping describing ``descriptor``'s own members."""
    return {
        "name": descriptor.name,
        "parent": descriptor.parent.name if descriptor.parent is not None else None,
        "polymorphic": descriptor.polymorphic,
        "dynamic_attr": descriptor.dynamic_attr,
        "doc": descriptor.doc,
        "members": [
            {
                "name": member.name,
                "kind": member.kind.value,
                "doc": member.doc,
                "overloads": [overload.signature for overload in member.overloads],
            }
            for member in descriptor.members.values()
        ],
    }


def _label(descriptor: TypeDescriptor) -> str:
    flags = " [bold]polymorphic[/bold]" if descriptor.polymorphic else ""
    members = ", ".join(descriptor.members) or "-"
    return f"[cyan]{descriptor.name}[/cyan]{flags}  [dim]{members}[/dim]"


def _add_children(registry: TypeRegistry, branch: Tree, descriptor: TypeDescriptor) -> None:
    for child in registry.children(descriptor):
        _add_children(registry, branch.add(_label(child)), child)


def _render_tree(registry: TypeRegistry) -> Tree:
    state = "frozen" if registry.frozen else "open"
    tree = Tree(f"[bold]{len(registry)} exposed types[/bold] ({state})")
    for root in registry.roots():
        _add_children(registry, tree.add(_label(root)), root)
    return tree


@click.command("types", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable tree or JSON)",
)
@click.pass_context
def cli_types(ctx: click.Context, output_format: str) -> None:
    """List the exposed sample types and their members."""
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(job_id="cli-types", extra={"command": "types", "format": fmt.value}):
        registry = cli_ctx.boundary().registry
        logger.info("Listing exposed types", extra={"types": len(registry)})
        if fmt is OutputFormat.JSON:
            payload = [describe_type(descriptor) for descriptor in registry]
            click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
        else:
            Console().print(_render_tree(registry))


__all__ = ["cli_types", "describe_type"]
