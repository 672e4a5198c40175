"""Console script entry point with production wiring.

Lives outside the adapters package so wiring the composition root does not
break the layer contracts.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
