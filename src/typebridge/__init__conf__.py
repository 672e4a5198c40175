"""Static package metadata and layered-configuration identifiers.

Values here are referenced by the CLI (version banner, program name), the
configuration loader (vendor/app/slug for platform paths) and the logging
adapter (default service name).
"""

from __future__ import annotations

name = "typebridge"
title = "Cross-boundary type resolution registry for native object handles"
version = "0.3.0"
homepage = "https://github.com/typebridge/typebridge"
author = "typebridge contributors"
author_email = "maintainers@typebridge.dev"
shell_command = "typebridge"

LAYEREDCONF_VENDOR = "typebridge"
LAYEREDCONF_APP = "typebridge"
LAYEREDCONF_SLUG = "typebridge"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for typebridge:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
