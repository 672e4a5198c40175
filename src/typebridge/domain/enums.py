"""Type-safe domain enums for ownership, member kinds, and output formats."""

from __future__ import annotations

from enum import Enum


class Ownership(str, Enum):
    """Who is responsible for releasing a native instance behind a handle.

    Attributes:
        OWNED: The handle releases the native instance when its last
            reference goes away.
        BORROWED: The caller keeps responsibility; the handle never
            releases the instance.

    Example:
        >>> Ownership.OWNED.value
        'owned'
        >>> Ownership.BORROWED == "borrowed"
        True
    """

    OWNED = "owned"
    BORROWED = "borrowed"


class MemberKind(str, Enum):
    """How an exposed member behaves on the host side.

    Attributes:
        METHOD: Callable member, optionally backed by an overload set.
        PROPERTY: Readable and writable attribute.
        READONLY: Readable attribute that rejects assignment.

    Example:
        >>> MemberKind("readonly") is MemberKind.READONLY
        True
    """

    METHOD = "method"
    PROPERTY = "property"
    READONLY = "readonly"


class OutputFormat(str, Enum):
    """Output format options for configuration and registry display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "MemberKind",
    "OutputFormat",
    "Ownership",
]
