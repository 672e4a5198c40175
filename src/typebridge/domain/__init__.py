"""Domain layer - pure type-resolution logic with no I/O or framework dependencies.

Contents:
    * :mod:`.descriptors` - TypeDescriptor, Member, Overload
    * :mod:`.registry` - TypeRegistry (native identity -> descriptor)
    * :mod:`.resolution` - ResolutionPolicy (static vs most-derived binding)
    * :mod:`.handles` - Handle and the ``adopt`` ownership transfer adapter
    * :mod:`.enums` - Domain enumerations (Ownership, MemberKind, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .descriptors import RESERVED_MEMBER_NAMES, Destructor, Member, Overload, TypeDescriptor
from .enums import MemberKind, OutputFormat, Ownership
from .errors import (
    AttributeNotFoundError,
    ConfigurationError,
    DuplicateTypeError,
    MemberNotCallableError,
    NoMatchingOverloadError,
    ReadOnlyAttributeError,
    RegistryFrozenError,
    ReleasedHandleError,
    TypeBridgeError,
    UnknownTypeError,
    UnresolvedTypeError,
)
from .handles import Handle, adopt
from .registry import TypeRegistry
from .resolution import LineageFunc, ResolutionPolicy, native_lineage

__all__ = [
    # Descriptors
    "RESERVED_MEMBER_NAMES",
    "Destructor",
    "Member",
    "Overload",
    "TypeDescriptor",
    # Registry and resolution
    "LineageFunc",
    "ResolutionPolicy",
    "TypeRegistry",
    "native_lineage",
    # Handles
    "Handle",
    "adopt",
    # Enums
    "MemberKind",
    "OutputFormat",
    "Ownership",
    # Errors
    "AttributeNotFoundError",
    "ConfigurationError",
    "DuplicateTypeError",
    "MemberNotCallableError",
    "NoMatchingOverloadError",
    "ReadOnlyAttributeError",
    "RegistryFrozenError",
    "ReleasedHandleError",
    "TypeBridgeError",
    "UnknownTypeError",
    "UnresolvedTypeError",
]
