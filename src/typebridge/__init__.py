"""Public package surface for cross-boundary type resolution.

Routes imports through the architectural layers:
- Domain exports: descriptors, registry, resolution policy, handles, errors
- Application exports: the TypeBoundary facade
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.boundary import TypeBoundary

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    AttributeNotFoundError,
    DuplicateTypeError,
    Handle,
    Member,
    Overload,
    Ownership,
    ResolutionPolicy,
    TypeBridgeError,
    TypeDescriptor,
    TypeRegistry,
    UnknownTypeError,
    UnresolvedTypeError,
    adopt,
)

__all__ = [
    "AttributeNotFoundError",
    "DuplicateTypeError",
    "Handle",
    "Member",
    "Overload",
    "Ownership",
    "ResolutionPolicy",
    "TypeBoundary",
    "TypeBridgeError",
    "TypeDescriptor",
    "TypeRegistry",
    "UnknownTypeError",
    "UnresolvedTypeError",
    "adopt",
    "get_config",
    "print_info",
]
