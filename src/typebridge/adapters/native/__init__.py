"""Native object model adapters.

Contents:
    * :mod:`.pets` - Sample Pet/Dog hierarchies and their registration
"""

from __future__ import annotations

from .pets import STORES, build_pet_boundary, register_pet_types

__all__ = ["STORES", "build_pet_boundary", "register_pet_types"]
