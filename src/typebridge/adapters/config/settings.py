"""Boundary settings model and loader.

Provides the BoundarySettings Pydantic model for the ``[typebridge]``
configuration section and the loader that builds it from the dictionary
produced by lib_layered_config.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from typebridge.domain.enums import Ownership
from typebridge.domain.errors import ConfigurationError


class BoundarySettings(BaseModel):
    """Validated, immutable boundary settings.

    Example:
        >>> settings = BoundarySettings(default_ownership="borrowed")
        >>> settings.default_ownership
        <Ownership.BORROWED: 'borrowed'>
        >>> settings.freeze_registry
        True
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    default_ownership: Ownership = Ownership.OWNED
    freeze_registry: bool = True
    display_name_prefix: str = "example."

    @field_validator("default_ownership", mode="before")
    @classmethod
    def _normalise_ownership(cls, v: Any) -> Any:
        """Accept ownership names case-insensitively.

        Examples:
            >>> BoundarySettings._normalise_ownership(" Owned ")
            'owned'
            >>> BoundarySettings._normalise_ownership(Ownership.BORROWED)
            <Ownership.BORROWED: 'borrowed'>
        """
        if isinstance(v, str) and not isinstance(v, Ownership):
            return v.strip().lower()
        return v

    @field_validator("display_name_prefix", mode="before")
    @classmethod
    def _coerce_none_prefix(cls, v: Any) -> Any:
        return "" if v is None else v


def load_boundary_settings(config_dict: Mapping[str, Any]) -> BoundarySettings:
    """Load BoundarySettings from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Settings are read from its ``typebridge`` section.

    Returns:
        Settings with defaults for missing values.

    Raises:
        ConfigurationError: The section is not a table or holds invalid values.

    Example:
        >>> load_boundary_settings({"typebridge": {"default_ownership": "borrowed"}}).default_ownership.value
        'borrowed'
        >>> load_boundary_settings({}).display_name_prefix
        'example.'
    """
    section: Any = config_dict.get("typebridge", {})
    if section is None:
        section = {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[typebridge] must be a table, got {type(section).__name__}")
    try:
        return BoundarySettings.model_validate(dict(cast("Mapping[str, Any]", section)))
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"invalid [typebridge] configuration: {problems}") from exc


__all__ = [
    "BoundarySettings",
    "load_boundary_settings",
]
