"""Boundary settings model and loader."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from typebridge.adapters.config.settings import BoundarySettings, load_boundary_settings
from typebridge.domain.enums import Ownership
from typebridge.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_defaults_when_section_is_missing() -> None:
    settings = load_boundary_settings({})

    assert settings.default_ownership is Ownership.OWNED
    assert settings.freeze_registry is True
    assert settings.display_name_prefix == "example."


@pytest.mark.os_agnostic
def test_section_values_are_applied() -> None:
    settings = load_boundary_settings(
        {"typebridge": {"default_ownership": "BORROWED", "freeze_registry": False, "display_name_prefix": "zoo."}}
    )

    assert settings.default_ownership is Ownership.BORROWED
    assert settings.freeze_registry is False
    assert settings.display_name_prefix == "zoo."


@pytest.mark.os_agnostic
def test_unknown_keys_are_ignored() -> None:
    settings = load_boundary_settings({"typebridge": {"colour": "blue"}})

    assert settings == BoundarySettings()


@pytest.mark.os_agnostic
def test_none_prefix_becomes_empty() -> None:
    assert load_boundary_settings({"typebridge": {"display_name_prefix": None}}).display_name_prefix == ""


@pytest.mark.os_agnostic
def test_null_section_uses_defaults() -> None:
    assert load_boundary_settings({"typebridge": None}) == BoundarySettings()


@pytest.mark.os_agnostic
@pytest.mark.parametrize("section", ["owned", 3, ["owned"]])
def test_non_table_section_is_rejected(section: Any) -> None:
    with pytest.raises(ConfigurationError, match=r"\[typebridge\] must be a table"):
        load_boundary_settings({"typebridge": section})


@pytest.mark.os_agnostic
def test_invalid_ownership_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="default_ownership"):
        load_boundary_settings({"typebridge": {"default_ownership": "shared"}})


@pytest.mark.os_agnostic
def test_settings_are_immutable() -> None:
    settings = BoundarySettings()

    with pytest.raises(ValidationError):
        settings.freeze_registry = False  # type: ignore[misc]
