"""Layered configuration for typebridge.

``[typebridge]`` and ``[lib_log_rich]`` are read from the bundled
``defaultconfig.toml`` and then overlaid, in order, by app, host and user
files, a ``.env`` file, and environment variables such as
``TYPEBRIDGE___TYPEBRIDGE__DEFAULT_OWNERSHIP=borrowed``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from typebridge import __init__conf__

_DEFAULT_CONFIG = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str) -> None:
    """Reject profile names that are unsafe as a path component.

    Raises:
        ValueError: The profile name is invalid.

    Examples:
        >>> validate_profile("staging-v2")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration, cached per ``(profile, start_dir)``.

    A profile reads ``profile/<name>/`` below every configuration directory.
    Call ``get_config.cache_clear()`` to force the next call to re-read
    every layer.

    Raises:
        ValueError: ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("typebridge.default_ownership")
        'owned'
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG,
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
