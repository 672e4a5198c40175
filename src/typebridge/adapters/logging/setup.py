"""lib_log_rich runtime initialisation shared by every entry point.

Domain and application modules log through the standard ``logging`` module;
:func:`init_logging` starts the lib_log_rich runtime once and bridges the
standard loggers into it.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from typebridge import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are interpreted here; every other
    key passes through unchanged to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="registry", console_level="DEBUG").model_dump(exclude_none=True)
        {'service': 'registry', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name falls back to the package name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    Loads ``.env`` files first so ``LOG_*`` variables take effect, then
    attaches standard logging so ``logging.getLogger(__name__)`` records from
    the registry, resolution policy, and handles reach the runtime.

    Example:
        >>> config = Config({"lib_log_rich": {"environment": "test"}}, {})
        >>> init_logging(config)  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
