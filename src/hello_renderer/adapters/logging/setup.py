"""Logging initialization shared by every entry point.

The renderer and the CLI log through stdlib ``logging``; this module makes
lib_log_rich the sink for those records, configured from the
``[lib_log_rich]`` section of the layered configuration.

Contents:
    * :class:`LoggingConfigModel` - Boundary model for the ``[lib_log_rich]`` section.
    * :func:`init_logging` - Idempotent runtime initialisation.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello_renderer import __init__conf__


class LoggingConfigModel(BaseModel):
    """Parsed ``[lib_log_rich]`` section.

    ``service`` and ``environment`` are typed; any other key passes through
    to ``lib_log_rich.runtime.RuntimeConfig`` unchanged.

    Example:
        >>> model = LoggingConfigModel(service="renderer", console_level="DEBUG")
        >>> model.service, model.environment
        ('renderer', 'prod')
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    An empty ``service`` falls back to the package name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialise lib_log_rich once and bridge stdlib logging into it.

    Loads ``.env`` files first so ``LOG_*`` variables take part. Calls after
    the first one return immediately.

    Args:
        config: Loaded layered configuration holding the ``[lib_log_rich]`` section.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
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
