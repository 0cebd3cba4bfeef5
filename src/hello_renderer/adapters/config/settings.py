"""Renderer settings model and loader.

Provides the RendererSettings Pydantic model for the ``[renderer]`` section
and the loader that builds it from a layered Config.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from hello_renderer.domain.behaviors import CANONICAL_GREETING, DEFAULT_TARGET_ID
from hello_renderer.domain.errors import ConfigurationError


class RendererSettings(BaseModel):
    """Validated, immutable renderer settings.

    Example:
        >>> settings = RendererSettings()
        >>> settings.message, settings.target_id
        ('Hello World', 'message')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str = CANONICAL_GREETING
    target_id: str = DEFAULT_TARGET_ID

    @field_validator("target_id")
    @classmethod
    def _reject_blank_target(cls, v: str) -> str:
        """Sink identifiers are never blank."""
        if not v.strip():
            raise ValueError("target_id must not be empty")
        return v

    def with_overrides(self, *, message: str | None = None, target_id: str | None = None) -> RendererSettings:
        """Return a copy with the given CLI options applied.

        Raises:
            ConfigurationError: If an override fails validation.

        Example:
            >>> RendererSettings().with_overrides(target_id="greeting").target_id
            'greeting'
        """
        update: dict[str, str] = {}
        if message is not None:
            update["message"] = message
        if target_id is not None:
            update["target_id"] = target_id
        if not update:
            return self
        try:
            return self.model_validate({**self.model_dump(), **update})
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid renderer option: {exc}") from exc


def load_renderer_settings(config: Config) -> RendererSettings:
    """Load RendererSettings from the ``[renderer]`` configuration section.

    Args:
        config: Already-loaded layered configuration object.

    Returns:
        Validated settings; defaults fill any missing keys.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_renderer_settings(Config({"renderer": {"target_id": "out"}}, {})).target_id
        'out'
        >>> load_renderer_settings(Config({}, {})).message
        'Hello World'
    """
    section: Any = config.get("renderer", default={})
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"[renderer] must be a table, got {type(section).__name__}")
    try:
        return RendererSettings.model_validate(dict(cast(Mapping[str, Any], section)))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [renderer] configuration: {exc}") from exc


__all__ = [
    "RendererSettings",
    "load_renderer_settings",
]
