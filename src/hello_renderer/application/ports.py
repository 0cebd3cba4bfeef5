"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

:class:`HostDocument` is the one non-callable port: the shape every host
document adapter (HTML page, in-memory) exposes to the renderer.

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``RendererSettings``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat
from ..domain.sinks import ContentLoadedSignal, Sink

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import RendererSettings


class HostDocument(Protocol):
    """Sink registry plus the one-shot content-loaded signal of a host."""

    @property
    def sinks(self) -> Mapping[str, Sink]: ...

    @property
    def content_loaded(self) -> ContentLoadedSignal: ...

    def finish_loading(self) -> bool: ...

    def serialize(self) -> str: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadDocument(Protocol):
    """Load a host document from a page on disk."""

    def __call__(self, source: Path) -> HostDocument: ...


class LoadRendererSettings(Protocol):
    """Parse the [renderer] section into validated settings."""

    def __call__(self, config: Config) -> RendererSettings: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "HostDocument",
    "InitLogging",
    "LoadDocument",
    "LoadRendererSettings",
]
