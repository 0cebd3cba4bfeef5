"""Fixtures for the renderer suite: host pages, sink registries and CLI services.

CLI fixtures hand the root group a services factory. Pages and configuration
may come from memory, but logging is always the real lib_log_rich runtime.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from hello_renderer.adapters.cli.context import keep_traceback_mode, use_tracebacks
from hello_renderer.domain.sinks import Sink

if TYPE_CHECKING:
    from hello_renderer.adapters.memory.document import DocumentSpy
    from hello_renderer.composition import AppServices

_COVERAGE_BASENAME = ".coverage.hello_renderer"

HELLO_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Hello World</title>
</head>
<body>
  <main class="container">
    <h1 id="message"></h1>
  </main>
  <script src="app.js"></script>
</body>
</html>
"""


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Network mounts do not give SQLite the locking it needs; this runs before
    ``pytest-cov`` creates its ``Coverage()`` object.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _with_production_logging(services: AppServices) -> AppServices:
    """Swap the no-op logging init for the real lib_log_rich runtime.

    Commands bind log context through lib_log_rich, which needs a runtime
    even when pages and configuration come from memory.
    """
    from hello_renderer.composition import build_production

    return replace(services, init_logging=build_production().init_logging)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for rendered pages and ``result.stderr`` for error
    text; ``result.output`` interleaves both.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from hello_renderer.composition import build_production

    return build_production


@pytest.fixture
def in_memory_factory() -> Callable[[], AppServices]:
    """Provide in-memory services (no files) that still start real logging."""
    from hello_renderer.composition import build_testing

    return lambda: _with_production_logging(build_testing())


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start every test with summary tracebacks and restore the flags after."""
    with keep_traceback_mode():
        use_tracebacks(False)
        yield


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before the test: a monkeypatched loader has no cache_clear.
    """
    from hello_renderer.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[..., SourceInfo]:
    """Create SourceInfo provenance entries for display tests.

    Keeps tests independent of the SourceInfo TypedDict layout.
    """

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def sink_registry() -> Callable[..., dict[str, Sink]]:
    """Build a ``{sink_id: Sink}`` registry from keyword initial texts.

    Example:
        def test_write(sink_registry) -> None:
            sinks = sink_registry(message="Old Text", footer="(c)")
    """

    def _factory(**texts: str) -> dict[str, Sink]:
        return {sink_id: Sink(sink_id, text=text) for sink_id, text in texts.items()}

    return _factory


@pytest.fixture
def hello_page(tmp_path: Path) -> Path:
    """Write the canonical host page (an empty ``#message`` heading) to disk."""
    page = tmp_path / "index.html"
    page.write_text(HELLO_PAGE, encoding="utf-8")
    return page


@pytest.fixture
def page_factory(tmp_path: Path) -> Callable[[str], Path]:
    """Write arbitrary markup to a page file and return its path."""

    def _factory(markup: str, name: str = "page.html") -> Path:
        page = tmp_path / name
        page.write_text(markup, encoding="utf-8")
        return page

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory giving production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced; the Config object is
    real.

    Example:
        def test_config_display(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"renderer": {"target_id": "out"}})
            result = cli_runner.invoke(cli, ["config"], obj=factory)
    """
    from hello_renderer.composition import build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = replace(build_production(), get_config=_fake_get_config)
        return lambda: test_services

    return _create


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records every requested profile."""
    from hello_renderer.composition import build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        test_services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: test_services

    return _inject


@dataclass
class DocumentCliContext:
    """Services factory plus the DocumentSpy serving its host documents."""

    factory: Callable[[], Any]
    spy: DocumentSpy


@pytest.fixture
def document_cli_context() -> Callable[..., DocumentCliContext]:
    """Create in-memory CLI services whose documents come from a DocumentSpy.

    Example:
        def test_render(cli_runner, document_cli_context) -> None:
            ctx = document_cli_context({"message": "Old Text"})
            result = cli_runner.invoke(cli, ["render", "index.html"], obj=ctx.factory)
            assert ctx.spy.documents[0].sinks["message"].text == "Hello World"
    """
    from hello_renderer.adapters.memory.document import DocumentSpy as DocumentSpyImpl
    from hello_renderer.composition import build_testing

    def _create(texts: Mapping[str, str] | None = None, config_data: dict[str, Any] | None = None) -> DocumentCliContext:
        spy = DocumentSpyImpl(texts=dict(texts)) if texts is not None else DocumentSpyImpl()
        services = _with_production_logging(build_testing(spy=spy))
        if config_data is not None:
            config = Config(config_data, {})

            def _fake_get_config(**_kwargs: Any) -> Config:
                return config

            services = replace(services, get_config=_fake_get_config)
        return DocumentCliContext(factory=lambda: services, spy=spy)

    return _create
