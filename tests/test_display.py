"""Integration tests for the config display wrapper.

The wrapper flushes pending log output and delegates to lib_layered_config;
rendering details are lib_layered_config's own concern.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from hello_renderer.adapters.config.display import display_config
from hello_renderer.domain.enums import OutputFormat

RENDERER_CONFIG = {"renderer": {"message": "Hello World", "target_id": "message"}}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_raises_for_nonexistent_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    config = config_factory(RENDERER_CONFIG)

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_renderer_section(
    config_factory: Callable[[dict[str, Any]], Config],
    capsys: pytest.CaptureFixture[str],
) -> None:
    display_config(config_factory(RENDERER_CONFIG), output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[renderer]" in output
    assert 'message = "Hello World"' in output
    assert 'target_id = "message"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_renderer_section(
    config_factory: Callable[[dict[str, Any]], Config],
    capsys: pytest.CaptureFixture[str],
) -> None:
    display_config(config_factory(RENDERER_CONFIG), output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"renderer"' in output
    assert '"target_id": "message"' in output


@pytest.mark.os_agnostic
def test_display_section_filter_hides_other_sections(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({**RENDERER_CONFIG, "lib_log_rich": {"console_level": "INFO"}}, {})

    display_config(config, output_format=OutputFormat.HUMAN, section="renderer")

    output = capsys.readouterr().out
    assert "Hello World" in output
    assert "console_level" not in output


@pytest.mark.os_agnostic
def test_display_human_renders_profile_in_provenance(
    capsys: pytest.CaptureFixture[str],
    source_info_factory: Callable[..., SourceInfo],
) -> None:
    """The profile name reaches lib_layered_config's provenance comments."""
    metadata: dict[str, SourceInfo] = {
        "renderer.message": source_info_factory(
            "renderer.message", "user", "/home/user/.config/hello-renderer/config.toml"
        ),
    }
    config = Config({"renderer": {"message": "Servus"}}, metadata)

    display_config(config, output_format=OutputFormat.HUMAN, profile="production")

    assert "# layer:user profile:production" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_display_config_shows_empty_message(capsys: pytest.CaptureFixture[str]) -> None:
    """An empty message is a value, not a missing section."""
    config = Config({"renderer": {"message": ""}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="renderer")

    assert '"message": ""' in capsys.readouterr().out
