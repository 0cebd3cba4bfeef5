"""Package metadata tests: __init__conf__ constants against pyproject.toml.

Drift between LAYEREDCONF_* values and the project metadata makes the
configuration loader look in the wrong directories without any error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from hello_renderer import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    """Load and parse pyproject.toml from the project root."""
    return rtoml.load(PYPROJECT_PATH)


def _wheel_table() -> dict[str, Any]:
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    hatch_table = cast(dict[str, Any], tool_table.get("hatch", {}))
    targets_table = cast(dict[str, Any], cast(dict[str, Any], hatch_table.get("build", {})).get("targets", {}))
    return cast(dict[str, Any], targets_table.get("wheel", {}))


def _get_package_dir() -> Path:
    """Locate the package directory from the wheel build configuration."""
    for package_entry in cast(list[Any], _wheel_table().get("packages", [])):
        if isinstance(package_entry, str) and (PROJECT_ROOT / package_entry).is_dir():
            return PROJECT_ROOT / package_entry
    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_when_print_info_runs_it_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info lists the package name and version."""
    from hello_renderer import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for hello_renderer:" in captured
    assert f"= {__init__conf__.version}" in captured


@pytest.mark.os_agnostic
def test_metadata_constants_are_set() -> None:
    assert __init__conf__.name == "hello_renderer"
    assert __init__conf__.version
    assert __init__conf__.shell_command == "hello-renderer"


@pytest.mark.os_agnostic
def test_version_matches_pyproject_toml() -> None:
    pyproject_version = _load_pyproject()["project"]["version"]

    assert __init__conf__.version == pyproject_version


@pytest.mark.os_agnostic
def test_name_matches_pyproject_toml() -> None:
    project_name = _load_pyproject()["project"]["name"]

    assert __init__conf__.name.replace("-", "_") == project_name.replace("-", "_")


@pytest.mark.os_agnostic
def test_shell_command_is_a_declared_script() -> None:
    scripts = cast(dict[str, str], _load_pyproject()["project"]["scripts"])

    assert scripts[__init__conf__.shell_command] == "hello_renderer.entry:main"


@pytest.mark.os_agnostic
def test_layeredconf_slug_matches_project_name() -> None:
    """The slug names the Linux config directory (~/.config/<slug>/)."""
    project_name = _load_pyproject()["project"]["name"]

    assert project_name.replace("_", "-") == __init__conf__.LAYEREDCONF_SLUG


@pytest.mark.os_agnostic
@pytest.mark.parametrize("constant", ["LAYEREDCONF_VENDOR", "LAYEREDCONF_APP"])
def test_layeredconf_path_components_are_not_blank(constant: str) -> None:
    """Vendor and app name the macOS and Windows config directories."""
    assert getattr(__init__conf__, constant).strip()


@pytest.mark.os_agnostic
def test_py_typed_marker_exists() -> None:
    py_typed = _get_package_dir() / "py.typed"

    assert py_typed.is_file(), f"PEP 561 marker not found at {py_typed}"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("filename", ["py.typed", "defaultconfig.toml"])
def test_package_data_is_included_in_wheel(filename: str) -> None:
    includes = cast(list[str], _wheel_table().get("include", []))

    assert any(entry.endswith(filename) for entry in includes)
