"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by the metadata tests. The
``LAYEREDCONF_*`` constants locate configuration files per platform.
"""

from __future__ import annotations

name = "hello_renderer"
title = "Render a greeting into a host page once its content has loaded"
version = "1.0.0"
author = "bitranox"
shell_command = "hello-renderer"

#: Vendor directory on macOS/Windows config paths.
LAYEREDCONF_VENDOR: str = "bitranox"
#: Application directory on macOS/Windows config paths.
LAYEREDCONF_APP: str = "Hello Renderer"
#: Linux XDG directory and environment variable prefix.
LAYEREDCONF_SLUG: str = "hello-renderer"


def print_info() -> None:
    """Print the summary metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_renderer:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
