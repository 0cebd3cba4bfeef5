"""Configuration loader with caching and profile support.

Reads the ``[renderer]`` and ``[lib_log_rich]`` sections (and anything else
an operator adds) through lib_layered_config's layer precedence.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from hello_renderer import __init__conf__


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> str:
    """Return ``profile`` once lib_layered_config accepts it as a directory name.

    Raises:
        ValueError: If the name is empty, too long or escapes the config tree.

    Examples:
        >>> validate_profile("staging-v2")
        'staging-v2'
        >>> try:
        ...     validate_profile("../etc/passwd")
        ... except ValueError:
        ...     print("rejected")
        rejected
    """
    validate_profile_name(profile, max_length=max_length)
    return profile


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` bundled next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One read per (profile, start_dir) for the lifetime of the CLI process;
# a rejected profile raises before anything is cached.
@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration on top of the bundled renderer defaults.

    Precedence: defaults -> app -> host -> user -> dotenv -> env. A profile
    reads ``profile/<name>/`` in every layer instead.

    Args:
        profile: Optional profile name such as ``production`` or ``test``.
        start_dir: Directory that seeds ``.env`` discovery; cwd when None.

    Raises:
        ValueError: If ``profile`` is not a safe directory name.

    Example:
        >>> get_config().get("renderer.target_id", default="message")
        'message'
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=validate_profile(profile) if profile is not None else None,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


__all__ = [
    "validate_profile",
    "get_config",
    "get_default_config_path",
]
