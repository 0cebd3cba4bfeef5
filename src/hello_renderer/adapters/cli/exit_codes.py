"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational only; ``lib_cli_exit_tools``
translates signals itself.

Contents:
    * :class:`ExitCode`: IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno where they apply.

    * 2: ENOENT, the host page does not exist
    * 22: EINVAL, bad option value such as an unknown config section
    * 65: EX_DATAERR, the page has no sink with the target id
    * 78: EX_CONFIG, invalid renderer configuration

    Example:
        >>> int(ExitCode.TARGET_NOT_FOUND)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    INVALID_ARGUMENT = 22
    TARGET_NOT_FOUND = 65
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
