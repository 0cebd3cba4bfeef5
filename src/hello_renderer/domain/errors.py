"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when renderer settings are malformed or logically inconsistent.
    Typically caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from hello_renderer.domain.errors import ConfigurationError
        >>> err = ConfigurationError("renderer.target_id must not be empty")
        >>> str(err)
        'renderer.target_id must not be empty'
    """


class TargetNotFoundError(LookupError):
    """The requested sink identifier has no sink in the host document.

    Raised by the registry lookup only. The renderer converts it into a
    diagnostic and an outcome, so it never reaches renderer callers.

    Example:
        >>> err = TargetNotFoundError("message")
        >>> str(err)
        "Element with ID 'message' not found"
        >>> err.target_id
        'message'
        >>> isinstance(err, LookupError)
        True
    """

    def __init__(self, target_id: str) -> None:
        super().__init__(f"Element with ID '{target_id}' not found")
        self.target_id = target_id


__all__ = [
    "ConfigurationError",
    "TargetNotFoundError",
]
