"""Error hierarchy for configuration, input parsing and path resolution."""

from __future__ import annotations


class Tfv2rdError(Exception):
    """Base class for all tfv2rd errors."""


class ConfigurationError(Tfv2rdError):
    """Raised when the path conversion options are inconsistent."""


class ParseError(Tfv2rdError):
    """Raised when the input is not valid terraform validate JSON."""


class PathResolutionError(Tfv2rdError):
    """Raised when a diagnostic's filename cannot be converted for output."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)
