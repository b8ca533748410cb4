"""Pydantic models for terraform validate input and reviewdog output."""

from tfv2rd.models import reviewdog, terraform
from tfv2rd.models.errors import (
    ConfigurationError,
    ParseError,
    PathResolutionError,
    Tfv2rdError,
)

__all__ = [
    "ConfigurationError",
    "ParseError",
    "PathResolutionError",
    "Tfv2rdError",
    "reviewdog",
    "terraform",
]
