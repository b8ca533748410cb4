"""Input parsing for tfv2rd."""

from tfv2rd.parser.loader import JSONLoader

__all__ = [
    "JSONLoader",
]
