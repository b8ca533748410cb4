"""Path resolution and diagnostic conversion for tfv2rd."""

from tfv2rd.converter.diagnostics import ConversionResult, convert_diagnostics
from tfv2rd.converter.paths import PathResolver, make_path_resolver
from tfv2rd.converter.pipeline import ConversionPipeline

__all__ = [
    "ConversionPipeline",
    "ConversionResult",
    "PathResolver",
    "convert_diagnostics",
    "make_path_resolver",
]
