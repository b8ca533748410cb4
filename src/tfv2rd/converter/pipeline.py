"""Orchestrates one run: JSON text → ValidateResult → reviewdog diagnostics."""

from __future__ import annotations

from typing import TextIO

from tfv2rd.converter.diagnostics import ConversionResult, convert_diagnostics
from tfv2rd.converter.paths import PathResolver
from tfv2rd.models.terraform import ValidateResult
from tfv2rd.parser.loader import JSONLoader


class ConversionPipeline:
    """Parses terraform validate output and converts it with a fixed resolver.

    The resolver is built by the caller before any input is read, so
    configuration errors surface before parsing starts.
    """

    def __init__(
        self,
        resolver: PathResolver,
        *,
        skip_errors: bool = False,
        source: str | None = None,
        result_source: str | None = None,
    ) -> None:
        self._loader = JSONLoader()
        self._resolver = resolver
        self.skip_errors = skip_errors
        self.source = source
        self.result_source = result_source

    def convert(self, content: str) -> ConversionResult:
        """Convert a complete JSON document."""
        return self._convert(self._loader.load_string(content))

    def convert_stream(self, stream: TextIO) -> ConversionResult:
        """Read ``stream`` to the end and convert it."""
        return self._convert(self._loader.load(stream))

    def _convert(self, result: ValidateResult) -> ConversionResult:
        return convert_diagnostics(
            result,
            self._resolver,
            skip_errors=self.skip_errors,
            source=self.source,
            result_source=self.result_source,
        )
