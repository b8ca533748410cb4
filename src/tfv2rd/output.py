"""Serialization of converted diagnostics as rdjson or rdjsonl."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import TextIO

from tfv2rd.converter.diagnostics import ConversionResult
from tfv2rd.models import reviewdog as rd


class OutputFormat(StrEnum):
    RDJSON = "rdjson"  # one DiagnosticResult object
    RDJSONL = "rdjsonl"  # one Diagnostic object per line

    @classmethod
    def parse(cls, name: str) -> OutputFormat:
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown output format '{name}'") from None


def write_rdjson(result: rd.DiagnosticResult, stream: TextIO) -> None:
    stream.write(result.to_json())
    stream.write("\n")


def write_rdjsonl(diagnostics: Iterable[rd.Diagnostic], stream: TextIO) -> None:
    for diag in diagnostics:
        stream.write(diag.to_json())
        stream.write("\n")


def write_output(result: ConversionResult, fmt: OutputFormat, stream: TextIO) -> None:
    """Write ``result`` to ``stream`` in the requested shape."""
    if fmt is OutputFormat.RDJSON:
        write_rdjson(result.to_diagnostic_result(), stream)
    else:
        write_rdjsonl(result.diagnostics, stream)
    stream.flush()
