"""Conversion of terraform validate diagnostics into reviewdog diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tfv2rd.models import reviewdog as rd
from tfv2rd.models import terraform as tf
from tfv2rd.models.errors import PathResolutionError

logger = logging.getLogger("tfv2rd.converter")

PathFunc = Callable[[str], str]

_SEVERITIES: dict[str, rd.Severity] = {
    "error": rd.Severity.ERROR,
    "warning": rd.Severity.WARNING,
    "info": rd.Severity.INFO,
}


@dataclass
class ConversionResult:
    """Converted diagnostics plus what was dropped along the way."""

    diagnostics: list[rd.Diagnostic]
    severity: rd.Severity
    source: str | None = None
    warnings: list[str] = field(default_factory=list)

    def to_diagnostic_result(self) -> rd.DiagnosticResult:
        return rd.DiagnosticResult(
            diagnostics=self.diagnostics,
            source=rd.Source(name=self.source) if self.source is not None else None,
            severity=self.severity,
        )


def map_severity(severity: str) -> rd.Severity:
    """Map a Terraform severity string; unrecognized values become UNKNOWN_SEVERITY."""
    return _SEVERITIES.get(severity, rd.Severity.UNKNOWN_SEVERITY)


def overall_severity(result: tf.ValidateResult) -> rd.Severity:
    """Worst severity of the whole validate run, taken from its own counters.

    Counters are used rather than the converted diagnostics so that
    diagnostics dropped during conversion still count.
    """
    if result.error_count > 0:
        return rd.Severity.ERROR
    if result.warning_count > 0:
        return rd.Severity.WARNING
    return rd.Severity.INFO


def _position(pos: tf.SourcePosition) -> rd.Position:
    return rd.Position(line=pos.line, column=pos.column)


def convert_diagnostic(
    diag: tf.Diagnostic,
    resolve_path: PathFunc,
    source: str | None,
) -> rd.Diagnostic:
    """Convert one located diagnostic.

    Raises ``ValueError`` if ``diag`` has no range or filename and ``PathResolutionError``
    if its filename cannot be resolved.
    """
    if diag.range is None or not diag.range.filename:
        raise ValueError("Diagnostic has no source file location")

    start = diag.range.start
    end = diag.range.end
    return rd.Diagnostic(
        message=diag.summary,
        location=rd.Location(
            path=resolve_path(diag.range.filename),
            range=(
                rd.Range(
                    start=_position(start),
                    end=_position(end) if end is not None else None,
                )
                if start is not None
                else None
            ),
        ),
        severity=map_severity(diag.severity),
        source=rd.Source(name=source) if source is not None else None,
        code=None,
        suggestions=[],
        original_output=diag.detail,
    )


def convert_diagnostics(
    result: tf.ValidateResult,
    resolve_path: PathFunc,
    *,
    skip_errors: bool = False,
    source: str | None = None,
    result_source: str | None = None,
) -> ConversionResult:
    """Convert every locatable diagnostic of ``result``, preserving order.

    Diagnostics without a range or filename are always dropped with a warning.  When
    ``skip_errors`` is set, diagnostics whose path cannot be resolved are
    dropped with a warning too; otherwise the first ``PathResolutionError``
    propagates and nothing is returned.
    """
    converted: list[rd.Diagnostic] = []
    warnings: list[str] = []

    for diag in result.diagnostics:
        if diag.range is None or not diag.range.filename:
            msg = (
                f"The TF {diag.severity} {diag.summary!r} has no source file location "
                "and cannot be reported as RdJSON, it will be ignored."
            )
            logger.warning(msg)
            warnings.append(msg)
            continue

        try:
            converted.append(convert_diagnostic(diag, resolve_path, source))
        except PathResolutionError as exc:
            if not skip_errors:
                raise
            msg = f"A TF diagnostic could not be converted and will be ignored: {exc}"
            logger.warning(msg)
            warnings.append(msg)

    return ConversionResult(
        diagnostics=converted,
        severity=overall_severity(result),
        source=result_source,
        warnings=warnings,
    )
