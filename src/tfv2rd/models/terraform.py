"""Input model: the JSON document printed by ``terraform validate -json``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SourcePosition(BaseModel):
    """A position in a configuration file; line and column are 1-based."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    line: int | None = None
    column: int | None = None
    byte: int | None = None


class Range(BaseModel):
    """The source file span a diagnostic refers to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    filename: str
    start: SourcePosition | None = None
    end: SourcePosition | None = None


class Expression(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    traversal: str | None = None
    statement: str | None = None


class Snippet(BaseModel):
    """Source excerpt Terraform attaches to a diagnostic.

    Parsed for completeness only; the converter never reads it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    context: str | None = None
    code: str | None = None
    start_line: int | None = None
    highlight_start_offset: int | None = None
    highlight_end_offset: int | None = None
    values: list[Expression] = []


class Diagnostic(BaseModel):
    """One validation finding."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    severity: str
    summary: str
    detail: str | None = None
    range: Range | None = None
    snippet: Snippet | None = None


class ValidateResult(BaseModel):
    """Top-level ``terraform validate -json`` document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    format_version: Any = None
    valid: bool
    error_count: int = Field(ge=0)
    warning_count: int = Field(ge=0)
    diagnostics: list[Diagnostic] = []
