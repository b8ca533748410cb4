"""Output model: the Reviewdog Diagnostic Format (RDFormat).

Field names and enum values follow reviewdog's ``rdf`` protobuf schema as
rendered by its JSON (rdjson / rdjsonl) readers.  Optional fields are left as
``None`` and dropped at serialization time, so ``null`` never appears in the
output.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Severity(StrEnum):
    UNKNOWN_SEVERITY = "UNKNOWN_SEVERITY"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class Position(BaseModel):
    """Line (1-based) and column (1-based, UTF-8 byte count) in a file."""

    model_config = ConfigDict(frozen=True)

    line: int | None = None
    column: int | None = None


class Range(BaseModel):
    """A text range; ``end`` is exclusive, omitted means zero-length at ``start``."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position | None = None


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    range: Range | None = None


class Source(BaseModel):
    """Where diagnostics came from, e.g. ``terraform validate``."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str | None = None


class Code(BaseModel):
    """A rule code with an optional documentation URL."""

    model_config = ConfigDict(frozen=True)

    value: str
    url: str | None = None


class Suggestion(BaseModel):
    """Replacement text for a range; insertions use ``start == end``."""

    model_config = ConfigDict(frozen=True)

    range: Range
    text: str


class Diagnostic(BaseModel):
    """A single self-contained diagnostic, one rdjsonl line."""

    model_config = ConfigDict(frozen=True)

    message: str
    location: Location
    severity: Severity | None = None
    source: Source | None = None
    code: Code | None = None
    suggestions: list[Suggestion] = []
    # Experimental in RDFormat: the tool output this diagnostic was converted from.
    original_output: str | None = None

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class DiagnosticResult(BaseModel):
    """The whole result of a diagnostic tool run, one rdjson document."""

    model_config = ConfigDict(frozen=True)

    diagnostics: list[Diagnostic] = []
    source: Source | None = None
    severity: Severity | None = None

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)
