"""JSON loader for terraform validate output."""

from __future__ import annotations

from typing import TextIO

from pydantic import ValidationError

from tfv2rd.models.errors import ParseError
from tfv2rd.models.terraform import ValidateResult


class JSONLoader:
    """Parses a ``terraform validate -json`` document into a ``ValidateResult``.

    Invalid JSON and documents that do not match the expected shape both
    surface as ``ParseError``.
    """

    def load(self, stream: TextIO) -> ValidateResult:
        """Read the whole stream and parse it."""
        return self.load_string(stream.read())

    def load_string(self, content: str) -> ValidateResult:
        if not content.strip():
            raise ParseError("No input: expected terraform validate JSON output")
        try:
            return ValidateResult.model_validate_json(content)
        except ValidationError as exc:
            raise ParseError(_summarize(exc)) from exc


def _summarize(exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "Invalid terraform validate JSON: " + "; ".join(parts)
