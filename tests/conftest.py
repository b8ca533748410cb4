"""Shared test fixtures for tfv2rd."""

from __future__ import annotations

import json
import os

import pytest

from tfv2rd.models.terraform import ValidateResult
from tfv2rd.parser.loader import JSONLoader


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep TFV2RD_* variables and stray .env files out of every test."""
    for name in list(os.environ):
        if name.startswith("TFV2RD_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def loader() -> JSONLoader:
    return JSONLoader()


@pytest.fixture
def sample_result(loader: JSONLoader) -> ValidateResult:
    return loader.load_string(SAMPLE_VALIDATE_JSON)


def validate_json(*diagnostics: dict, error_count: int = 0, warning_count: int = 0) -> str:
    """Build a terraform validate document around the given diagnostics."""
    return json.dumps(
        {
            "format_version": "1.0",
            "valid": error_count == 0,
            "error_count": error_count,
            "warning_count": warning_count,
            "diagnostics": list(diagnostics),
        }
    )


QUOTED_TYPE_DIAG = {
    "severity": "error",
    "summary": "Invalid quoted type constraints",
    "detail": (
        "Terraform 0.11 and earlier required type constraints to be given in quotes, "
        'but that form is now deprecated and will be removed in a future version of '
        'Terraform. Remove the quotes around "string".'
    ),
    "range": {
        "filename": "variables.tf",
        "start": {"line": 2, "column": 17, "byte": 36},
        "end": {"line": 2, "column": 25, "byte": 44},
    },
    "snippet": {
        "context": 'variable "region"',
        "code": '  type        = "string"',
        "start_line": 2,
        "highlight_start_offset": 16,
        "highlight_end_offset": 24,
        "values": [],
    },
}

NO_RANGE_DIAG = {
    "severity": "error",
    "summary": "Could not load plugin",
    "detail": "Plugin reinitialization required. Please run \"terraform init\".",
}

DEPRECATED_DIAG = {
    "severity": "warning",
    "summary": "Deprecated attribute",
    "range": {
        "filename": "modules/network/main.tf",
        "start": {"line": 14, "column": 3, "byte": 301},
        "end": {"line": 14, "column": 20, "byte": 318},
    },
}

SAMPLE_VALIDATE_JSON = validate_json(
    QUOTED_TYPE_DIAG,
    NO_RANGE_DIAG,
    DEPRECATED_DIAG,
    error_count=2,
    warning_count=1,
)
