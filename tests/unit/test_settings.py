"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tfv2rd.settings import Settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.source == "terraform validate"
    assert settings.output_format == "rdjsonl"
    assert settings.skip_errors is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TFV2RD_SOURCE", "tflint")
    monkeypatch.setenv("TFV2RD_SKIP_ERRORS", "true")
    settings = Settings()
    assert settings.source == "tflint"
    assert settings.skip_errors is True


def test_dotenv_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("TFV2RD_OUTPUT_FORMAT=rdjson\nUNRELATED=1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert Settings().output_format == "rdjson"


def test_log_level_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TFV2RD_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TFV2RD_LOG_LEVEL", "VERBOSE")
    with pytest.raises(ValidationError, match="Unknown log level"):
        Settings()
