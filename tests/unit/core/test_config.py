"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import ReportConfig
from core.constants import DEFAULT_MAX_UPLOAD_BYTES
from core.errors import ReportConfigError


def test_from_env_reads_output_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve output directory from environment."""
    monkeypatch.setenv("SDG_REPORT_OUTPUT_DIR", "./.tmp-reports")

    config = ReportConfig.from_env()

    assert config.output_dir.name == ".tmp-reports"


def test_from_env_uses_defaults() -> None:
    """Config should fall back to defaults when variables are unset."""
    config = ReportConfig.from_env()

    assert config.max_upload_bytes == DEFAULT_MAX_UPLOAD_BYTES and config.layouts_file is None


def test_from_env_raises_for_invalid_upload_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for non-numeric upload limits."""
    monkeypatch.setenv("SDG_REPORT_MAX_UPLOAD_BYTES", "lots")

    with pytest.raises(ReportConfigError):
        ReportConfig.from_env()

    assert os.getenv("SDG_REPORT_MAX_UPLOAD_BYTES") == "lots"


def test_from_env_raises_for_non_positive_upload_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject a zero upload limit."""
    monkeypatch.setenv("SDG_REPORT_MAX_UPLOAD_BYTES", "0")

    with pytest.raises(ReportConfigError):
        ReportConfig.from_env()


def test_from_env_raises_for_unknown_encoding(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject encodings unknown to the codec registry."""
    monkeypatch.setenv("SDG_REPORT_CSV_ENCODING", "not-an-encoding")

    with pytest.raises(ReportConfigError):
        ReportConfig.from_env()
