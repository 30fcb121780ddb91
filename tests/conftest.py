"""Pytest configuration for report builder test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolated_report_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear report builder environment overrides for each test."""
    for name in (
        "SDG_REPORT_OUTPUT_DIR",
        "SDG_REPORT_MAX_UPLOAD_BYTES",
        "SDG_REPORT_CSV_ENCODING",
        "SDG_REPORT_LAYOUTS_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
