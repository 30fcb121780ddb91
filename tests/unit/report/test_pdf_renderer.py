"""Unit tests for PDF rendering."""

from __future__ import annotations

import re
from datetime import date

import pytest

from core.errors import ReportDependencyError
from core.types import GoalRecord
from report.builder import build_report
from report.pdf_renderer import render_pdf


def test_render_pdf_returns_pdf_bytes() -> None:
    """Renderer should produce a PDF document."""
    pytest.importorskip("reportlab")
    document = build_report(
        [GoalRecord("1", "Indicator text", 100.0, 50.0, "On Track")],
        generated_on=date(2024, 5, 1),
    )

    content = render_pdf(document)

    assert content.startswith(b"%PDF")


def test_render_pdf_writes_one_sheet_per_page() -> None:
    """Each logical page should become one PDF page when text fits."""
    pytest.importorskip("reportlab")
    document = build_report(
        [GoalRecord(str(index), "Short indicator", 10.0, 5.0, "Ok") for index in range(3)],
        generated_on=date(2024, 5, 1),
    )

    content = render_pdf(document)

    assert _sheet_count(content) == 4


def test_render_pdf_extends_long_indicator_onto_new_sheet() -> None:
    """Indicator text taller than a page should continue on another sheet."""
    pytest.importorskip("reportlab")
    long_indicator = " ".join(["progress"] * 1200)
    document = build_report(
        [GoalRecord("1", long_indicator, 100.0, 50.0, "On Track")],
        generated_on=date(2024, 5, 1),
    )

    content = render_pdf(document)

    assert _sheet_count(content) > 2


def test_render_pdf_raises_without_reportlab(monkeypatch) -> None:
    """Renderer should raise dependency error when reportlab is unavailable."""
    import builtins

    original_import = builtins.__import__

    def _patched_import(name, *args, **kwargs):
        if name.startswith("reportlab"):
            raise ImportError("reportlab missing")
        return original_import(name, *args, **kwargs)

    monkeypatch.setattr(builtins, "__import__", _patched_import)

    with pytest.raises(ReportDependencyError):
        render_pdf(build_report([], generated_on=date(2024, 5, 1)))


def _sheet_count(content: bytes) -> int:
    return len(re.findall(rb"/Type\s*/Page(?!s)", content))
