"""PDF rendering for report documents.

This module draws page descriptions onto a reportlab canvas with a
top-down cursor measured in millimetres. Wrapped text that runs past
the bottom margin continues on an extra sheet, so long indicators
grow the page instead of being truncated.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Any

from core.constants import FONT_BOLD, FONT_REGULAR, PAGE_MARGIN_MM, REPORT_AUTHOR
from core.errors import ReportDependencyError, ReportRenderError
from core.logging_config import get_logger
from core.types import (
    Page,
    PageElement,
    ProgressBar,
    ReportDocument,
    RgbColor,
    TextBlock,
    TextCell,
    VerticalGap,
)

_LOGGER = get_logger(__name__)


def render_pdf(document: ReportDocument) -> bytes:
    """Render a report document into PDF bytes.

    Args:
        document: Finalized report document.

    Returns:
        Encoded PDF file content.

    Raises:
        ReportDependencyError: If reportlab is missing.
        ReportRenderError: If reportlab fails while drawing.
    """
    reportlab = _import_reportlab()
    buffer = BytesIO()
    try:
        canvas = reportlab.canvas.Canvas(buffer, pagesize=reportlab.page_size)
        canvas.setTitle(document.title)
        canvas.setAuthor(document.author)
        canvas.setCreator(REPORT_AUTHOR)
        writer = _PageWriter(canvas, reportlab)
        for page in document.pages:
            writer.write_page(page)
        canvas.save()
    except Exception as error:
        raise ReportRenderError(f"Failed to render PDF report: {error}") from error
    content = buffer.getvalue()
    _LOGGER.info(
        "report_rendered",
        logical_pages=document.page_count,
        physical_pages=writer.sheet_count,
        byte_count=len(content),
    )
    return content


class _PageWriter:
    """Stateful cursor that draws page elements onto a canvas."""

    def __init__(self, canvas: Any, reportlab: _ReportlabModules) -> None:
        self._canvas = canvas
        self._mm = reportlab.mm
        self._split_text = reportlab.simple_split
        self._page_width_mm = reportlab.page_size[0] / reportlab.mm
        self._page_height_mm = reportlab.page_size[1] / reportlab.mm
        self._x = PAGE_MARGIN_MM
        self._y = PAGE_MARGIN_MM
        self.sheet_count = 0

    @property
    def content_width(self) -> float:
        return self._page_width_mm - 2 * PAGE_MARGIN_MM

    def write_page(self, page: Page) -> None:
        """Draw one logical page, ending with a page break."""
        self._reset_cursor()
        for element in page.elements:
            self._write_element(element)
        self._canvas.showPage()
        self.sheet_count += 1

    def _write_element(self, element: PageElement) -> None:
        if isinstance(element, TextCell):
            self._write_cell(element)
        elif isinstance(element, TextBlock):
            self._write_block(element)
        elif isinstance(element, VerticalGap):
            self._y += element.height
        elif isinstance(element, ProgressBar):
            self._write_progress_bar(element)
        else:
            raise ReportRenderError(f"Unsupported page element: {type(element).__name__}")

    def _write_cell(self, cell: TextCell) -> None:
        self._ensure_room(cell.height)
        width = cell.width if cell.width is not None else self._remaining_width()
        self._set_font(cell.font_size, cell.bold)
        baseline = self._baseline(cell.height, cell.font_size)
        if cell.align == "center":
            self._canvas.drawCentredString(self._pt_x(self._x + width / 2), baseline, cell.text)
        else:
            self._canvas.drawString(self._pt_x(self._x), baseline, cell.text)
        if cell.line_break:
            self._x = PAGE_MARGIN_MM
            self._y += cell.height
        else:
            self._x += width

    def _write_block(self, block: TextBlock) -> None:
        font_name = FONT_BOLD if block.bold else FONT_REGULAR
        lines = self._split_text(
            block.text, font_name, block.font_size, self.content_width * self._mm
        )
        for line in lines or [""]:
            self._ensure_room(block.line_height)
            self._set_font(block.font_size, block.bold)
            self._canvas.drawString(
                self._pt_x(PAGE_MARGIN_MM),
                self._baseline(block.line_height, block.font_size),
                line,
            )
            self._y += block.line_height
        self._x = PAGE_MARGIN_MM

    def _write_progress_bar(self, bar: ProgressBar) -> None:
        self._ensure_room(bar.height)
        bottom = self._pt_y(self._y + bar.height)
        self._fill_rect(PAGE_MARGIN_MM, bottom, bar.width, bar.height, bar.background_color)
        if bar.fill_width > 0:
            self._fill_rect(PAGE_MARGIN_MM, bottom, bar.fill_width, bar.height, bar.fill_color)
        self._y += bar.advance

    def _fill_rect(
        self, x_mm: float, bottom_pt: float, width_mm: float, height_mm: float, color: RgbColor
    ) -> None:
        red, green, blue = color
        self._canvas.setFillColorRGB(red / 255, green / 255, blue / 255)
        self._canvas.rect(
            self._pt_x(x_mm),
            bottom_pt,
            width_mm * self._mm,
            height_mm * self._mm,
            stroke=0,
            fill=1,
        )
        self._canvas.setFillColorRGB(0, 0, 0)

    def _ensure_room(self, height: float) -> None:
        """Start a continuation sheet when the element would cross the bottom margin."""
        if self._y + height <= self._page_height_mm - PAGE_MARGIN_MM:
            return
        if self._y == PAGE_MARGIN_MM:
            return
        self._canvas.showPage()
        self.sheet_count += 1
        self._reset_cursor()

    def _reset_cursor(self) -> None:
        self._x = PAGE_MARGIN_MM
        self._y = PAGE_MARGIN_MM

    def _remaining_width(self) -> float:
        return self._page_width_mm - PAGE_MARGIN_MM - self._x

    def _set_font(self, font_size: int, bold: bool) -> None:
        self._canvas.setFont(FONT_BOLD if bold else FONT_REGULAR, font_size)

    def _baseline(self, height: float, font_size: int) -> float:
        """Baseline that vertically centres text of font_size inside a row."""
        text_height_mm = font_size / self._mm
        return self._pt_y(self._y + (height + text_height_mm * 0.7) / 2)

    def _pt_x(self, x_mm: float) -> float:
        return x_mm * self._mm

    def _pt_y(self, y_mm: float) -> float:
        return (self._page_height_mm - y_mm) * self._mm


@dataclass(frozen=True)
class _ReportlabModules:
    """Handles to the reportlab names used by the renderer."""

    canvas: Any
    page_size: tuple[float, float]
    mm: float
    simple_split: Any


def _import_reportlab() -> _ReportlabModules:
    try:
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.units import mm
        from reportlab.lib.utils import simpleSplit
        from reportlab.pdfgen import canvas
    except ImportError as error:
        raise ReportDependencyError(
            "PDF rendering requires reportlab, but it is not installed. "
            "Install reportlab to generate reports."
        ) from error
    return _ReportlabModules(canvas=canvas, page_size=A4, mm=mm, simple_split=simpleSplit)
