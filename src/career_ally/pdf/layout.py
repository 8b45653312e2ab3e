"""Vertical flow control for multi-page PDF layout.

A :class:`FlowCursor` tracks the y position of the next text baseline on the
current page of an :class:`fpdf.FPDF` document and appends pages when the
next block would not fit above the bottom margin.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from fpdf import FPDF

from career_ally.templates import PageGeometry

__all__ = [
    "Align",
    "FlowCursor",
    "create_document",
    "draw_text",
    "wrap_text",
]

Align = Literal["left", "right", "center"]

# Fixed metadata date so identical input renders to identical bytes.
DOCUMENT_DATE = datetime(2000, 1, 1, tzinfo=UTC)


def create_document(
    geometry: PageGeometry,
    *,
    unit: str = "in",
    title: str = "Resume",
    creator: str = "Career Ally AI",
) -> FPDF:
    """Return an FPDF document with one page and manual page breaks."""
    pdf = FPDF(orientation="P", unit=unit, format=geometry.page_format)
    pdf.set_auto_page_break(auto=False)
    pdf.set_margins(geometry.margin_left, geometry.margin_top, geometry.margin_right)
    pdf.set_title(title)
    pdf.set_creator(creator)
    pdf.set_creation_date(DOCUMENT_DATE)
    pdf.add_page()
    return pdf


def draw_text(pdf: FPDF, text: str, x: float, y: float, align: Align = "left") -> float:
    """Draw *text* with its baseline at *y* and return the drawn width.

    For ``right`` alignment *x* is the right edge of the text; for
    ``center`` it is the horizontal midpoint.
    """
    width = pdf.get_string_width(text)
    if align == "right":
        x -= width
    elif align == "center":
        x -= width / 2
    pdf.text(x, y, text)
    return width


def wrap_text(pdf: FPDF, text: str, max_width: float) -> list[str]:
    """Split *text* into lines no wider than *max_width* in the current font."""
    if not text:
        return []
    lines = pdf.multi_cell(max_width, 1, text, dry_run=True, output="LINES")
    return [line for line in lines if line.strip()]


class FlowCursor:
    """Write position shared by every block of one rendered document.

    Attributes:
        pdf: Document being written.
        geometry: Page size and margins.
        line_spacing: Distance between consecutive baselines.
        current_y: Baseline of the next line on the current page.
    """

    def __init__(self, pdf: FPDF, geometry: PageGeometry, line_spacing: float) -> None:
        self.pdf = pdf
        self.geometry = geometry
        self.line_spacing = line_spacing
        self.current_y = geometry.margin_top

    @property
    def page_count(self) -> int:
        return self.pdf.page

    def advance(self, height: float) -> bool:
        """Start a new page if *height* does not fit above the bottom margin.

        Returns:
            True when a page break was inserted.
        """
        if self.current_y + height > self.geometry.bottom_limit:
            self.pdf.add_page()
            self.current_y = self.geometry.margin_top
            return True
        return False

    def write_line(
        self,
        text: str,
        x: float,
        *,
        align: Align = "left",
        spacing: float | None = None,
    ) -> None:
        """Draw *text* at the cursor and move down by one line."""
        if text:
            draw_text(self.pdf, text, x, self.current_y, align)
        self.skip(self.line_spacing if spacing is None else spacing)

    def skip(self, height: float) -> None:
        """Move the cursor down without drawing."""
        self.current_y += height
