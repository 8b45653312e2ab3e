"""Cover-letter PDF renderer.

Cover letters are A4 pages with one-inch margins. Each paragraph is kept
together: the cursor checks the paragraph's full height before drawing it.
A paragraph taller than the usable page height is broken line by line.
"""

from __future__ import annotations

import logging
from datetime import date

from fpdf import FPDF

from career_ally.pdf.layout import FlowCursor, create_document, wrap_text
from career_ally.pdf.text import sanitize_text
from career_ally.templates import PageGeometry

logger = logging.getLogger(__name__)

__all__ = ["A4", "COVER_LETTER_TEMPLATES", "render_cover_letter_pdf"]

A4 = PageGeometry(
    width=210,
    height=297,
    margin_top=25.4,
    margin_bottom=25.4,
    margin_left=25.4,
    margin_right=25.4,
    page_format="a4",
)
LINE_HEIGHT = 5.0
DATE_GAP = 15.0
ACCENT = (100, 100, 255)
HEADER_FILL = (240, 240, 240)

COVER_LETTER_TEMPLATES = ("professional", "creative", "technical")


def _paragraphs(content: str) -> list[str]:
    cleaned = sanitize_text(content)
    return [p for p in cleaned.split("\n") if p.strip()]


def _write_paragraphs(
    pdf: FPDF,
    cursor: FlowCursor,
    paragraphs: list[str],
    gap: float,
    *,
    left_rule: bool = False,
    markers: bool = False,
) -> None:
    geometry = cursor.geometry
    usable_height = geometry.bottom_limit - geometry.margin_top
    for index, paragraph in enumerate(paragraphs):
        lines = wrap_text(pdf, paragraph, geometry.text_width)
        height = len(lines) * LINE_HEIGHT

        marker = None
        if markers and index == 0:
            marker = "/* Introduction */"
        elif markers and index == len(paragraphs) - 1:
            marker = "/* Closing */"
        marker_height = LINE_HEIGHT if marker else 0

        # Paragraphs taller than a page break line by line instead.
        keep_together = height + marker_height <= usable_height
        cursor.advance(height + marker_height if keep_together else marker_height)
        if marker:
            cursor.write_line(marker, geometry.margin_left)

        rule_x = geometry.margin_left - 5
        if left_rule and keep_together:
            _draw_rule(pdf, rule_x, cursor.current_y - 2, cursor.current_y + height - LINE_HEIGHT)

        for line in lines:
            if not keep_together:
                cursor.advance(LINE_HEIGHT)
                if left_rule:
                    y = cursor.current_y
                    _draw_rule(pdf, rule_x, y - LINE_HEIGHT + 1, y + 1)
            cursor.write_line(line, geometry.margin_left)
        cursor.skip(gap)


def _draw_rule(pdf: FPDF, x: float, top: float, bottom: float) -> None:
    pdf.set_draw_color(*ACCENT)
    pdf.set_line_width(0.5)
    pdf.line(x, top, x, bottom)
    pdf.set_draw_color(0, 0, 0)


def render_cover_letter_pdf(
    content: str,
    template: str = "professional",
    *,
    letter_date: date | None = None,
) -> bytes:
    """Render cover-letter text to an A4 PDF.

    Args:
        content: Letter body; non-empty lines are paragraphs.
        template: ``professional``, ``creative`` or ``technical``. Anything
            else renders as ``professional``.
        letter_date: Date printed above the letter; defaults to today.

    Returns:
        The PDF document as bytes.
    """
    letter_date = letter_date or date.today()
    if template not in COVER_LETTER_TEMPLATES:
        logger.debug("Unknown cover letter template %r; using professional", template)
        template = "professional"

    geometry = A4
    pdf = create_document(geometry, unit="mm", title="Cover Letter")
    cursor = FlowCursor(pdf, geometry, LINE_HEIGHT)
    paragraphs = _paragraphs(content)
    long_date = f"{letter_date:%B} {letter_date.day}, {letter_date.year}"

    if template == "creative":
        pdf.set_fill_color(*ACCENT)
        pdf.rect(0, 0, geometry.width, 15, style="F")
        pdf.set_font("helvetica", "", 11)
        cursor.write_line(long_date, geometry.margin_left, spacing=DATE_GAP)
        _write_paragraphs(pdf, cursor, paragraphs, 7, left_rule=True)
    elif template == "technical":
        pdf.set_font("courier", "", 11)
        pdf.set_fill_color(*HEADER_FILL)
        pdf.rect(
            geometry.margin_left,
            geometry.margin_top - 10,
            geometry.text_width,
            15,
            style="F",
        )
        cursor.write_line(f"// {letter_date:%m/%d/%Y}", geometry.margin_left, spacing=DATE_GAP)
        _write_paragraphs(pdf, cursor, paragraphs, 7, markers=True)
    else:
        pdf.set_font("times", "", 12)
        cursor.write_line(long_date, geometry.margin_left, spacing=DATE_GAP)
        _write_paragraphs(pdf, cursor, paragraphs, 5)

    return bytes(pdf.output())
