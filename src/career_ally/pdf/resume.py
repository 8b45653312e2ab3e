"""Resume PDF renderer.

Lays out a stored resume document (see
:mod:`career_ally.services.resume_data`) on US-letter pages with fpdf2.
Sections are drawn in the order given by the document's ``sections`` list;
every drawn line is preceded by a page-break check on the shared
:class:`~career_ally.pdf.layout.FlowCursor`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from career_ally.pdf.layout import Align, FlowCursor, create_document, draw_text, wrap_text
from career_ally.pdf.text import (
    BULLET,
    SKILL_SEPARATOR,
    format_bullets,
    format_technologies,
    join_description,
    sanitize_text,
)
from career_ally.templates import LETTER, PageGeometry, TemplateStyle, get_style

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_SECTIONS",
    "ResumePdfRenderer",
    "render_resume_pdf",
    "resolve_sections",
]

DEFAULT_SECTIONS: tuple[str, ...] = (
    "summary",
    "experience",
    "projects",
    "education",
    "certifications",
    "skills",
)

BULLET_INDENT = 0.15
CONTINUATION_INDENT = 0.25
HEADER_RULE_OFFSET = 0.1
LINK_UNDERLINE_OFFSET = 0.02
RULE_WIDTH = 0.02
BLACK = (0, 0, 0)


def resolve_sections(document: Mapping[str, Any]) -> list[str]:
    """Return the section identifiers to render, in order, without duplicates."""
    sections = document.get("sections")
    if not isinstance(sections, list) or not sections:
        return list(DEFAULT_SECTIONS)

    resolved: list[str] = []
    for section in sections:
        if not isinstance(section, str):
            continue
        key = section.strip().lower()
        if key and key not in resolved:
            resolved.append(key)
    return resolved


def _entries(document: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = document.get(key)
    if not isinstance(value, list):
        return []
    entries = []
    for entry in value:
        if isinstance(entry, Mapping):
            entries.append(entry)
        else:
            logger.warning("Skipping malformed %s entry of type %s", key, type(entry).__name__)
    return entries


def _experience_duration(entry: Mapping[str, Any]) -> str:
    duration = sanitize_text(entry.get("duration"))
    if duration:
        return duration
    start = sanitize_text(entry.get("start_date"))
    end = sanitize_text(entry.get("end_date"))
    if not start:
        return end
    return f"{start} - {end or 'Present'}"


class ResumePdfRenderer:
    """Single-use renderer holding the document and cursor for one export.

    Attributes:
        style: Typographic bundle of the selected template.
        geometry: Page size and margins.
        rendered_sections: Section identifiers that produced output, in order.
    """

    def __init__(self, style: TemplateStyle, geometry: PageGeometry = LETTER) -> None:
        self.style = style
        self.geometry = geometry
        self.pdf = create_document(geometry)
        self.cursor = FlowCursor(self.pdf, geometry, style.line_spacing)
        self.rendered_sections: list[str] = []
        self._section_renderers: dict[str, Callable[[Mapping[str, Any]], bool]] = {
            "summary": self._render_summary,
            "experience": self._render_experience,
            "projects": self._render_projects,
            "education": self._render_education,
            "certifications": self._render_certifications,
            "skills": self._render_skills,
        }
        self._set_text_font()

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def render(self, document: Mapping[str, Any]) -> bytes:
        """Lay out *document* and return the serialized PDF."""
        self._render_header(document.get("personal_info") or {})

        for section in resolve_sections(document):
            render_section = self._section_renderers.get(section)
            if render_section is None:
                logger.debug("No renderer for section %r; skipping", section)
                continue
            if render_section(document):
                self.rendered_sections.append(section)

        return bytes(self.pdf.output())

    def draw_link(self, text: object, *, align: Align = "left", x: float | None = None) -> float:
        """Draw accent-coloured, underlined *text* on the cursor's baseline.

        Text wider than the space between the margins is downscaled to fit
        on one line. ``right`` and ``center`` alignment are relative to the
        right margin and the page centre; *x* applies to ``left`` only.
        Does not check for a page break.

        Returns:
            The drawn width, or 0 when there was nothing to draw.
        """
        label = sanitize_text(text)
        if not label:
            return 0.0

        style = self.style
        geometry = self.geometry
        pdf = self.pdf
        self._set_text_font()

        width = pdf.get_string_width(label)
        if width > geometry.text_width:
            pdf.set_font_size(style.text_size * geometry.text_width / width)
            width = pdf.get_string_width(label)

        if align == "right":
            start_x = geometry.right_edge - width
        elif align == "center":
            start_x = (geometry.width - width) / 2
        else:
            start_x = geometry.margin_left if x is None else x

        y = self.cursor.current_y
        pdf.set_text_color(*style.accent_color)
        pdf.text(start_x, y, label)

        pdf.set_line_width(RULE_WIDTH)
        pdf.set_draw_color(*style.accent_color)
        underline_y = y + LINK_UNDERLINE_OFFSET
        pdf.line(start_x, underline_y, start_x + width, underline_y)

        pdf.set_text_color(*BLACK)
        pdf.set_draw_color(*BLACK)
        pdf.set_font_size(style.text_size)
        return width

    # ------------------------------------------------------------------
    # building blocks
    # ------------------------------------------------------------------

    def _set_text_font(self, bold: bool = False) -> None:
        self.pdf.set_font(self.style.font_family, "B" if bold else "", self.style.text_size)

    def _render_header(self, personal_info: Mapping[str, Any]) -> None:
        style = self.style
        pdf = self.pdf
        cursor = self.cursor
        center = self.geometry.width / 2

        pdf.set_font(style.font_family, "B", style.header_size)
        pdf.set_text_color(*style.header_color)
        name = sanitize_text(personal_info.get("full_name") or personal_info.get("name") or "")
        cursor.write_line(name, center, align="center", spacing=style.line_spacing * 2)

        self._set_text_font()
        pdf.set_text_color(*BLACK)
        contact = [
            sanitize_text(personal_info.get(key)) for key in ("email", "phone", "location")
        ]
        cursor.write_line(" | ".join(part for part in contact if part), center, align="center")

        links = [sanitize_text(personal_info.get(key)) for key in ("linkedin", "website")]
        links = [link for link in links if link]
        if links:
            self.draw_link(" | ".join(links), align="center")
            cursor.skip(style.line_spacing * 2)

        cursor.skip(style.line_spacing)

    def _section_header(self, title: str) -> None:
        style = self.style
        pdf = self.pdf
        cursor = self.cursor
        left = self.geometry.margin_left

        cursor.advance(style.line_spacing + HEADER_RULE_OFFSET)
        pdf.set_font(style.font_family, "B", style.section_header_size)
        pdf.set_text_color(*style.header_color)
        width = draw_text(pdf, title, left, cursor.current_y)

        rule_y = cursor.current_y + HEADER_RULE_OFFSET
        pdf.set_line_width(RULE_WIDTH)
        pdf.set_draw_color(*style.accent_color)
        pdf.line(left, rule_y, left + width, rule_y)

        pdf.set_text_color(*BLACK)
        pdf.set_draw_color(*BLACK)
        cursor.skip(style.line_spacing + HEADER_RULE_OFFSET)
        self._set_text_font()

    def _entry_heading(self, title: str, secondary: str, subline: str) -> None:
        """Bold title with right-aligned secondary field, then a normal sub-line."""
        spacing = self.style.line_spacing
        cursor = self.cursor
        left = self.geometry.margin_left

        cursor.advance(spacing * 2)
        self._set_text_font(bold=True)
        draw_text(self.pdf, title, left, cursor.current_y)
        self._set_text_font()
        if secondary:
            draw_text(self.pdf, secondary, self.geometry.right_edge, cursor.current_y, "right")
        cursor.skip(spacing)
        cursor.write_line(subline, left)

    def _bullets(self, description: object) -> None:
        spacing = self.style.line_spacing
        cursor = self.cursor
        x = self.geometry.margin_left + BULLET_INDENT
        width = self.geometry.text_width - BULLET_INDENT - CONTINUATION_INDENT

        for bullet in format_bullets(sanitize_text(join_description(description))):
            for index, line in enumerate(wrap_text(self.pdf, f"{BULLET} {bullet}", width)):
                cursor.advance(spacing)
                cursor.write_line(line, x if index == 0 else x + CONTINUATION_INDENT)
            cursor.skip(spacing * 0.5)

    def _paragraphs(self, text: str) -> None:
        cursor = self.cursor
        left = self.geometry.margin_left
        for paragraph in text.split("\n"):
            for line in wrap_text(self.pdf, paragraph, self.geometry.text_width):
                cursor.advance(self.style.line_spacing)
                cursor.write_line(line, left)

    # ------------------------------------------------------------------
    # sections
    # ------------------------------------------------------------------

    def _render_summary(self, document: Mapping[str, Any]) -> bool:
        summary = sanitize_text(document.get("summary"))
        if not summary:
            return False
        self._section_header("Summary")
        self._paragraphs(summary)
        self.cursor.skip(self.style.line_spacing)
        return True

    def _render_experience(self, document: Mapping[str, Any]) -> bool:
        entries = _entries(document, "experience")
        if not entries:
            return False
        self._section_header("Experience")
        for entry in entries:
            self._entry_heading(
                sanitize_text(entry.get("title")),
                _experience_duration(entry),
                sanitize_text(entry.get("company")),
            )
            self._bullets(entry.get("description"))
            self.cursor.skip(self.style.line_spacing)
        return True

    def _render_projects(self, document: Mapping[str, Any]) -> bool:
        entries = _entries(document, "projects")
        if not entries:
            return False
        spacing = self.style.line_spacing
        cursor = self.cursor
        left = self.geometry.margin_left

        self._section_header("Projects")
        for entry in entries:
            cursor.advance(spacing * 2)
            self._set_text_font(bold=True)
            cursor.write_line(sanitize_text(entry.get("name")), left)

            self._set_text_font()
            technologies = format_technologies(entry.get("technologies"))
            if technologies:
                draw_text(self.pdf, technologies, left, cursor.current_y)
            url = entry.get("url") or entry.get("link")
            if url:
                self.draw_link(url, align="right")
            cursor.skip(spacing)

            self._bullets(entry.get("description"))
            cursor.skip(spacing)
        return True

    def _render_education(self, document: Mapping[str, Any]) -> bool:
        entries = _entries(document, "education")
        if not entries:
            return False
        self._section_header("Education")
        for entry in entries:
            self._entry_heading(
                sanitize_text(entry.get("degree")),
                sanitize_text(entry.get("year") or entry.get("graduation_date")),
                sanitize_text(entry.get("school")),
            )
        return True

    def _render_certifications(self, document: Mapping[str, Any]) -> bool:
        entries = _entries(document, "certifications")
        if not entries:
            return False
        spacing = self.style.line_spacing
        self._section_header("Certifications")
        for entry in entries:
            self._entry_heading(
                sanitize_text(entry.get("name")),
                sanitize_text(entry.get("date")),
                sanitize_text(entry.get("issuer")),
            )
            url = entry.get("url") or entry.get("link")
            if url:
                self.cursor.advance(spacing)
                self.draw_link(url)
                self.cursor.skip(spacing)
        return True

    def _render_skills(self, document: Mapping[str, Any]) -> bool:
        skills = document.get("skills")
        if not isinstance(skills, list):
            return False
        cleaned = [sanitize_text(skill) for skill in skills]
        line = SKILL_SEPARATOR.join(skill for skill in cleaned if skill)
        if not line:
            return False

        self._section_header("Skills")
        cursor = self.cursor
        for wrapped in wrap_text(self.pdf, line, self.geometry.text_width):
            cursor.advance(self.style.line_spacing)
            cursor.write_line(wrapped, self.geometry.margin_left)
        return True


def render_resume_pdf(
    document: Mapping[str, Any],
    template: object = None,
    *,
    geometry: PageGeometry | None = None,
) -> bytes:
    """Render a resume document to PDF bytes.

    Args:
        document: Stored resume content.
        template: Template identifier overriding ``document["template"]``.
            Unknown identifiers fall back to ``professional``.
        geometry: Page configuration; US letter by default.

    Returns:
        The PDF document as bytes.
    """
    style = get_style(document.get("template") if template is None else template)
    renderer = ResumePdfRenderer(style, geometry or LETTER)
    return renderer.render(document)
