"""Tests for the resume PDF renderer."""

from __future__ import annotations

import io
from typing import Any

import pytest
from pypdf import PdfReader

from career_ally.pdf.resume import (
    DEFAULT_SECTIONS,
    ResumePdfRenderer,
    render_resume_pdf,
    resolve_sections,
)
from career_ally.templates import LETTER, TemplateStyle, get_style


def _pdf_text(pdf_bytes: bytes) -> str:
    reader = PdfReader(io.BytesIO(pdf_bytes))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def _page_count(pdf_bytes: bytes) -> int:
    return len(PdfReader(io.BytesIO(pdf_bytes)).pages)


def _recording_renderer(
    monkeypatch: pytest.MonkeyPatch, template: str = "professional"
) -> tuple[ResumePdfRenderer, list[tuple[float, float, str]]]:
    renderer = ResumePdfRenderer(get_style(template))
    calls: list[tuple[float, float, str]] = []
    original = renderer.pdf.text

    def record(x: float, y: float, text: str = "") -> None:
        calls.append((x, y, text))
        original(x, y, text)

    monkeypatch.setattr(renderer.pdf, "text", record)
    return renderer, calls


class TestResolveSections:
    def test_default_order(self) -> None:
        assert resolve_sections({}) == list(DEFAULT_SECTIONS)

    def test_custom_order_is_kept(self) -> None:
        assert resolve_sections({"sections": ["skills", "education"]}) == ["skills", "education"]

    def test_duplicates_and_case_are_normalized(self) -> None:
        sections = ["Skills", "skills", " education ", 3]
        assert resolve_sections({"sections": sections}) == ["skills", "education"]

    def test_invalid_sections_value_uses_default(self) -> None:
        assert resolve_sections({"sections": "skills"}) == list(DEFAULT_SECTIONS)


class TestRenderResumePdf:
    def test_returns_pdf_bytes(self, sample_document: dict) -> None:
        result = render_resume_pdf(sample_document)
        assert result.startswith(b"%PDF")

    def test_rendering_is_deterministic(self, sample_document: dict) -> None:
        assert render_resume_pdf(sample_document) == render_resume_pdf(sample_document)

    @pytest.mark.parametrize(
        "template",
        ["professional", "creative", "technical", "modern", "executive", "minimal"],
    )
    def test_every_template_renders(self, sample_document: dict, template: str) -> None:
        text = _pdf_text(render_resume_pdf(sample_document, template))
        assert "Ada Lovelace" in text
        assert "Lead Analyst" in text

    def test_unknown_template_matches_professional(self, sample_document: dict) -> None:
        assert render_resume_pdf(sample_document, "fancy") == render_resume_pdf(
            sample_document, "professional"
        )

    def test_template_argument_overrides_document(self, sample_document: dict) -> None:
        sample_document["template"] = "technical"
        assert render_resume_pdf(sample_document, "professional") == render_resume_pdf(
            {**sample_document, "template": "professional"}
        )

    def test_contents_are_drawn(self, sample_document: dict) -> None:
        text = _pdf_text(render_resume_pdf(sample_document))
        for expected in (
            "ada@example.com | 555-0100 | London, UK",
            "Designed the first published algorithm",
            "Wrote extensive notes",
            "Punch cards, Difference engine",
            "Home Tutoring",
            "Royal Society",
        ):
            assert expected in text

    def test_minimal_document_fits_one_page(self) -> None:
        document = {"personal_info": {"name": "A"}, "summary": "Short", "skills": ["Go"]}
        result = render_resume_pdf(document)
        assert _page_count(result) == 1
        text = _pdf_text(result)
        assert "Summary" in text
        assert "Go" in text

    def test_missing_personal_info_renders(self) -> None:
        result = render_resume_pdf({"skills": ["Go"]})
        assert _page_count(result) == 1


class TestSectionRendering:
    def test_sections_follow_document_order(self, sample_document: dict) -> None:
        sample_document["sections"] = ["skills", "education", "experience"]
        renderer = ResumePdfRenderer(get_style("professional"))
        text = _pdf_text(renderer.render(sample_document))

        assert renderer.rendered_sections == ["skills", "education", "experience"]
        assert text.index("Skills") < text.index("Education") < text.index("Experience")
        assert "Summary" not in text
        assert "Projects" not in text

    def test_default_order_renders_all_sections(self, sample_document: dict) -> None:
        renderer = ResumePdfRenderer(get_style("professional"))
        renderer.render(sample_document)
        assert renderer.rendered_sections == list(DEFAULT_SECTIONS)

    @pytest.mark.parametrize(
        ("key", "empty"),
        [
            ("summary", ""),
            ("experience", []),
            ("projects", []),
            ("education", []),
            ("certifications", []),
            ("skills", []),
        ],
    )
    def test_empty_sections_are_omitted(
        self, sample_document: dict, key: str, empty: Any
    ) -> None:
        sample_document[key] = empty
        renderer = ResumePdfRenderer(get_style("professional"))
        renderer.render(sample_document)
        assert key not in renderer.rendered_sections

    def test_unknown_section_is_skipped(self, sample_document: dict) -> None:
        sample_document["sections"] = ["hobbies", "skills"]
        renderer = ResumePdfRenderer(get_style("professional"))
        renderer.render(sample_document)
        assert renderer.rendered_sections == ["skills"]

    def test_malformed_entries_are_skipped(self, sample_document: dict) -> None:
        sample_document["experience"] = ["not a mapping", {"title": "Engineer"}]
        renderer = ResumePdfRenderer(get_style("professional"))
        text = _pdf_text(renderer.render(sample_document))
        assert "Engineer" in text
        assert "not a mapping" not in text

    def test_start_and_end_dates_form_duration(self, sample_document: dict) -> None:
        sample_document["experience"] = [
            {"title": "Engineer", "company": "Acme", "start_date": "2020"}
        ]
        text = _pdf_text(render_resume_pdf(sample_document))
        assert "2020 - Present" in text


class TestPagination:
    def test_equal_height_entries_fill_pages_predictably(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        # Quarter-inch spacing keeps every education entry exactly 0.5in tall.
        style = TemplateStyle(
            header_size=24,
            section_header_size=14,
            text_size=11,
            header_color=(0, 0, 0),
            accent_color=(0, 0, 255),
            font_family="helvetica",
            line_spacing=0.25,
        )
        renderer = ResumePdfRenderer(style)
        titles: list[tuple[int, float]] = []
        original = renderer.pdf.text

        def record(x: float, y: float, text: str = "") -> None:
            if text.startswith("Degree "):
                titles.append((renderer.pdf.page, y))
            original(x, y, text)

        monkeypatch.setattr(renderer.pdf, "text", record)
        document = {
            "personal_info": {"name": "Ada"},
            "sections": ["education"],
            "education": [
                {"degree": f"Degree {i}", "school": "School", "year": "2020"} for i in range(40)
            ],
        }
        result = renderer.render(document)

        # Header and section title end at y=2.7, leaving room for 14 entries on
        # page one; later pages hold 18 entries from y=1.0 to exactly y=10.0.
        per_page = [sum(1 for page, _ in titles if page == n) for n in (1, 2, 3)]
        assert per_page == [14, 18, 8]
        assert renderer.cursor.page_count == 3
        assert _page_count(result) == 3
        assert [y for page, y in titles if page == 2][-1] == pytest.approx(9.5)

    def test_long_resume_spans_pages_within_margins(
        self, sample_document: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        bullets = "\n".join(f"• Delivered milestone number {n} on schedule" for n in range(12))
        sample_document["experience"] = [
            {"title": f"Role {i}", "company": "Acme", "duration": "2020", "description": bullets}
            for i in range(8)
        ]
        renderer, calls = _recording_renderer(monkeypatch)
        result = renderer.render(sample_document)

        assert renderer.cursor.page_count > 1
        assert _page_count(result) == renderer.cursor.page_count
        assert all(y <= LETTER.bottom_limit for _, y, _ in calls)
        assert all(y >= LETTER.margin_top for _, y, _ in calls)

    def test_long_summary_wraps_and_skills_stay_on_one_line(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        summary = ("Seasoned engineer building reliable distributed systems. " * 10)[:500]
        document = {
            "personal_info": {"name": "Sam"},
            "summary": summary,
            "skills": ["Go"],
            "sections": ["summary", "skills"],
        }
        renderer, calls = _recording_renderer(monkeypatch)
        result = renderer.render(document)

        assert _page_count(result) == 1
        assert renderer.rendered_sections == ["summary", "skills"]
        summary_lines = [text for _, _, text in calls if text and text in summary]
        assert len(summary_lines) > 1
        assert [text for _, _, text in calls if text == "Go"] == ["Go"]

    def test_long_bullet_wraps_with_indent(
        self, sample_document: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        sample_document["experience"] = [
            {"title": "Engineer", "description": " ".join(["optimization"] * 40)}
        ]
        sample_document["sections"] = ["experience"]
        renderer, calls = _recording_renderer(monkeypatch)
        renderer.render(sample_document)

        bullet_lines = [(x, text) for x, _, text in calls if "optimization" in text]
        assert len(bullet_lines) > 1
        first_x = bullet_lines[0][0]
        assert bullet_lines[0][1].startswith("· ")
        assert all(x > first_x for x, _ in bullet_lines[1:])


class TestDrawLink:
    def test_long_link_is_downscaled_to_fit(self) -> None:
        renderer = ResumePdfRenderer(get_style("professional"))
        width = renderer.draw_link("https://example.com/" + "a" * 300)
        assert width <= LETTER.text_width + 1e-6
        assert renderer.pdf.font_size_pt == pytest.approx(11)

    def test_right_aligned_link_ends_at_margin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        renderer, calls = _recording_renderer(monkeypatch)
        width = renderer.draw_link("example.com", align="right")
        assert calls[0][0] + width == pytest.approx(LETTER.right_edge)

    def test_empty_link_draws_nothing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        renderer, calls = _recording_renderer(monkeypatch)
        assert renderer.draw_link("") == 0.0
        assert calls == []
