"""Template registry for resume PDF styles."""

from __future__ import annotations

from career_ally.templates.base import LETTER, PageGeometry, Template, TemplateStyle

__all__ = [
    "DEFAULT_TEMPLATE",
    "LETTER",
    "PageGeometry",
    "Template",
    "TemplateStyle",
    "get_style",
    "list_templates",
    "normalize_template",
]

DEFAULT_TEMPLATE = Template.PROFESSIONAL

_REGISTRY: dict[Template, TemplateStyle] = {
    Template.PROFESSIONAL: TemplateStyle(
        header_size=24,
        section_header_size=14,
        text_size=11,
        header_color=(0, 0, 0),
        accent_color=(0, 0, 255),
        font_family="helvetica",
        line_spacing=0.2,
    ),
    Template.CREATIVE: TemplateStyle(
        header_size=28,
        section_header_size=16,
        text_size=11,
        header_color=(128, 0, 128),
        accent_color=(128, 0, 128),
        font_family="helvetica",
        line_spacing=0.25,
    ),
    Template.TECHNICAL: TemplateStyle(
        header_size=22,
        section_header_size=14,
        text_size=10,
        header_color=(0, 0, 128),
        accent_color=(0, 0, 255),
        font_family="courier",
        line_spacing=0.15,
    ),
    Template.MODERN: TemplateStyle(
        header_size=26,
        section_header_size=15,
        text_size=11,
        header_color=(0, 128, 128),
        accent_color=(0, 128, 128),
        font_family="helvetica",
        line_spacing=0.22,
    ),
    Template.EXECUTIVE: TemplateStyle(
        header_size=24,
        section_header_size=16,
        text_size=11,
        header_color=(64, 64, 64),
        accent_color=(0, 0, 0),
        font_family="times",
        line_spacing=0.23,
    ),
    Template.MINIMAL: TemplateStyle(
        header_size=22,
        section_header_size=13,
        text_size=10,
        header_color=(96, 96, 96),
        accent_color=(128, 128, 128),
        font_family="helvetica",
        line_spacing=0.18,
    ),
}


def normalize_template(value: object) -> Template:
    """Return the :class:`Template` named by *value*.

    Unknown, empty or non-string values fall back to ``professional``.
    """
    if isinstance(value, Template):
        return value
    if isinstance(value, str):
        try:
            return Template(value.strip().lower())
        except ValueError:
            pass
    return DEFAULT_TEMPLATE


def get_style(template: object) -> TemplateStyle:
    """Return the style bundle for *template*, falling back to the default."""
    return _REGISTRY[normalize_template(template)]


def list_templates() -> list[str]:
    """Return the identifiers of all registered templates, in declaration order."""
    return [t.value for t in _REGISTRY]
