"""Typographic and page-geometry bundles consumed by the PDF renderers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "LETTER",
    "PageGeometry",
    "RGB",
    "Template",
    "TemplateStyle",
]

RGB = tuple[int, int, int]
FontFamily = Literal["helvetica", "courier", "times"]


class Template(str, Enum):
    """Closed set of resume template identifiers."""

    PROFESSIONAL = "professional"
    CREATIVE = "creative"
    TECHNICAL = "technical"
    MODERN = "modern"
    EXECUTIVE = "executive"
    MINIMAL = "minimal"


@dataclass(frozen=True)
class TemplateStyle:
    """Font sizes (points), colours and line spacing (inches) for a template."""

    header_size: float
    section_header_size: float
    text_size: float
    header_color: RGB
    accent_color: RGB
    font_family: FontFamily
    line_spacing: float


@dataclass(frozen=True)
class PageGeometry:
    """Page size and margins, all in inches."""

    width: float = 8.5
    height: float = 11.0
    margin_top: float = 1.0
    margin_bottom: float = 1.0
    margin_left: float = 0.75
    margin_right: float = 0.75
    page_format: str = "letter"

    @property
    def text_width(self) -> float:
        """Horizontal space between the left and right margins."""
        return self.width - self.margin_left - self.margin_right

    @property
    def bottom_limit(self) -> float:
        """Lowest y position a line may occupy before a page break."""
        return self.height - self.margin_bottom

    @property
    def right_edge(self) -> float:
        return self.width - self.margin_right


LETTER = PageGeometry()
