"""Text preparation helpers for PDF layout.

Everything drawn with the PDF core fonts passes through
:func:`sanitize_text` first; descriptions are turned into bullet lines by
:func:`format_bullets`.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

__all__ = [
    "BULLET",
    "SKILL_SEPARATOR",
    "format_bullets",
    "format_technologies",
    "join_description",
    "sanitize_text",
]

# Core PDF fonts are latin-1 only; the middle dot is the closest safe glyph.
BULLET = "·"
SKILL_SEPARATOR = f" {BULLET} "

_NEWLINES = re.compile(r"\r\n?")
_DISALLOWED = re.compile(r"[^\x20-\x7E\n]")
_HORIZONTAL_SPACE = re.compile(r"[ \t]+")
_SPACE_AROUND_NEWLINE = re.compile(r" *\n *")
_BLANK_LINES = re.compile(r"\n{2,}")

# A newline run, or a bullet glyph followed by whitespace, starts a new bullet.
_BULLET_DELIMITER = re.compile(r"[\n\r]+\s*|\s*[•\-*]\s+")
_LEADING_GLYPH = re.compile(r"^[•\-*]\s*")


def sanitize_text(text: object) -> str:
    """Restrict *text* to printable ASCII plus newlines.

    Horizontal whitespace runs collapse to one space, blank lines collapse
    and the result is trimmed. Non-string input yields ``""``.
    """
    if not isinstance(text, str):
        if text is not None:
            logger.warning("Invalid text content of type %s", type(text).__name__)
        return ""

    cleaned = _NEWLINES.sub("\n", text).replace("\t", " ")
    cleaned = _DISALLOWED.sub("", cleaned)
    cleaned = _HORIZONTAL_SPACE.sub(" ", cleaned)
    cleaned = _SPACE_AROUND_NEWLINE.sub("\n", cleaned)
    cleaned = _BLANK_LINES.sub("\n", cleaned)
    return cleaned.strip()


def format_bullets(text: str) -> list[str]:
    """Split a free-text description into bullet lines.

    Splits on newlines and on ``•``/``-``/``*`` markers followed by
    whitespace, so ``"a - b"`` becomes two bullets. Leading markers are
    stripped and empty segments dropped.

    Example:
        >>> format_bullets("• First\\n• Second")
        ['First', 'Second']
    """
    if not text:
        return []
    bullets: list[str] = []
    for segment in _BULLET_DELIMITER.split(text):
        line = _LEADING_GLYPH.sub("", segment.strip()).strip()
        if line:
            bullets.append(line)
    return bullets


def format_technologies(technologies: object) -> str:
    """Return *technologies* (string or list) as a comma-joined string."""
    if isinstance(technologies, (list, tuple)):
        cleaned = [sanitize_text(item) for item in technologies]
        return ", ".join(item for item in cleaned if item)
    if technologies is None:
        return ""
    return sanitize_text(technologies)


def join_description(description: object) -> str:
    """Normalize a stored description to a single newline-delimited string."""
    if isinstance(description, (list, tuple)):
        return "\n".join(item for item in description if isinstance(item, str))
    if description is None:
        return ""
    return description if isinstance(description, str) else sanitize_text(description)
