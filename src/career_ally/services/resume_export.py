"""Resume export pipeline.

Fetches a resume, validates it, renders the PDF and optionally stores a
copy. The fetch-validate-render sequence is retried as a whole on
unexpected errors; missing resumes and invalid content fail immediately.
"""

from __future__ import annotations

import logging
import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from functools import partial
from typing import TypeVar
from urllib.parse import quote

from career_ally.config import Settings, get_settings
from career_ally.pdf.resume import render_resume_pdf
from career_ally.services.exceptions import (
    ExportFailedError,
    InvalidResumeContentError,
    ResumeNotFoundError,
)
from career_ally.services.resume import load_resume, set_resume_file_url
from career_ally.services.resume_data import validate_export_content

logger = logging.getLogger(__name__)

__all__ = [
    "ExportedDocument",
    "export_filename",
    "export_resume_pdf",
    "run_with_retries",
    "store_export",
]

T = TypeVar("T")

PDF_MEDIA_TYPE = "application/pdf"

_NON_RETRYABLE = (ResumeNotFoundError, InvalidResumeContentError)
_INVALID_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_NON_ASCII = re.compile(r"[^\x20-\x7e]")


@dataclass(frozen=True)
class ExportedDocument:
    """A rendered export ready to be returned to the client."""

    filename: str
    content: bytes
    media_type: str = PDF_MEDIA_TYPE
    file_url: str | None = None
    ascii_filename: str | None = None

    @property
    def content_disposition(self) -> str:
        """Attachment header with an ASCII name and, when needed, the UTF-8 name."""
        fallback = self.ascii_filename or _NON_ASCII.sub("", self.filename)
        header = f'attachment; filename="{fallback}"'
        if fallback != self.filename:
            header += f"; filename*=UTF-8''{quote(self.filename)}"
        return header


def _sanitize_filename(name: str, *, ascii_only: bool = False) -> str:
    """Remove or replace characters that are invalid in filenames."""
    sanitized = _INVALID_FILENAME_CHARS.sub("_", name)
    if ascii_only:
        sanitized = _NON_ASCII.sub("", sanitized)
    sanitized = sanitized.strip(". ")
    return sanitized or "resume"


def export_filename(
    resume_name: str, today: date | None = None, *, ascii_only: bool = False
) -> str:
    """Return ``<resume name>-<YYYY-MM-DD>.pdf``.

    With *ascii_only* non-ASCII characters are dropped, for use in HTTP headers.
    """
    today = today or date.today()
    return f"{_sanitize_filename(resume_name, ascii_only=ascii_only)}-{today.isoformat()}.pdf"


def run_with_retries(
    operation: Callable[[], T],
    *,
    attempts: int,
    delay: float,
    description: str = "operation",
) -> T:
    """Call *operation* up to *attempts* times, sleeping *delay* between tries.

    ``ResumeNotFoundError`` and ``InvalidResumeContentError`` are re-raised
    immediately.

    Raises:
        ExportFailedError: When every attempt raised an unexpected error.
    """
    last_error: Exception | None = None
    for attempt in range(1, attempts + 1):
        try:
            return operation()
        except _NON_RETRYABLE:
            raise
        except Exception as exc:
            last_error = exc
            logger.exception("%s failed (attempt %d/%d)", description, attempt, attempts)
            if attempt < attempts:
                time.sleep(delay)

    message = str(last_error) if last_error else "unknown error"
    raise ExportFailedError(attempts, message) from last_error


def _render_once(username: str, resume_id: int, template: str | None) -> tuple[dict, bytes]:
    resume = load_resume(username, resume_id)
    content = resume["content"]
    validate_export_content(content)
    logger.info(
        "Rendering resume %d with template %s",
        resume_id,
        template or content.get("template") or "default",
    )
    return resume, render_resume_pdf(content, template)


def store_export(
    username: str,
    resume: dict,
    pdf_bytes: bytes,
    settings: Settings,
    today: date | None = None,
) -> str | None:
    """Write an exported PDF to the storage directory and record its URL.

    Storage problems are logged and never fail the export.

    Returns:
        The recorded file URL, or None when storage is disabled or failed.
    """
    if settings.export_storage_dir is None:
        return None

    today = today or date.today()
    slug = re.sub(r"\s+", "-", resume["name"].strip()).lower()
    file_name = f"{_sanitize_filename(slug)}-{today.isoformat()}.pdf"
    target_dir = settings.export_storage_dir / username

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / file_name
        path.write_bytes(pdf_bytes)

        if settings.export_storage_base_url:
            file_url = f"{settings.export_storage_base_url.rstrip('/')}/{username}/{file_name}"
        else:
            file_url = path.resolve().as_uri()

        if not set_resume_file_url(username, resume["id"], file_url):
            logger.warning("Resume %d vanished before its file URL was saved", resume["id"])
            return None
    except Exception:
        logger.exception("Failed to store export of resume %d", resume["id"])
        return None

    logger.info("Stored export of resume %d at %s", resume["id"], file_url)
    return file_url


def export_resume_pdf(
    username: str,
    resume_id: int,
    *,
    template: str | None = None,
    settings: Settings | None = None,
    today: date | None = None,
) -> ExportedDocument:
    """Export a user's resume as a PDF.

    Args:
        username: Owner of the resume.
        resume_id: Resume to export.
        template: Optional template override.
        settings: Retry and storage configuration; read from the
            environment when omitted.
        today: Date used in the file name; defaults to today.

    Returns:
        The rendered document and its download file name.

    Raises:
        ResumeNotFoundError: If the resume does not exist for this user.
        InvalidResumeContentError: If required content fields are missing.
        ExportFailedError: If rendering kept failing after all retries.
    """
    settings = settings or get_settings()
    logger.info("Starting PDF export for resume %d of %s", resume_id, username)

    resume, pdf_bytes = run_with_retries(
        partial(_render_once, username, resume_id, template),
        attempts=settings.export_max_attempts,
        delay=settings.export_retry_delay,
        description=f"PDF export of resume {resume_id}",
    )

    file_url = store_export(username, resume, pdf_bytes, settings, today)
    return ExportedDocument(
        filename=export_filename(resume["name"], today),
        content=pdf_bytes,
        file_url=file_url,
        ascii_filename=export_filename(resume["name"], today, ascii_only=True),
    )
