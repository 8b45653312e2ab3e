"""Cover-letter export routes."""

from __future__ import annotations

import logging
import re

from fastapi import APIRouter, HTTPException, Response, status

from career_ally.api.schemas.cover_letters import CoverLetterExportRequest
from career_ally.pdf.cover_letter import render_cover_letter_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cover-letters", tags=["cover-letters"])


def _cover_letter_filename(title: str) -> str:
    slug = re.sub(r"\s+", "-", title.strip().lower())
    slug = re.sub(r"[^a-z0-9._-]", "", slug)
    return f"{slug or 'cover-letter'}.pdf"


@router.post(
    "/export",
    responses={200: {"content": {"application/pdf": {}}}},
)
def export_cover_letter(data: CoverLetterExportRequest) -> Response:
    """Render a cover letter to PDF and return it as a download."""
    if not data.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Content is required",
        )
    if data.format.lower() != "pdf":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF format is supported",
        )

    try:
        pdf_bytes = render_cover_letter_pdf(data.content, data.template)
    except Exception:
        logger.exception("Error exporting cover letter")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error generating PDF",
        ) from None

    filename = _cover_letter_filename(data.title)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
