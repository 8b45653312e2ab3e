"""Pydantic schemas for cover-letter export."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CoverLetterExportRequest(BaseModel):
    """Request schema for exporting a cover letter."""

    content: str = Field("", description="Letter body; each non-empty line is a paragraph")
    format: str = Field("pdf", description="Export format; only 'pdf' is supported")
    title: str = Field("", description="Used to build the download file name")
    template: str = Field("professional", description="professional, creative or technical")
