"""Template listing routes."""

from __future__ import annotations

from fastapi import APIRouter

from career_ally.api.schemas.resumes import TemplateListResponse
from career_ally.templates import DEFAULT_TEMPLATE, list_templates

router = APIRouter(tags=["templates"])


@router.get("/templates", response_model=TemplateListResponse)
def list_templates_endpoint() -> TemplateListResponse:
    """List the resume templates available for PDF export."""
    return TemplateListResponse(templates=list_templates(), default=DEFAULT_TEMPLATE.value)
