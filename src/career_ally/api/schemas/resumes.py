"""Pydantic schemas for resume API endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PersonalInfoSchema(BaseModel):
    """Header details of a resume."""

    name: str | None = None
    full_name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    website: str | None = None


class ExperienceSchema(BaseModel):
    title: str | None = None
    company: str | None = None
    duration: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | list[str] | None = None


class EducationSchema(BaseModel):
    degree: str | None = None
    school: str | None = None
    year: str | None = None
    graduation_date: str | None = None


class ProjectSchema(BaseModel):
    name: str | None = None
    description: str | list[str] | None = None
    technologies: str | list[str] | None = None
    url: str | None = None
    link: str | None = None


class CertificationSchema(BaseModel):
    name: str | None = None
    issuer: str | None = None
    date: str | None = None
    url: str | None = None
    link: str | None = None


class ResumeContentSchema(BaseModel):
    """Resume document as stored and exported.

    Every field is optional here; the export endpoint rejects documents
    without ``personal_info``, ``experience``, ``education`` and ``skills``.
    """

    personal_info: PersonalInfoSchema | None = None
    summary: str | None = None
    experience: list[ExperienceSchema] | None = None
    education: list[EducationSchema] | None = None
    skills: list[str] | None = None
    projects: list[ProjectSchema] | None = None
    certifications: list[CertificationSchema] | None = None
    template: str | None = Field(None, description="Template identifier")
    sections: list[str] | None = Field(None, description="Section render order")

    def to_content(self) -> dict[str, Any]:
        """Return the document as a plain dict without unset fields."""
        return self.model_dump(exclude_none=True)


class ResumeCreateRequest(BaseModel):
    """Request schema for creating a resume."""

    name: str = Field("My Resume", min_length=1, max_length=255, description="Resume name")
    content: ResumeContentSchema = Field(default_factory=ResumeContentSchema)


class ResumeUpdateRequest(BaseModel):
    """Request schema for partially updating a resume.

    Provided fields replace the stored values; ``content`` is replaced as a
    whole.
    """

    name: str | None = Field(None, min_length=1, max_length=255, description="Resume name")
    content: ResumeContentSchema | None = None


class ResumeResponse(BaseModel):
    """Response schema for a stored resume."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    content: dict[str, Any] = {}
    file_url: str | None = None
    created_at: datetime
    updated_at: datetime


class TemplateListResponse(BaseModel):
    templates: list[str]
    default: str
