"""Data contracts for stored resume documents and the resume editor form.

The stored shape (``ResumeContent``) is what the PDF renderer consumes and
what is persisted as JSON. The editor works on ``ResumeFormData``, which
keeps durations and descriptions as free text; :func:`form_to_content` and
:func:`content_to_form` convert between the two.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypedDict

from career_ally.services.exceptions import InvalidResumeContentError
from career_ally.templates import normalize_template

__all__ = [
    "REQUIRED_EXPORT_FIELDS",
    "ResumeCertification",
    "ResumeContent",
    "ResumeEducation",
    "ResumeExperience",
    "ResumeFormData",
    "ResumePersonalInfo",
    "ResumeProject",
    "content_to_form",
    "form_to_content",
    "validate_export_content",
]

REQUIRED_EXPORT_FIELDS = ("personal_info", "experience", "education", "skills")


class ResumePersonalInfo(TypedDict, total=False):
    """Name and contact details shown in the resume header."""

    name: str
    full_name: str  # editor form only
    email: str
    phone: str
    location: str
    linkedin: str
    website: str


class ResumeExperience(TypedDict, total=False):
    title: str
    company: str
    duration: str  # editor form, e.g. "Jan 2020 - Present"
    start_date: str
    end_date: str
    description: str | list[str]


class ResumeEducation(TypedDict, total=False):
    degree: str
    school: str
    year: str  # editor form
    graduation_date: str


class ResumeProject(TypedDict, total=False):
    name: str
    description: str
    technologies: str | list[str]
    url: str
    link: str


class ResumeCertification(TypedDict, total=False):
    name: str
    issuer: str
    date: str
    url: str
    link: str


class ResumeContent(TypedDict, total=False):
    """Stored resume document."""

    personal_info: ResumePersonalInfo
    summary: str
    experience: list[ResumeExperience]
    education: list[ResumeEducation]
    skills: list[str]
    projects: list[ResumeProject]
    certifications: list[ResumeCertification]
    template: str
    sections: list[str]


class ResumeFormData(ResumeContent, total=False):
    """Resume editor state; same keys as the stored document."""


def _split_duration(duration: str) -> tuple[str, str | None]:
    start, sep, end = duration.partition("-")
    if not sep:
        return start.strip(), None
    end = end.strip()
    if not end or end.lower() == "present":
        return start.strip(), None
    return start.strip(), end


def form_to_content(form: Mapping[str, Any]) -> ResumeContent:
    """Convert editor form data into the stored document shape.

    ``full_name`` becomes ``name``, ``duration`` is split into
    ``start_date``/``end_date``, descriptions become lists of non-empty
    lines and ``year`` becomes ``graduation_date``.
    """
    info = form.get("personal_info") or {}
    personal_info: ResumePersonalInfo = {
        "name": info.get("full_name") or info.get("name") or "",
        "email": info.get("email") or "",
        "phone": info.get("phone") or "",
        "location": info.get("location") or "",
    }
    for key in ("linkedin", "website"):
        if info.get(key):
            personal_info[key] = info[key]

    experience: list[ResumeExperience] = []
    for exp in form.get("experience") or []:
        start, end = _split_duration(exp.get("duration") or "")
        entry: ResumeExperience = {
            "title": exp.get("title") or "",
            "company": exp.get("company") or "",
            "start_date": start,
        }
        if end:
            entry["end_date"] = end
        description = exp.get("description") or ""
        if isinstance(description, str):
            description = [line.strip() for line in description.split("\n")]
        entry["description"] = [line for line in description if line]
        experience.append(entry)

    education: list[ResumeEducation] = [
        {
            "degree": edu.get("degree") or "",
            "school": edu.get("school") or "",
            "graduation_date": edu.get("year") or edu.get("graduation_date") or "",
        }
        for edu in form.get("education") or []
    ]

    content: ResumeContent = {
        "personal_info": personal_info,
        "experience": experience,
        "education": education,
        "skills": list(form.get("skills") or []),
        "template": normalize_template(form.get("template")).value,
    }
    if form.get("summary"):
        content["summary"] = form["summary"]
    for key in ("projects", "certifications", "sections"):
        if form.get(key) is not None:
            content[key] = list(form[key])
    return content


def content_to_form(content: Mapping[str, Any]) -> ResumeFormData:
    """Convert a stored document back into editor form data.

    A stored ``duration`` is kept as is; otherwise it is rebuilt from
    ``start_date`` and ``end_date``.
    """
    info = content.get("personal_info") or {}
    personal_info: ResumePersonalInfo = {
        "full_name": info.get("name") or info.get("full_name") or "",
        "email": info.get("email") or "",
        "phone": info.get("phone") or "",
        "location": info.get("location") or "",
    }
    for key in ("linkedin", "website"):
        if info.get(key):
            personal_info[key] = info[key]

    experience: list[ResumeExperience] = []
    for exp in content.get("experience") or []:
        description = exp.get("description") or []
        if isinstance(description, list):
            description = "\n".join(description)
        duration = exp.get("duration") or (
            f"{exp.get('start_date') or ''} - {exp.get('end_date') or 'Present'}"
        )
        experience.append(
            {
                "title": exp.get("title") or "",
                "company": exp.get("company") or "",
                "duration": duration,
                "description": description,
            }
        )

    education: list[ResumeEducation] = [
        {
            "degree": edu.get("degree") or "",
            "school": edu.get("school") or "",
            "year": edu.get("graduation_date") or edu.get("year") or "",
        }
        for edu in content.get("education") or []
    ]

    form: ResumeFormData = {
        "personal_info": personal_info,
        "experience": experience,
        "education": education,
        "skills": list(content.get("skills") or []),
        "template": normalize_template(content.get("template")).value,
    }
    if content.get("summary"):
        form["summary"] = content["summary"]
    for key in ("projects", "certifications", "sections"):
        if content.get(key) is not None:
            form[key] = list(content[key])
    return form


def validate_export_content(content: object) -> None:
    """Check that *content* has every field the PDF export requires.

    Raises:
        InvalidResumeContentError: If *content* is not a mapping or any of
            ``personal_info``, ``experience``, ``education`` or ``skills``
            is missing.
    """
    if not isinstance(content, Mapping):
        raise InvalidResumeContentError(list(REQUIRED_EXPORT_FIELDS))
    missing = [field for field in REQUIRED_EXPORT_FIELDS if content.get(field) is None]
    if missing:
        raise InvalidResumeContentError(missing)
