"""Resume persistence service.

Every lookup is scoped by owner: a resume belonging to another user is
treated exactly like a missing one.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.orm import Session

from career_ally.data.db import get_session
from career_ally.data.models import Resume
from career_ally.services.exceptions import ResumeNotFoundError
from career_ally.services.users import get_user_by_username

logger = logging.getLogger(__name__)

__all__ = [
    "create_resume",
    "delete_resume",
    "get_resume",
    "list_resumes",
    "load_resume",
    "set_resume_file_url",
    "update_resume",
]


def _resume_to_dict(resume: Resume) -> dict:
    """Convert a Resume model to a dictionary."""
    return {
        "id": resume.id,
        "user_id": resume.user_id,
        "name": resume.name,
        "content": dict(resume.content or {}),
        "file_url": resume.file_url,
        "created_at": resume.created_at,
        "updated_at": resume.updated_at,
    }


def _get_owned_resume(session: Session, username: str, resume_id: int) -> Resume | None:
    user = get_user_by_username(session, username)
    if not user:
        return None
    return (
        session.query(Resume)
        .filter(Resume.id == resume_id, Resume.user_id == user.id)
        .first()
    )


def list_resumes(username: str) -> list[dict] | None:
    """Get all resumes for a user, most recently updated first.

    Returns:
        List of resume dicts, or None if the user was not found.
    """
    try:
        with get_session() as session:
            user = get_user_by_username(session, username)
            if not user:
                return None

            resumes = (
                session.query(Resume)
                .filter(Resume.user_id == user.id)
                .order_by(Resume.updated_at.desc(), Resume.id.desc())
                .all()
            )
            return [_resume_to_dict(r) for r in resumes]

    except Exception:
        logger.exception("Failed to list resumes for %s", username)
        return None


def get_resume(username: str, resume_id: int) -> dict | None:
    """Get one resume owned by *username*, or None if not found."""
    try:
        with get_session() as session:
            resume = _get_owned_resume(session, username, resume_id)
            return _resume_to_dict(resume) if resume else None

    except Exception:
        logger.exception("Failed to get resume %d for %s", resume_id, username)
        return None


def load_resume(username: str, resume_id: int) -> dict:
    """Get one resume owned by *username* for export.

    Unlike :func:`get_resume`, database errors propagate so that callers
    can retry.

    Raises:
        ResumeNotFoundError: If the resume is absent or owned by someone else.
    """
    with get_session() as session:
        resume = _get_owned_resume(session, username, resume_id)
        if resume is None:
            raise ResumeNotFoundError(resume_id, username)
        return _resume_to_dict(resume)


def create_resume(username: str, name: str, content: dict[str, Any]) -> dict | None:
    """Create a resume document.

    Returns:
        The created resume as a dict, or None if the user was not found.
    """
    try:
        with get_session() as session:
            user = get_user_by_username(session, username)
            if not user:
                return None

            resume = Resume(user_id=user.id, name=name, content=content)
            session.add(resume)
            session.flush()
            return _resume_to_dict(resume)

    except Exception:
        logger.exception("Failed to create resume for %s", username)
        return None


def update_resume(
    username: str,
    resume_id: int,
    *,
    name: str | None = None,
    content: dict[str, Any] | None = None,
) -> dict | None:
    """Replace the name and/or content of a resume.

    Returns:
        The updated resume as a dict, or None if not found.
    """
    try:
        with get_session() as session:
            resume = _get_owned_resume(session, username, resume_id)
            if not resume:
                return None

            if name is not None:
                resume.name = name
            if content is not None:
                resume.content = content
            resume.updated_at = datetime.now(UTC)
            session.flush()
            return _resume_to_dict(resume)

    except Exception:
        logger.exception("Failed to update resume %d for %s", resume_id, username)
        return None


def delete_resume(username: str, resume_id: int) -> bool:
    """Delete a resume. Returns True if a row was deleted."""
    try:
        with get_session() as session:
            resume = _get_owned_resume(session, username, resume_id)
            if not resume:
                return False
            session.delete(resume)
            return True

    except Exception:
        logger.exception("Failed to delete resume %d for %s", resume_id, username)
        return False


def set_resume_file_url(username: str, resume_id: int, file_url: str) -> bool:
    """Record where the latest PDF export of a resume was stored."""
    with get_session() as session:
        resume = _get_owned_resume(session, username, resume_id)
        if not resume:
            return False
        resume.file_url = file_url
        return True
