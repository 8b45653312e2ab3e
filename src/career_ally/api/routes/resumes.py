"""Resume routes for the API."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi import Path as PathParam

from career_ally.api.dependencies import get_current_username
from career_ally.api.schemas.resumes import (
    ResumeContentSchema,
    ResumeCreateRequest,
    ResumeResponse,
    ResumeUpdateRequest,
)
from career_ally.services.exceptions import (
    ExportFailedError,
    InvalidResumeContentError,
    ResumeNotFoundError,
)
from career_ally.services.resume import (
    create_resume,
    delete_resume,
    get_resume,
    list_resumes,
    update_resume,
)
from career_ally.services.resume_data import content_to_form, form_to_content
from career_ally.services.resume_export import export_resume_pdf
from career_ally.services.users import get_user

router = APIRouter(prefix="/users", tags=["resumes"])

SUPPORTED_EXPORT_FORMATS = ("pdf",)


def _verify_permission_and_user(current_username: str, username: str) -> None:
    """Verify the current user has permission and the target user exists.

    Raises:
        HTTPException: 403 if no permission, 404 if user not found.
    """
    if current_username != username:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only access your own resumes",
        )
    if get_user(username) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{username}' not found",
        )


def _resume_not_found(resume_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Resume {resume_id} not found",
    )


@router.get(
    "/{username}/resumes/{resume_id}/export/{export_format}",
    responses={200: {"content": {"application/pdf": {}}}},
)
def export_resume_endpoint(
    username: Annotated[str, PathParam(description="Username")],
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    export_format: Annotated[str, PathParam(description="Export format (pdf)")],
    current_username: Annotated[str, Depends(get_current_username)],
    template: Annotated[str | None, Query(description="Template override")] = None,
) -> Response:
    """Export a resume and return it as a file download."""
    if export_format.lower() not in SUPPORTED_EXPORT_FORMATS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "Unsupported format",
                "message": "Currently only PDF format is supported",
                "requested_format": export_format,
            },
        )
    _verify_permission_and_user(current_username, username)

    try:
        exported = export_resume_pdf(username, resume_id, template=template)
    except ResumeNotFoundError:
        raise _resume_not_found(resume_id) from None
    except InvalidResumeContentError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid resume content", "missing": exc.missing},
        ) from None
    except ExportFailedError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Error generating PDF", "details": str(exc)},
        ) from None

    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": exported.content_disposition},
    )


@router.get(
    "/{username}/resumes/{resume_id}/form",
    response_model=dict[str, Any],
)
def get_resume_form(
    username: Annotated[str, PathParam(description="Username")],
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    current_username: Annotated[str, Depends(get_current_username)],
) -> dict[str, Any]:
    """Return a resume in the shape used by the resume editor."""
    _verify_permission_and_user(current_username, username)

    resume = get_resume(username, resume_id)
    if not resume:
        raise _resume_not_found(resume_id)
    return dict(content_to_form(resume["content"]))


@router.put(
    "/{username}/resumes/{resume_id}/form",
    response_model=ResumeResponse,
)
def save_resume_form(
    username: Annotated[str, PathParam(description="Username")],
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    data: ResumeContentSchema,
    current_username: Annotated[str, Depends(get_current_username)],
) -> ResumeResponse:
    """Replace a resume's content with editor form data."""
    _verify_permission_and_user(current_username, username)

    updated = update_resume(username, resume_id, content=dict(form_to_content(data.to_content())))
    if not updated:
        raise _resume_not_found(resume_id)
    return ResumeResponse(**updated)


@router.get(
    "/{username}/resumes",
    response_model=list[ResumeResponse],
)
def list_resumes_endpoint(
    username: Annotated[str, PathParam(description="Username")],
    current_username: Annotated[str, Depends(get_current_username)],
) -> list[ResumeResponse]:
    """List all resumes for a user, most recently updated first."""
    _verify_permission_and_user(current_username, username)

    results = list_resumes(username) or []
    return [ResumeResponse(**r) for r in results]


@router.get(
    "/{username}/resumes/{resume_id}",
    response_model=ResumeResponse,
)
def get_resume_endpoint(
    username: Annotated[str, PathParam(description="Username")],
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    current_username: Annotated[str, Depends(get_current_username)],
) -> ResumeResponse:
    """Get a specific resume by ID."""
    _verify_permission_and_user(current_username, username)

    result = get_resume(username, resume_id)
    if not result:
        raise _resume_not_found(resume_id)
    return ResumeResponse(**result)


@router.post(
    "/{username}/resumes",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_resume_endpoint(
    username: Annotated[str, PathParam(description="Username")],
    data: ResumeCreateRequest,
    current_username: Annotated[str, Depends(get_current_username)],
) -> ResumeResponse:
    """Create a resume document."""
    _verify_permission_and_user(current_username, username)

    result = create_resume(username, data.name, data.content.to_content())
    if not result:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Failed to save resume.",
        )
    return ResumeResponse(**result)


@router.patch(
    "/{username}/resumes/{resume_id}",
    response_model=ResumeResponse,
)
def update_resume_endpoint(
    username: Annotated[str, PathParam(description="Username")],
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    data: ResumeUpdateRequest,
    current_username: Annotated[str, Depends(get_current_username)],
) -> ResumeResponse:
    """Partial update of a resume: provided fields replace stored values."""
    _verify_permission_and_user(current_username, username)

    update_fields = data.model_dump(exclude_unset=True)
    content = data.content.to_content() if data.content is not None else None
    result = update_resume(
        username,
        resume_id,
        name=update_fields.get("name"),
        content=content,
    )
    if not result:
        raise _resume_not_found(resume_id)
    return ResumeResponse(**result)


@router.delete(
    "/{username}/resumes/{resume_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_resume_endpoint(
    username: Annotated[str, PathParam(description="Username")],
    resume_id: Annotated[int, PathParam(description="Resume ID")],
    current_username: Annotated[str, Depends(get_current_username)],
) -> None:
    """Delete a resume."""
    _verify_permission_and_user(current_username, username)

    if not delete_resume(username, resume_id):
        raise _resume_not_found(resume_id)
