"""User routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from career_ally.api.dependencies import get_current_username
from career_ally.api.schemas.users import UserCreateRequest, UserResponse
from career_ally.services.users import create_user, get_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(data: UserCreateRequest) -> UserResponse:
    """Register a user so that resumes can be attached to it."""
    created = create_user(data.username, data.email)
    if created is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"User '{data.username}' already exists",
        )
    return UserResponse(**created)


@router.get("/{username}", response_model=UserResponse)
def get_user_endpoint(
    username: Annotated[str, Path(description="Username to retrieve")],
    current_username: Annotated[str, Depends(get_current_username)],
) -> UserResponse:
    """Get basic user information by username."""
    if current_username != username:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have permission to access this user's data",
        )
    user = get_user(username)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{username}' not found",
        )
    return UserResponse(**user)
