"""Request dependencies shared by the resume and user routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Header, HTTPException, status

UsernameHeader = Annotated[
    str | None,
    Header(alias="X-Username", description="Caller's username, forwarded by the auth proxy"),
]


def get_current_username(x_username: UsernameHeader = None) -> str:
    """Return the caller's username or reject the request with 401."""
    if not x_username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication. Please provide X-Username header.",
        )
    return x_username
