"""User account service.

Accounts only anchor resume ownership; credentials live with the external
authentication provider.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from career_ally.data.db import get_session
from career_ally.data.models import User

logger = logging.getLogger(__name__)

__all__ = ["create_user", "get_user", "get_user_by_username"]


def _user_to_dict(user: User) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "created_at": user.created_at,
    }


def get_user_by_username(session: Session, username: str) -> User | None:
    """Get a user by username within an open session."""
    return session.query(User).filter(User.username == username).first()


def get_user(username: str) -> dict | None:
    """Return the user as a dict, or None if no such user exists."""
    with get_session() as session:
        user = get_user_by_username(session, username)
        return _user_to_dict(user) if user else None


def create_user(username: str, email: str | None = None) -> dict | None:
    """Create a user account.

    Args:
        username: Unique handle for the new user.
        email: Optional contact address.

    Returns:
        The created user as a dict, or None if the username is taken or
        the insert failed.
    """
    try:
        with get_session() as session:
            if get_user_by_username(session, username):
                logger.warning("User %s already exists", username)
                return None

            user = User(username=username, email=email)
            session.add(user)
            session.flush()
            return _user_to_dict(user)

    except Exception:
        logger.exception("Failed to create user %s", username)
        return None
