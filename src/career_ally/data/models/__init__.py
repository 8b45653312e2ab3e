"""ORM models package for database tables.

- User: Account that owns resumes
- Resume: A named resume document stored as JSON content

All models inherit from the shared Base declarative class defined in data.db.
"""

from career_ally.data.db import Base
from career_ally.data.models.resume import Resume
from career_ally.data.models.user import User

__all__ = ["Base", "Resume", "User"]
