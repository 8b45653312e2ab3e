"""Route handlers for the API."""

from career_ally.api.routes import cover_letters, health, resumes, templates, users

__all__ = [
    "cover_letters",
    "health",
    "resumes",
    "templates",
    "users",
]
