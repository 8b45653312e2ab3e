"""Domain exceptions raised by the resume services and export pipeline."""

from __future__ import annotations

__all__ = [
    "CareerAllyError",
    "ExportFailedError",
    "InvalidResumeContentError",
    "ResumeNotFoundError",
]


class CareerAllyError(Exception):
    """Base class for all service-level errors."""


class ResumeNotFoundError(CareerAllyError):
    """Raised when a resume is absent or not owned by the requesting user."""

    def __init__(self, resume_id: int, username: str | None = None) -> None:
        self.resume_id = resume_id
        self.username = username
        super().__init__(f"Resume {resume_id} not found")


class InvalidResumeContentError(CareerAllyError):
    """Raised when a stored resume lacks fields required for export.

    Attributes:
        missing: Names of the required top-level fields that were absent.
    """

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__("Invalid resume content: missing " + ", ".join(missing))


class ExportFailedError(CareerAllyError):
    """Raised when every export attempt failed with an unexpected error."""

    def __init__(self, attempts: int, message: str) -> None:
        self.attempts = attempts
        super().__init__(f"Export failed after {attempts} attempt(s): {message}")
