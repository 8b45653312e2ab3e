"""Services"""

from career_ally.services.resume import (
    create_resume,
    delete_resume,
    get_resume,
    list_resumes,
    load_resume,
    update_resume,
)
from career_ally.services.resume_export import ExportedDocument, export_resume_pdf
from career_ally.services.users import create_user, get_user

__all__ = [
    "ExportedDocument",
    "create_resume",
    "create_user",
    "delete_resume",
    "export_resume_pdf",
    "get_resume",
    "get_user",
    "list_resumes",
    "load_resume",
    "update_resume",
]
