from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

import career_ally.data.db as app_db
from career_ally.data.db import init_db


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Use a temporary SQLite DB for tests touching persistence."""
    db_path = tmp_path / "api.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    monkeypatch.delenv("EXPORT_STORAGE_DIR", raising=False)
    monkeypatch.delenv("EXPORT_MAX_ATTEMPTS", raising=False)
    monkeypatch.setenv("EXPORT_RETRY_DELAY", "0")
    app_db._engine = None
    app_db._SessionLocal = None
    init_db()
    yield
    # Dispose engine to release connections
    if app_db._engine is not None:
        app_db._engine.dispose()
        app_db._engine = None
        app_db._SessionLocal = None


@pytest.fixture
def sample_document() -> dict:
    """A complete resume document touching every section."""
    return {
        "personal_info": {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "phone": "555-0100",
            "location": "London, UK",
            "linkedin": "linkedin.com/in/ada",
            "website": "ada.dev",
        },
        "summary": "Engineer focused on analytical engines and numerical methods.",
        "experience": [
            {
                "title": "Lead Analyst",
                "company": "Analytical Engines Ltd",
                "duration": "2019 - Present",
                "description": "• Designed the first published algorithm\n• Wrote extensive notes",
            }
        ],
        "education": [{"degree": "Mathematics", "school": "Home Tutoring", "year": "1833"}],
        "projects": [
            {
                "name": "Bernoulli Numbers",
                "description": "Computed Bernoulli numbers on the engine",
                "technologies": ["Punch cards", "Difference engine"],
                "url": "https://example.com/bernoulli",
            }
        ],
        "certifications": [
            {"name": "Royal Society Fellow", "issuer": "Royal Society", "date": "1840"}
        ],
        "skills": ["Mathematics", "Algorithms", "Writing"],
        "template": "professional",
    }

