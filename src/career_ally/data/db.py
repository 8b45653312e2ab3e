"""SQLAlchemy engine and sessions for the users and resumes tables.

``DB_URL`` selects the database; without it a SQLite file named
``career_ally.db`` next to the project is used. The engine is built on
first use and creates missing tables at that point.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

DEFAULT_DB_FILE = "career_ally.db"


class Base(DeclarativeBase):
    pass


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_database_url() -> str:
    url = os.getenv("DB_URL")
    if url:
        return url
    db_path = Path(__file__).resolve().parents[3] / DEFAULT_DB_FILE
    return f"sqlite:///{db_path.as_posix()}"


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        # Model modules must be imported so their tables are on Base.metadata.
        from career_ally.data.models import Resume, User  # noqa: F401

        _engine = create_engine(get_database_url())
        Base.metadata.create_all(bind=_engine)
    return _engine


def init_db() -> None:
    """Connect and create the ``users`` and ``resumes`` tables if missing."""
    _get_engine()


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=_get_engine(), expire_on_commit=False)

    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
