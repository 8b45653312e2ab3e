"""Runtime settings for the Career Ally export service.

Values are read from environment variables, after loading a local ``.env``
file when one is present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

__all__ = ["Settings", "get_settings"]

DEFAULT_EXPORT_MAX_ATTEMPTS = 3
DEFAULT_EXPORT_RETRY_DELAY = 1.0


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return max(1, int(raw))
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return max(0.0, float(raw))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Configuration consumed by the export pipeline and the API.

    Attributes:
        export_max_attempts: Total attempts for one PDF export request.
        export_retry_delay: Seconds to wait between failed attempts.
        export_storage_dir: When set, exported PDFs are also written here
            and the resume's ``file_url`` is updated.
        export_storage_base_url: Optional public prefix for stored files.
        log_level: Root logging level name.
    """

    export_max_attempts: int = DEFAULT_EXPORT_MAX_ATTEMPTS
    export_retry_delay: float = DEFAULT_EXPORT_RETRY_DELAY
    export_storage_dir: Path | None = None
    export_storage_base_url: str | None = None
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build a :class:`Settings` from the current environment."""
    storage_dir = os.getenv("EXPORT_STORAGE_DIR")
    return Settings(
        export_max_attempts=_int_env("EXPORT_MAX_ATTEMPTS", DEFAULT_EXPORT_MAX_ATTEMPTS),
        export_retry_delay=_float_env("EXPORT_RETRY_DELAY", DEFAULT_EXPORT_RETRY_DELAY),
        export_storage_dir=Path(storage_dir) if storage_dir else None,
        export_storage_base_url=os.getenv("EXPORT_STORAGE_BASE_URL") or None,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
