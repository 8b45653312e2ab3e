"""Tests for environment-driven settings."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from career_ally.config import Settings, get_settings
from career_ally.logging_config import configure_logging

ENV_VARS = (
    "EXPORT_MAX_ATTEMPTS",
    "EXPORT_RETRY_DELAY",
    "EXPORT_STORAGE_DIR",
    "EXPORT_STORAGE_BASE_URL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestGetSettings:
    def test_defaults(self) -> None:
        assert get_settings() == Settings()
        assert Settings().export_max_attempts == 3

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("EXPORT_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("EXPORT_RETRY_DELAY", "0.5")
        monkeypatch.setenv("EXPORT_STORAGE_DIR", str(tmp_path))
        monkeypatch.setenv("EXPORT_STORAGE_BASE_URL", "https://files.example.com")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_settings()
        assert settings.export_max_attempts == 5
        assert settings.export_retry_delay == 0.5
        assert settings.export_storage_dir == tmp_path
        assert settings.export_storage_base_url == "https://files.example.com"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize(("raw", "expected"), [("abc", 3), ("0", 1), ("-4", 1)])
    def test_attempts_are_clamped(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
    ) -> None:
        monkeypatch.setenv("EXPORT_MAX_ATTEMPTS", raw)
        assert get_settings().export_max_attempts == expected

    def test_negative_delay_is_clamped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPORT_RETRY_DELAY", "-2")
        assert get_settings().export_retry_delay == 0.0


class TestConfigureLogging:
    def test_sets_root_level(self) -> None:
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("WARNING")
            assert root.level == logging.WARNING
        finally:
            root.setLevel(previous)
