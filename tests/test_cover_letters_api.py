"""Tests for the cover-letter export endpoint."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from career_ally.api.main import app

pytestmark = pytest.mark.usefixtures("api_db")

URL = "/api/cover-letters/export"


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the API."""
    return TestClient(app)


class TestExportCoverLetter:
    def test_returns_pdf_attachment(self, client: TestClient) -> None:
        response = client.post(
            URL,
            json={"content": "Dear team,\n\nHello.", "title": "Acme Backend Role"},
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="acme-backend-role.pdf"'
        )

    def test_default_filename(self, client: TestClient) -> None:
        response = client.post(URL, json={"content": "Hello", "template": "technical"})
        assert response.status_code == 200
        assert 'filename="cover-letter.pdf"' in response.headers["content-disposition"]

    def test_empty_content(self, client: TestClient) -> None:
        response = client.post(URL, json={"content": "   "})
        assert response.status_code == 400
        assert response.json()["detail"] == "Content is required"

    def test_unsupported_format(self, client: TestClient) -> None:
        response = client.post(URL, json={"content": "Hello", "format": "docx"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Only PDF format is supported"

    def test_render_failure(self, client: TestClient) -> None:
        with patch(
            "career_ally.api.routes.cover_letters.render_cover_letter_pdf",
            side_effect=RuntimeError("font missing"),
        ):
            response = client.post(URL, json={"content": "Hello"})
        assert response.status_code == 500
        assert response.json()["detail"] == "Error generating PDF"
