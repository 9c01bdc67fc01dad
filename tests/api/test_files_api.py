"""
tests/api/test_files_api.py

Tests for the upload endpoints in argument_miner/api/routers/files.py, using
real multipart uploads against the app.
"""

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from argument_miner.api.dependencies import get_upload_config
from argument_miner.main import app

ESSAY = "Cats are great. Therefore, everyone should own one."


class TestUploadDocument:
    """POST /files/upload validates and decodes without analyzing."""

    def test_upload_text_file(self, client: TestClient):
        response = client.post(
            "/files/upload",
            files={"file": ("essay.txt", ESSAY.encode("utf-8"), "text/plain")},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "filename": "essay.txt",
            "text": ESSAY,
            "characters": len(ESSAY),
        }

    def test_upload_txt_extension_with_generic_type(self, client: TestClient):
        response = client.post(
            "/files/upload",
            files={"file": ("notes.txt", b"Short note.", "application/octet-stream")},
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["text"] == "Short note."

    def test_upload_rejects_unsupported_type(self, client: TestClient):
        response = client.post(
            "/files/upload",
            files={"file": ("photo.png", b"\x89PNG", "image/png")},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Please upload a text file, PDF, or Word document"

    def test_upload_rejects_oversize_file(self, client: TestClient):
        app.dependency_overrides[get_upload_config] = lambda: {
            "max_file_size_bytes": 8,
            "allowed_content_types": ["text/plain"],
            "allowed_extensions": [".txt"],
        }

        response = client.post(
            "/files/upload",
            files={"file": ("essay.txt", ESSAY.encode("utf-8"), "text/plain")},
        )

        assert response.status_code == status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
        assert response.json()["detail"] == "File size must be less than 10MB"

    def test_upload_requires_file(self, client: TestClient):
        response = client.post("/files/upload")
        assert response.status_code == 422


class TestUploadAndAnalyze:
    """POST /files/analyze decodes the upload and runs an analysis."""

    def test_analyze_uploaded_text(self, client: TestClient):
        response = client.post(
            "/files/analyze",
            files={"file": ("essay.txt", ESSAY.encode("utf-8"), "text/plain")},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["text"] == ESSAY
        assert data["mainThesis"] == "Therefore, everyone should own one."
        assert client.get("/analysis/current").json()["id"] == data["id"]

    @pytest.mark.parametrize("content", [b"", b"   \n\t"])
    def test_analyze_rejects_blank_document(self, client: TestClient, content: bytes):
        response = client.post(
            "/files/analyze",
            files={"file": ("empty.txt", content, "text/plain")},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_analyze_rejects_unsupported_type_before_analysis(self, client: TestClient):
        response = client.post(
            "/files/analyze",
            files={"file": ("photo.png", b"\x89PNG", "image/png")},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get("/analysis/history").json() == {"entries": []}
